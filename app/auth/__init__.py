# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based authentication (HS256, python-jose).
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.user_id}
# =============================================================================

from app.auth.dependencies import get_current_user, require_auth_if_enabled
from app.auth.models import AuthUser, JWTClaims
from app.auth.tokens import generate_jwt, validate_jwt

__all__ = [
    "get_current_user",
    "require_auth_if_enabled",
    "AuthUser",
    "JWTClaims",
    "generate_jwt",
    "validate_jwt",
]
