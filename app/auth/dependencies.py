# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.user_id}
#
# Route groups that are only protected when AUTH_ENABLED is set use
# `require_auth_if_enabled` as a router-level dependency instead.
# =============================================================================

import logging

from fastapi import Request
from jose import ExpiredSignatureError, JWTError

from app.config import settings
from app.auth.models import AuthUser
from app.auth.tokens import validate_jwt
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an Authorization header value.

    Raises:
        UnauthorizedError: header missing, or not exactly "Bearer <token>"
    """
    if not authorization:
        raise UnauthorizedError("Missing authentication token")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("Malformed authentication token")

    return parts[1]


async def get_current_user(request: Request) -> AuthUser:
    """
    Extract and validate the user from the bearer token.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies the HS256 signature and the exp/nbf claims
    3. Stores user_id, username and the claims on request.state
    4. Returns an AuthUser

    Raises:
        UnauthorizedError: 401 if the token is missing, malformed, invalid or expired
    """
    token = extract_bearer_token(request.headers.get("Authorization"))

    try:
        claims = validate_jwt(token)
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise UnauthorizedError("Token is invalid or expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise UnauthorizedError("Token is invalid or expired")

    request.state.user_id = claims.user_id
    request.state.username = claims.username
    request.state.jwt_claims = claims

    logger.debug(f"Authenticated user: {claims.user_id}")
    return AuthUser(user_id=claims.user_id, username=claims.username)


async def require_auth_if_enabled(request: Request) -> AuthUser | None:
    """
    Enforce get_current_user only when AUTH_ENABLED is true.

    Returns:
        AuthUser when enforced, None otherwise
    """
    if not settings.AUTH_ENABLED:
        return None
    return await get_current_user(request)
