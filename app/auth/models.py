# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a JWT.

    This is the minimal user info available from the token itself,
    without querying a user store.
    """
    model_config = ConfigDict(frozen=True)

    user_id: str
    username: str


class JWTClaims(BaseModel):
    """
    Decoded JWT payload.

    Standard registered claims plus the user identity.
    """
    user_id: str
    username: str
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
    nbf: int  # Not valid before
