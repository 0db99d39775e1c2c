# =============================================================================
# app/auth/tokens.py - JWT Issue/Validate
# =============================================================================
# HS256 tokens signed with JWT_SECRET_KEY.
# =============================================================================

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import ValidationError

from app.config import settings
from app.auth.models import JWTClaims

ALGORITHM = "HS256"


def generate_jwt(
    user_id: str,
    username: str,
    secret_key: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """
    Issue a signed token.

    Args:
        user_id: Subject user ID
        username: Subject username
        secret_key: Signing key (defaults to JWT_SECRET_KEY)
        expires_in: Lifetime (defaults to JWT_EXPIRE_HOURS)

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expires_in = expires_in if expires_in is not None else timedelta(hours=settings.JWT_EXPIRE_HOURS)
    claims = {
        "user_id": user_id,
        "username": username,
        "exp": int((now + expires_in).timestamp()),
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
    }
    return jwt.encode(claims, secret_key or settings.JWT_SECRET_KEY, algorithm=ALGORITHM)


def validate_jwt(token: str, secret_key: str | None = None) -> JWTClaims:
    """
    Verify signature and time claims, then parse the payload.

    Raises:
        ExpiredSignatureError: token expired
        JWTError: bad signature, malformed token, or missing claims
    """
    payload = jwt.decode(token, secret_key or settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])
    try:
        return JWTClaims(**payload)
    except ValidationError as e:
        raise JWTError(f"Invalid claims: {e.error_count()} error(s)")
