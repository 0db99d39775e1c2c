# =============================================================================
# core/models/auth.py - Authentication Schemas
# =============================================================================
# Request bodies for the login/register endpoints.
# =============================================================================

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """
    Schema for logging in.

    Example:
        {"username": "farmer01", "password": "secret"}
    """
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """
    Schema for registering a user.

    Example:
        {"username": "farmer01", "password": "secret", "email": "farmer01@example.com"}
    """
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    email: EmailStr
