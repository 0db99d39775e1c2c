# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Login/register are stubs: no user store exists yet, so credentials are
# not checked and nothing is saved. Login does issue a real signed token
# so clients can exercise the protected routes.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser
from app.auth.tokens import generate_jwt
from app.responses import now_str, success_response
from core.models.auth import LoginRequest, RegisterRequest
from core.models.common import APIResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=APIResponse)
async def login(request: LoginRequest):
    """
    Log in and receive a bearer token.

    Returns:
        token and user {username, login_time}
    """
    # TODO: check the password against the user table once it exists
    token = generate_jwt(user_id=f"user_{request.username}", username=request.username)
    logger.info(f"Issued token for {request.username}")

    return success_response({
        "token": token,
        "user": {
            "username": request.username,
            "login_time": now_str(),
        },
    })


@router.post("/register", response_model=APIResponse)
async def register(request: RegisterRequest):
    """
    Register a user.

    Returns:
        message and user {username, email, register_time}
    """
    logger.info(f"Registered user {request.username}")

    return success_response({
        "message": "User registered",
        "user": {
            "username": request.username,
            "email": request.email,
            "register_time": now_str(),
        },
    })


@router.get("/verify", response_model=APIResponse)
async def verify_token(user: AuthUser = Depends(get_current_user)):
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.

    Raises:
        401: If token is missing, malformed, invalid or expired
    """
    return success_response({
        "message": "Token is valid",
        "valid": True,
        "user_id": user.user_id,
        "username": user.username,
    })
