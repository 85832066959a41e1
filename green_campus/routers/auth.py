from fastapi import APIRouter, Depends
import logging

from green_campus.dependencies import get_user_service
from green_campus.exceptions import InvalidCredentials
from green_campus.schemas.user import (
    AdminLogin,
    AdminLoginResponse,
    AdminUser,
    LoginResponse,
    MessageResponse,
    PasswordReset,
    RegisterResponse,
    ResetRequest,
    UserCreate,
    UserLogin,
    UserResponse,
)
from green_campus.security import check_admin_credentials, create_admin_token, create_user_token
from green_campus.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: UserCreate,
    users: UserService = Depends(get_user_service)
):
    """Create an account"""
    user = await users.register(body.email, body.password, body.full_name, body.location)
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: UserLogin,
    users: UserService = Depends(get_user_service)
):
    """Exchange credentials for a bearer token"""
    user = await users.login(body.email, body.password)
    logger.info(f"User {user.id} logged in")
    return LoginResponse(
        token=create_user_token(user.id, user.email),
        user=UserResponse.model_validate(user)
    )


@router.post("/reset-request", response_model=MessageResponse)
async def reset_request(
    body: ResetRequest,
    users: UserService = Depends(get_user_service)
):
    """Email a password reset token"""
    await users.request_password_reset(body.email)
    return MessageResponse(message="Password reset token sent to your email")


@router.post("/reset", response_model=MessageResponse)
async def reset_password(
    body: PasswordReset,
    users: UserService = Depends(get_user_service)
):
    await users.reset_password(body.email, body.token, body.new_password)
    return MessageResponse(message="Password reset successfully")


@router.post("/admin-login", response_model=AdminLoginResponse)
async def admin_login(body: AdminLogin):
    """Log in with the configured admin account"""
    if not check_admin_credentials(body.username, body.password):
        logger.warning("Rejected admin login")
        raise InvalidCredentials("Invalid admin credentials")
    logger.info(f"Admin {body.username} logged in")
    return AdminLoginResponse(
        token=create_admin_token(body.username),
        user=AdminUser(username=body.username)
    )
