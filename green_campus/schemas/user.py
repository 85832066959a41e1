from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)


class UserLogin(BaseModel):
    email: str
    password: str


class AdminLogin(BaseModel):
    username: str
    password: str


class ResetRequest(BaseModel):
    email: str


class PasswordReset(BaseModel):
    email: str
    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)


class UserResponse(BaseModel):
    """Public view of a user; the password hash and reset token never leave the server."""
    id: int
    email: str
    full_name: str
    location: Optional[str] = None
    email_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    token: str
    user: UserResponse


class AdminUser(BaseModel):
    username: str
    is_admin: bool = Field(True, serialization_alias="isAdmin")


class AdminLoginResponse(BaseModel):
    token: str
    user: AdminUser


class MessageResponse(BaseModel):
    message: str


class LeaderboardEntry(BaseModel):
    id: int
    full_name: str
    location: Optional[str] = None
    tree_count: int
    rank: int
