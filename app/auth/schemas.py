"""Authentication schemas."""
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, EmailStr, Field, field_validator, field_serializer


Gender = Literal['male', 'female', 'other', 'prefer-not-to-say']


class RegisterRequest(BaseModel):
    """Schema for account registration."""
    name: str = Field(..., min_length=2, max_length=50, description="Name must be between 2 and 50 characters")
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters long")
    age: int = Field(..., ge=13, le=120, description="Age must be between 13 and 120")
    gender: Gender
    country: str = Field(..., min_length=2, max_length=100, description="Country must be between 2 and 100 characters")

    @field_validator('name', 'country', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1, description="Password is required")

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserInfo(BaseModel):
    """Public user info - never includes the password hash."""
    id: str
    name: str
    email: str
    age: int
    gender: str
    country: str
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    last_login: datetime | None = Field(default=None, serialization_alias="lastLogin")

    model_config = {"from_attributes": True}

    @field_serializer('created_at', 'last_login')
    def serialize_datetime(self, v: datetime | None) -> str | None:
        if v is None:
            return None
        return v.isoformat()


class AuthResponse(BaseModel):
    """Schema for register/login responses."""
    success: bool = True
    message: str
    token: str
    token_type: str = "bearer"
    user: UserInfo


class MeResponse(BaseModel):
    """Schema for the current-user response."""
    success: bool = True
    user: UserInfo


class MessageResponse(BaseModel):
    """Plain success/message response."""
    success: bool = True
    message: str
