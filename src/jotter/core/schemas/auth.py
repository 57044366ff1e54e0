"""
Authentication schemas.

API contracts for registration, login and the current-user profile.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=1, max_length=50, description="Username")
    password: str = Field(min_length=1, max_length=128, description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "john_doe", "password": "securepassword123"}}
    )


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=8, max_length=128, description="User password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Letters, numbers, hyphens and underscores only."""
        if not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "email": "new_user@example.com",
                "password": "securepassword123",
            }
        }
    )


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    email: str = Field(description="Email address")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Issued token plus the authenticated user."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")
    user: UserResponse = Field(description="User information")
