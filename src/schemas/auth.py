"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class UserSignup(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(BaseModel):
    """Session token handed back after signup or login."""

    success: bool = True
    token: str


class SessionIdentity(BaseModel):
    """Identity claim carried inside a session token."""

    id: int
