"""Pydantic DTOs for account registration."""

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Schema for registering a new account."""

    username: str = Field(..., min_length=1, max_length=100, examples=["alice"])
    email: str = Field("", max_length=255, examples=["alice@example.com"])
    password: str = Field(..., min_length=1)
