"""Pydantic DTOs for the Todo feature."""

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a todo."""

    title: str = Field(..., min_length=1, examples=["Buy milk"])
    description: str | None = None
    category: str = Field("", examples=["errands"])
    completed: bool = False


class TodoUpdate(BaseModel):
    """Schema for updating a todo. Only fields that are set get merged."""

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    category: str | None = None
    completed: bool | None = None
