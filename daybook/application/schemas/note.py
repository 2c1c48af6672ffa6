"""Pydantic DTOs for the Note feature."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _normalise_tags(value: Any) -> Any:
    """Accept "a, b , ,c" as well as a list; trim entries and drop blanks."""
    if value is None:
        return value
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    return value


class NoteCreate(BaseModel):
    """Schema for creating a note."""

    title: str = Field(..., min_length=1)
    content: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list, examples=[["work", "ideas"]])

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        return _normalise_tags(value)


class NoteUpdate(BaseModel):
    """Schema for updating a note; all fields optional."""

    title: str | None = Field(None, min_length=1)
    content: str | None = None
    category: str | None = None
    tags: list[str] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        return _normalise_tags(value)
