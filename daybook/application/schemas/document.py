"""Pydantic DTOs for uploaded documents."""

from pydantic import BaseModel, Field, field_validator, model_validator

from daybook.domain.entities import PREVIEW_LIMIT, file_type_for


class DocumentCreate(BaseModel):
    """Schema for filing a new document.

    ``type`` is derived from the file extension when omitted and
    ``category`` falls back to the type. The preview is cut to
    ``PREVIEW_LIMIT`` characters.
    """

    name: str = Field(..., min_length=1, examples=["report.pdf"])
    type: str | None = None
    size: int = Field(0, ge=0)
    category: str | None = None
    content: str | None = None
    file_data: str | None = None
    folder_id: str | None = None

    @field_validator("content")
    @classmethod
    def _truncate_preview(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return value[:PREVIEW_LIMIT]

    @field_validator("folder_id")
    @classmethod
    def _blank_folder_is_root(cls, value: str | None) -> str | None:
        return value or None

    @model_validator(mode="after")
    def _fill_type_and_category(self) -> "DocumentCreate":
        if not self.type:
            self.type = file_type_for(self.name)
        if not self.category:
            self.category = self.type
        return self


class DocumentUpdate(BaseModel):
    """Schema for updating a document; all fields optional."""

    name: str | None = Field(None, min_length=1)
    type: str | None = None
    size: int | None = Field(None, ge=0)
    category: str | None = None
    content: str | None = None
    file_data: str | None = None
    folder_id: str | None = None

    @field_validator("content")
    @classmethod
    def _truncate_preview(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return value[:PREVIEW_LIMIT]
