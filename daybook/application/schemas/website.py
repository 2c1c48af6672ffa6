"""Pydantic DTOs for bookmarked websites."""

from urllib.parse import urlparse

from pydantic import BaseModel, Field, model_validator

PLACEHOLDER_ICON = "https://via.placeholder.com/64?text=web"


def favicon_for(url: str) -> str:
    """Guess the favicon location of a site from its URL."""
    parsed = urlparse(url if "://" in url else f"https://{url}")
    if not parsed.netloc:
        return PLACEHOLDER_ICON
    return f"{parsed.scheme}://{parsed.netloc}/favicon.ico"


class WebsiteCreate(BaseModel):
    """Schema for bookmarking a website; the icon defaults to its favicon."""

    name: str = Field(..., min_length=1, examples=["Python"])
    url: str = Field(..., min_length=1, examples=["https://www.python.org"])
    icon: str = ""
    category: str = ""
    description: str | None = None

    @model_validator(mode="after")
    def _default_icon(self) -> "WebsiteCreate":
        if not self.icon:
            self.icon = favicon_for(self.url)
        return self


class WebsiteUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    url: str | None = Field(None, min_length=1)
    icon: str | None = None
    category: str | None = None
    description: str | None = None
    position: int | None = Field(None, ge=0)
