"""
Option Data - Pydantic models for the payloads widgets hand to their parents.

A selected search result becomes a poll option (movie, track) or a cover
image. These models fix the shape of those payloads; parents receive
plain dicts via model_dump().
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class OptionData(BaseModel):
    """Prepared data for creating a poll option from a search result."""
    title: str
    description: Optional[str] = None
    external_id: Optional[str] = None
    image_url: Optional[str] = None
    external_data: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict:
        """Dict for the parent, without unset optional fields."""
        return self.model_dump(exclude_none=True)


class ExternalImageData(BaseModel):
    """Where a cover image came from, stored next to the image URL."""
    source: str = Field(description="unsplash, tmdb, default or unknown")
    url: Optional[str] = None
    id: Optional[str] = None
    category: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)
