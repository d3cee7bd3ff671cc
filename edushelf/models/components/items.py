"""
Display Item Models.

DisplayItem is the uniform shape every source record is normalized into before
rendering. ImageAsset describes an entry of the image registry.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from edushelf.models.components.constants import UNTITLED
from edushelf.models.components.types import ImageCategory

# Direct image handle: a URL/path string or a static-image mapping with a "src" key
ImageReference = Union[str, dict[str, Any]]


class DisplayItem(BaseModel):
    """A normalized, renderable collection entry.

    Example:
        DisplayItem(
            id="course-1",
            title="Complete Web Development Bootcamp",
            subtitle="with Angela Yu",
            image="/courses/web-dev.jpg",
            metadata={"level": "Beginner", "rating": "4.8"},
        )
    """

    id: str
    title: str = UNTITLED
    subtitle: Optional[str] = None
    description: Optional[str] = None
    image: Optional[ImageReference] = None
    image_id: Optional[str] = None
    icon: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("title", mode="before")
    @classmethod
    def _non_empty_title(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return UNTITLED
        return str(value)


class ImageAsset(BaseModel):
    """An image known to the asset registry."""

    id: str
    src: ImageReference
    alt: str = ""
    category: ImageCategory
    tags: list[str] = Field(default_factory=list)
