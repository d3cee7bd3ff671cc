"""
Collection Viewer Type Definitions.

Literal types and enums shared by the viewer core and the Dash rendering layer.
"""

from enum import Enum
from typing import Literal

# Category tags accepted from callers (department/faculty alias to default)
SectionType = Literal[
    "default",
    "blog",
    "course",
    "instructor",
    "department",
    "faculty",
    "category",
    "user",
]

# Layout strategies
LayoutType = Literal["grid", "horizontal-scroll", "vertical-scroll"]

# What the layout adapter decided to render
RenderMode = Literal["skeleton", "empty", "grid", "horizontal-scroll", "vertical-scroll"]

# Image registry categories
ImageCategory = Literal["avatar", "post", "blog", "background", "icon", "banner"]


class SectionCategory(str, Enum):
    """Closed set of built-in card renderers."""

    DEFAULT = "default"
    BLOG = "blog"
    COURSE = "course"
    INSTRUCTOR = "instructor"
    CATEGORY = "category"
    USER = "user"


class ViewerPhase(str, Enum):
    """Presentation controller states."""

    IDLE = "idle"
    AUTO_ADVANCING = "auto_advancing"
    USER_INTERACTING = "user_interacting"
    EXPANDED = "expanded"
    PENDING_RESET = "pending_reset"
