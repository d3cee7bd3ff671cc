"""
Collection Viewer Models.

Typed Pydantic models shared by the viewer core and the Dash rendering layer.

Usage:
    from edushelf.models.components import (
        DisplayItem,
        ImageAsset,
        ViewerConfiguration,
        PresentationState,
        ScrollMetrics,
        ViewContext,
        TimerPlan,
        LayoutPlan,
        SectionCategory,
        ViewerPhase,
    )
"""

from edushelf.models.components.constants import CATEGORY_LAYOUT, resolve_category
from edushelf.models.components.items import DisplayItem, ImageAsset, ImageReference
from edushelf.models.components.types import (
    ImageCategory,
    LayoutType,
    RenderMode,
    SectionCategory,
    SectionType,
    ViewerPhase,
)
from edushelf.models.components.viewer import (
    LayoutPlan,
    PresentationState,
    ScrollMetrics,
    TimerPlan,
    ViewContext,
    ViewerConfiguration,
)

__all__ = [
    # Types
    "SectionType",
    "LayoutType",
    "RenderMode",
    "ImageCategory",
    "SectionCategory",
    "ViewerPhase",
    # Lookup tables
    "CATEGORY_LAYOUT",
    "resolve_category",
    # Items
    "DisplayItem",
    "ImageAsset",
    "ImageReference",
    # Viewer
    "ViewerConfiguration",
    "ScrollMetrics",
    "ViewContext",
    "PresentationState",
    "TimerPlan",
    "LayoutPlan",
]
