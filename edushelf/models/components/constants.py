"""
Shared constants for the collection viewer.

Kept free of Dash/DMC imports so the model layer and the viewer core can use them
without pulling in the rendering stack.
"""

from edushelf.models.components.types import SectionCategory

UNTITLED = "Untitled"

# ---------------------------------------------------------------------------
# Timing and motion defaults
# ---------------------------------------------------------------------------

HORIZONTAL_STEP_PX = 200
VERTICAL_STEP_PX = 100
LOAD_THRESHOLD = 0.9
MOUNT_SETTLE_MS = 500
RESUME_SETTLE_MS = 100

# Timer names shared by the in-process controller and the Dash host
ADVANCE = "advance"
RESET = "reset"
SETTLE = "settle"
TIMER_NAMES = (ADVANCE, RESET, SETTLE)

# ---------------------------------------------------------------------------
# Skeleton placeholders shown while a load is pending
# ---------------------------------------------------------------------------

GRID_SKELETON_COUNT = 6
SCROLL_SKELETON_COUNT = 4

# ---------------------------------------------------------------------------
# Category aliases: tag -> built-in renderer
# ---------------------------------------------------------------------------

CATEGORY_ALIASES: dict[str, SectionCategory] = {
    "department": SectionCategory.DEFAULT,
    "faculty": SectionCategory.DEFAULT,
}

# ---------------------------------------------------------------------------
# Per-category sizing: grid columns (Mantine breakpoints), scroll track card
# width, indicator bucket size in pixels and items covered by one indicator dot
# ---------------------------------------------------------------------------

CATEGORY_LAYOUT: dict[SectionCategory, dict] = {
    SectionCategory.BLOG: {
        "grid_cols": {"base": 1, "sm": 2, "lg": 3},
        "track_item_width": 320,
        "indicator_bucket_px": 300,
        "items_per_indicator": 3,
    },
    SectionCategory.COURSE: {
        "grid_cols": {"base": 1, "sm": 2, "lg": 3},
        "track_item_width": 320,
        "indicator_bucket_px": 300,
        "items_per_indicator": 3,
    },
    SectionCategory.INSTRUCTOR: {
        "grid_cols": {"base": 2, "sm": 3, "lg": 4, "xl": 5},
        "track_item_width": 256,
        "indicator_bucket_px": 240,
        "items_per_indicator": 3,
    },
    SectionCategory.CATEGORY: {
        "grid_cols": {"base": 2, "sm": 3, "lg": 4, "xl": 5},
        "track_item_width": 256,
        "indicator_bucket_px": 240,
        "items_per_indicator": 3,
    },
    SectionCategory.USER: {
        "grid_cols": {"base": 1, "sm": 2, "lg": 3},
        "track_item_width": 384,
        "indicator_bucket_px": 400,
        "items_per_indicator": 3,
    },
    SectionCategory.DEFAULT: {
        "grid_cols": {"base": 1, "sm": 2, "lg": 3},
        "track_item_width": 320,
        "indicator_bucket_px": 300,
        "items_per_indicator": 3,
    },
}


def resolve_category(tag: str | SectionCategory | None) -> SectionCategory:
    """Map a caller-supplied category tag onto a built-in renderer category."""
    if isinstance(tag, SectionCategory):
        return tag
    key = str(tag or "").strip().lower()
    if key in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[key]
    try:
        return SectionCategory(key)
    except ValueError:
        return SectionCategory.DEFAULT
