"""
Layout adapter.

Decides what a collection renders for one pass. The Dash frontend turns the
resulting LayoutPlan into components.
"""

import math
from typing import Optional

from edushelf.models.components import (
    CATEGORY_LAYOUT,
    LayoutPlan,
    PresentationState,
    ViewerConfiguration,
)
from edushelf.models.components.constants import GRID_SKELETON_COUNT, SCROLL_SKELETON_COUNT
from edushelf.viewer.transitions import clamp_display_count


def active_indicator(position_px: float, bucket_px: int, indicator_count: int) -> int:
    if indicator_count <= 0 or bucket_px <= 0:
        return 0
    return min(max(0, math.floor(position_px / bucket_px)), indicator_count - 1)


def plan_layout(
    config: ViewerConfiguration,
    state: PresentationState,
    item_count: int,
    is_loading: bool = False,
    has_view_all: Optional[bool] = None,
    extent: Optional[float] = None,
) -> LayoutPlan:
    """
    Plan one render pass of a collection.

    Args:
        config: Viewer configuration.
        state: Current presentation state.
        item_count: Number of normalized items.
        is_loading: Whether the data collaborator is still loading.
        has_view_all: Whether a view-all callback is wired (defaults to the config's).
        extent: Scrollable extent in px, used for the active indicator.

    Returns:
        LayoutPlan describing the mode, the visible slice and the affordances.
    """
    sizing = CATEGORY_LAYOUT[config.section_category]
    common = {"grid_cols": sizing["grid_cols"], "track_item_width": sizing["track_item_width"]}

    if is_loading:
        return LayoutPlan(
            mode="skeleton",
            skeleton_count=GRID_SKELETON_COUNT if config.layout == "grid" else SCROLL_SKELETON_COUNT,
            **common,
        )
    if item_count == 0:
        return LayoutPlan(mode="empty", **common)

    if has_view_all is None:
        has_view_all = config.has_view_all

    visible = clamp_display_count(state.display_count, config, item_count)
    has_more = item_count > visible
    below_max = visible < config.max_display_count
    is_grid = config.layout == "grid"

    show_view_all = (
        config.show_view_all_button
        and has_view_all
        and (
            (is_grid and has_more)
            or (config.is_scroll_layout and state.is_expanded)
            or item_count > config.max_display_count
        )
    )

    indicator_count = 0
    current = 0
    if config.is_scroll_layout and item_count > sizing["items_per_indicator"]:
        indicator_count = math.ceil(item_count / sizing["items_per_indicator"])
        current = active_indicator(
            state.scroll_position * (extent or 0.0), sizing["indicator_bucket_px"], indicator_count
        )

    return LayoutPlan(
        mode=config.layout,
        visible_count=visible,
        show_load_more=is_grid and has_more and below_max,
        show_view_all=show_view_all,
        show_loading_sentinel=config.is_scroll_layout and has_more and below_max,
        indicator_count=indicator_count,
        active_indicator=current,
        **common,
    )
