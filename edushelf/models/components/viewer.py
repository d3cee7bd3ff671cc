"""
Collection Viewer Models.

ViewerConfiguration is built by the caller on every render pass and never mutated
by the viewer. PresentationState is owned by the presentation controller and only
ever replaced through its transition functions.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from edushelf.models.components.constants import (
    HORIZONTAL_STEP_PX,
    LOAD_THRESHOLD,
    MOUNT_SETTLE_MS,
    RESUME_SETTLE_MS,
    VERTICAL_STEP_PX,
    resolve_category,
)
from edushelf.models.components.types import (
    LayoutType,
    RenderMode,
    SectionCategory,
    ViewerPhase,
)
from edushelf.models.logging import logger

DEFAULT_INITIAL_DISPLAY_COUNT = 6
DEFAULT_MAX_DISPLAY_COUNT = 12


class ViewerConfiguration(BaseModel):
    """Per-render configuration of a collection viewer."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    subtitle: Optional[str] = None
    category: str = Field(default="default", description="Category tag selecting the renderer")
    layout: LayoutType = "grid"
    initial_display_count: int = Field(default=DEFAULT_INITIAL_DISPLAY_COUNT, ge=1)
    max_display_count: int = Field(default=DEFAULT_MAX_DISPLAY_COUNT, ge=1)
    load_increment: Optional[int] = Field(
        default=None, ge=1, description="Items added per disclosure step (initial count if unset)"
    )
    auto_scroll: bool = False
    auto_scroll_interval: int = Field(default=3000, gt=0, description="Advance tick in ms")
    reset_timeout: int = Field(default=5000, gt=0, description="Idle reset timeout in ms")
    show_view_all_button: bool = True
    cycle_duration_ms: Optional[int] = Field(
        default=None, gt=0, description="Base duration of one full auto-advance cycle"
    )

    horizontal_step_px: int = Field(default=HORIZONTAL_STEP_PX, gt=0)
    vertical_step_px: int = Field(default=VERTICAL_STEP_PX, gt=0)
    load_threshold: float = Field(default=LOAD_THRESHOLD, gt=0, le=1)
    mount_settle_ms: int = Field(default=MOUNT_SETTLE_MS, ge=0)
    resume_settle_ms: int = Field(default=RESUME_SETTLE_MS, ge=0)

    on_item_click: Optional[Callable[[Any], Any]] = Field(default=None, exclude=True)
    on_view_all: Optional[Callable[[], Any]] = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _align_display_counts(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        initial = data.get("initial_display_count", DEFAULT_INITIAL_DISPLAY_COUNT)
        maximum = data.get("max_display_count", DEFAULT_MAX_DISPLAY_COUNT)
        if isinstance(initial, int) and isinstance(maximum, int) and maximum < initial:
            logger.warning(
                f"max_display_count ({maximum}) is below initial_display_count ({initial}); "
                f"raising it to {initial}"
            )
            data = {**data, "max_display_count": initial}
        return data

    @property
    def section_category(self) -> SectionCategory:
        return resolve_category(self.category)

    @property
    def is_scroll_layout(self) -> bool:
        return self.layout in ("horizontal-scroll", "vertical-scroll")

    @property
    def is_horizontal(self) -> bool:
        return self.layout == "horizontal-scroll"

    @property
    def increment(self) -> int:
        return self.load_increment or self.initial_display_count

    @property
    def step_px(self) -> int:
        return self.horizontal_step_px if self.is_horizontal else self.vertical_step_px

    @property
    def has_view_all(self) -> bool:
        return self.on_view_all is not None

    @classmethod
    def from_settings(cls, **overrides: Any) -> "ViewerConfiguration":
        """Build a configuration whose defaults come from ``EDUSHELF_VIEWER_*`` settings."""
        from edushelf.configs.config import settings

        values = settings.viewer.model_dump()
        values.update(overrides)
        return cls(**values)


class ScrollMetrics(BaseModel):
    """Scroll geometry along the active axis, in pixels."""

    model_config = ConfigDict(frozen=True)

    offset: float = 0.0
    content_size: float = 0.0
    viewport_size: float = 0.0

    @property
    def extent(self) -> float:
        return max(0.0, self.content_size - self.viewport_size)

    @property
    def fraction(self) -> float:
        if self.extent <= 0:
            return 0.0
        return min(1.0, max(0.0, self.offset / self.extent))


class ViewContext(BaseModel):
    """Inputs of a render pass that are not part of the configuration."""

    model_config = ConfigDict(frozen=True)

    item_count: int = Field(default=0, ge=0)
    is_loading: bool = False
    extent: Optional[float] = Field(
        default=None, ge=0.0, description="Scrollable extent in px (None until first measured)"
    )


class PresentationState(BaseModel):
    """State owned exclusively by the presentation controller."""

    model_config = ConfigDict(frozen=True)

    display_count: int = Field(default=0, ge=0)
    is_expanded: bool = False
    scroll_position: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Fraction of the scrollable extent"
    )
    user_interacted: bool = False
    hovering: bool = False
    pointer_held: bool = Field(
        default=False, description="A pointer, touch or drag is down on the track"
    )
    advancing: bool = False
    paused_position: float = 0.0
    reset_pending: bool = False
    settle_delay_ms: Optional[int] = None
    remaining_duration_ms: Optional[float] = Field(
        default=None,
        description=(
            "Time left in the current auto-advance cycle. Informational: ticks keep the "
            "fixed interval, hosts may read it to time a resumed cycle"
        ),
    )
    mounted: bool = False

    @computed_field
    @property
    def phase(self) -> ViewerPhase:
        if self.advancing:
            return ViewerPhase.AUTO_ADVANCING
        if self.reset_pending:
            return ViewerPhase.PENDING_RESET
        if self.user_interacted or self.hovering or self.pointer_held:
            return ViewerPhase.USER_INTERACTING
        if self.is_expanded:
            return ViewerPhase.EXPANDED
        return ViewerPhase.IDLE


class TimerPlan(BaseModel):
    """Timers a host should have armed for a given state (None = not armed)."""

    model_config = ConfigDict(frozen=True)

    advance_interval_ms: Optional[int] = None
    reset_timeout_ms: Optional[int] = None
    settle_delay_ms: Optional[int] = None

    @property
    def armed_count(self) -> int:
        return sum(
            delay is not None
            for delay in (self.advance_interval_ms, self.reset_timeout_ms, self.settle_delay_ms)
        )


class LayoutPlan(BaseModel):
    """What the layout adapter renders for one pass."""

    model_config = ConfigDict(frozen=True)

    mode: RenderMode
    visible_count: int = 0
    show_load_more: bool = False
    show_view_all: bool = False
    show_loading_sentinel: bool = False
    indicator_count: int = 0
    active_indicator: int = 0
    skeleton_count: int = 0
    grid_cols: dict[str, int] = Field(default_factory=dict)
    track_item_width: int = 320

    @property
    def indicator_range(self) -> range:
        return range(self.indicator_count)

