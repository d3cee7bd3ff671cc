"""
Presentation state machine.

Every function here is pure: it takes the current PresentationState plus the
configuration and render context, and returns a new state. Hosts (the in-process
PresentationController and the Dash callbacks) own the state and turn
``timer_plan`` into real timers.
"""

import math
from typing import Optional

from edushelf.models.components import (
    PresentationState,
    ScrollMetrics,
    TimerPlan,
    ViewContext,
    ViewerConfiguration,
)


def display_bounds(config: ViewerConfiguration, item_count: int) -> tuple[int, int]:
    """Lowest and highest valid display count for ``item_count`` items."""
    return (
        min(config.initial_display_count, item_count),
        min(config.max_display_count, item_count),
    )


def clamp_display_count(count: int, config: ViewerConfiguration, item_count: int) -> int:
    low, high = display_bounds(config, item_count)
    return min(max(count, low), high)


def base_cycle_duration(config: ViewerConfiguration, extent: Optional[float]) -> float:
    """Duration of one full auto-advance cycle over ``extent`` pixels, in ms."""
    if config.cycle_duration_ms:
        return float(config.cycle_duration_ms)
    if not extent:
        return float(config.auto_scroll_interval)
    return float(math.ceil(extent / config.step_px) * config.auto_scroll_interval)


def remaining_duration(base: float, position: float) -> float:
    """Time left in the current cycle when resuming from ``position`` (fraction of extent)."""
    return max(0.0, base * (1.0 - min(1.0, abs(position))))


def _disclose(state: PresentationState, config: ViewerConfiguration, item_count: int) -> dict:
    """Grow the display count by one increment, or mark the set as expanded at the max."""
    count = state.display_count
    if count < config.max_display_count and count < item_count:
        return {"display_count": min(count + config.increment, config.max_display_count, item_count)}
    if count >= config.max_display_count:
        return {"is_expanded": True}
    return {}


def initial_state(config: ViewerConfiguration, ctx: ViewContext) -> PresentationState:
    return PresentationState(display_count=min(config.initial_display_count, ctx.item_count))


def can_auto_advance(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> bool:
    """
    Whether auto-advance is currently allowed.

    An unmeasured extent (``ctx.extent is None``) counts as scrollable; the first
    tick reads live metrics and does nothing when there is nothing to scroll.
    """
    return (
        config.auto_scroll
        and config.is_scroll_layout
        and (ctx.extent is None or ctx.extent > 0)
        and ctx.item_count > 0
        and not ctx.is_loading
        and state.mounted
        and not state.is_expanded
        and not state.user_interacted
        and not state.hovering
        and not state.pointer_held
    )


def _arm_settle(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext, delay_ms: int
) -> PresentationState:
    if state.advancing or state.settle_delay_ms is not None:
        return state
    if not can_auto_advance(state, config, ctx):
        return state
    return state.model_copy(update={"settle_delay_ms": delay_ms})


def _halt_if_ineligible(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> PresentationState:
    if (state.advancing or state.settle_delay_ms is not None) and not can_auto_advance(
        state, config, ctx
    ):
        return state.model_copy(update={"advancing": False, "settle_delay_ms": None})
    return state


def mount(config: ViewerConfiguration, ctx: ViewContext) -> PresentationState:
    """First render: mounted state with the mount settle armed when eligible."""
    state = initial_state(config, ctx).model_copy(update={"mounted": True})
    return _arm_settle(state, config, ctx, config.mount_settle_ms)


def unmount(state: PresentationState) -> PresentationState:
    return state.model_copy(
        update={
            "mounted": False,
            "advancing": False,
            "reset_pending": False,
            "settle_delay_ms": None,
            "pointer_held": False,
        }
    )


def begin_interaction(state: PresentationState, hover: bool = False) -> PresentationState:
    """Pointer-down, touch-start, drag-start or mouse-enter (``hover=True``)."""
    if not state.mounted:
        return state
    return state.model_copy(
        update={
            "advancing": False,
            "settle_delay_ms": None,
            "paused_position": state.scroll_position,
            "user_interacted": True,
            "hovering": state.hovering or hover,
            "pointer_held": state.pointer_held or not hover,
        }
    )


def end_interaction(
    state: PresentationState,
    config: ViewerConfiguration,
    ctx: ViewContext,
    leave: bool = False,
) -> PresentationState:
    """
    Pointer-up, touch-end, drag-end or mouse-leave (``leave=True``).

    Either kind of end releases a held pointer, so a drag released outside the
    track still resumes once the pointer leaves it.
    """
    if not state.mounted:
        return state
    update = {"user_interacted": False, "pointer_held": False}
    if leave:
        update["hovering"] = False
    return _arm_settle(state.model_copy(update=update), config, ctx, config.resume_settle_ms)


def settle_elapsed(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> PresentationState:
    """The settle delay fired: start advancing from the captured position."""
    if not state.mounted or state.settle_delay_ms is None:
        return state
    state = state.model_copy(update={"settle_delay_ms": None})
    if not can_auto_advance(state, config, ctx):
        return state
    return state.model_copy(
        update={
            "advancing": True,
            "remaining_duration_ms": remaining_duration(
                base_cycle_duration(config, ctx.extent), state.paused_position
            ),
        }
    )


def advance_tick(
    state: PresentationState,
    config: ViewerConfiguration,
    ctx: ViewContext,
    metrics: ScrollMetrics,
) -> PresentationState:
    """
    Advance the scroll position by one step.

    The next offset is computed from the live offset in ``metrics``. Reaching
    or passing the end of the scrollable extent wraps to the origin.
    """
    if not state.mounted or not state.advancing:
        return state
    extent = metrics.extent
    if extent <= 0:
        return state

    next_offset = metrics.offset + config.step_px
    position = 0.0 if next_offset >= extent else next_offset / extent
    return state.model_copy(
        update={
            "scroll_position": position,
            "remaining_duration_ms": remaining_duration(
                base_cycle_duration(config, extent), position
            ),
        }
    )


def on_scroll(
    state: PresentationState,
    config: ViewerConfiguration,
    ctx: ViewContext,
    metrics: ScrollMetrics,
    user: bool = True,
) -> PresentationState:
    """
    A scroll event on the track.

    Records the position, applies threshold disclosure and marks the idle reset
    for (re)arming. Scrolls not initiated by the user (echoes of auto-advance)
    leave the interaction flags alone.
    """
    if not state.mounted:
        return state

    position = metrics.fraction
    update: dict = {"scroll_position": position, "reset_pending": True}

    reached_threshold = (
        metrics.content_size > 0
        and metrics.offset + metrics.viewport_size >= config.load_threshold * metrics.content_size
    )
    if reached_threshold:
        update.update(_disclose(state, config, ctx.item_count))

    if user:
        update.update(
            {
                "user_interacted": True,
                "advancing": False,
                "settle_delay_ms": None,
                "paused_position": position,
            }
        )

    return _halt_if_ineligible(state.model_copy(update=update), config, ctx)


def idle_timeout(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> PresentationState:
    """
    The idle reset timer fired.

    An expanded viewer returns to its initial display count at the origin. A
    viewer that is not expanded only drops the interaction flag, unless a pointer
    is still held. Firing again without an intervening scroll changes nothing.
    """
    if not state.mounted or not state.reset_pending:
        return state

    update: dict = {"reset_pending": False, "user_interacted": state.pointer_held}
    if state.is_expanded:
        update.update(
            {
                "display_count": min(config.initial_display_count, ctx.item_count),
                "is_expanded": False,
                "scroll_position": 0.0,
                "paused_position": 0.0,
            }
        )
    return _arm_settle(state.model_copy(update=update), config, ctx, config.resume_settle_ms)


def load_more(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> PresentationState:
    """Explicit "Load More" action of the grid layout."""
    count = state.display_count
    if count >= config.max_display_count or count >= ctx.item_count:
        return state
    return state.model_copy(
        update={"display_count": min(count + config.increment, config.max_display_count, ctx.item_count)}
    )


def sync(
    state: PresentationState, config: ViewerConfiguration, ctx: ViewContext
) -> PresentationState:
    """
    Re-render with new items, configuration or loading flag.

    Clamps the display count to the new bounds. Loading suspends every timer;
    once loading ends the mount settle is armed again.
    """
    update: dict = {
        "display_count": clamp_display_count(state.display_count, config, ctx.item_count)
    }
    if ctx.item_count == 0:
        update["is_expanded"] = False
    if ctx.is_loading:
        update.update({"advancing": False, "settle_delay_ms": None, "reset_pending": False})

    state = _halt_if_ineligible(state.model_copy(update=update), config, ctx)
    if not state.mounted:
        return state
    return _arm_settle(state, config, ctx, config.mount_settle_ms)


def timer_plan(state: PresentationState, config: ViewerConfiguration) -> TimerPlan:
    """Timers that should be armed for ``state``; nothing is armed once unmounted."""
    if not state.mounted:
        return TimerPlan()
    return TimerPlan(
        advance_interval_ms=config.auto_scroll_interval if state.advancing else None,
        reset_timeout_ms=config.reset_timeout if state.reset_pending else None,
        settle_delay_ms=state.settle_delay_ms,
    )


def scroll_offset(state: PresentationState, extent: Optional[float]) -> float:
    """Convert the stored position fraction to pixels along the active axis."""
    return state.scroll_position * (extent or 0.0)
