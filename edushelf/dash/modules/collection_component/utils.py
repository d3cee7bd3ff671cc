"""
Collection Component - Store and Timer Helpers

The per-viewer ``dcc.Store`` holds the serialized PresentationState together
with the last measured scrollable extent. Timers are ``dcc.Interval``
components whose props follow ``timer_plan``.
"""

import time
from typing import Any, Iterable, Optional

import dash
from pydantic import ValidationError

from edushelf.configs.logging_init import logger
from edushelf.models.components import PresentationState, TimerPlan, ViewContext
from edushelf.models.components.constants import ADVANCE, RESET, SETTLE

# Interval used while a timer is disabled (the component needs a valid value)
IDLE_INTERVAL_MS = 1000


def component_id(kind: str, viewer_id: str) -> dict:
    return {"type": f"collection-{kind}", "index": viewer_id}


def item_component_id(viewer_id: str, item_id: str) -> dict:
    return {"type": "collection-item", "viewer": viewer_id, "item": item_id}


def dump_state(
    state: PresentationState, extent: Optional[float] = None, rearm: Iterable[str] = ()
) -> dict:
    return {
        "state": state.model_dump(mode="json", exclude={"phase"}),
        "extent": extent,
        "rearm": sorted(set(rearm)),
    }


def load_state(data: Any) -> tuple[PresentationState, Optional[float]]:
    """Rebuild the state from store data; unreadable data yields a fresh unmounted state."""
    if not isinstance(data, dict) or not isinstance(data.get("state"), dict):
        logger.warning(f"Unreadable collection state store: {data!r}")
        return PresentationState(), None
    try:
        state = PresentationState.model_validate(data["state"])
    except ValidationError as e:
        logger.warning(f"Invalid collection state in store, starting over: {e}")
        return PresentationState(), None
    extent = data.get("extent")
    return state, float(extent) if isinstance(extent, (int, float)) else None


def viewer_context(item_count: int, is_loading: bool, extent: Optional[float]) -> ViewContext:
    return ViewContext(item_count=item_count, is_loading=is_loading, extent=extent)


def scroll_command(offset: float, layout: str, smooth: bool = True) -> dict:
    """Payload consumed by the clientside ``scrollTo`` callback."""
    return {
        "offset": offset,
        "axis": "left" if layout == "horizontal-scroll" else "top",
        "smooth": smooth,
        "issued_at": time.time(),
    }


def _one_shot_props(delay: Optional[int], current: dict, restart: bool) -> dict:
    if delay is None:
        return {
            "disabled": True,
            "interval": dash.no_update,
            "n_intervals": dash.no_update,
            "max_intervals": dash.no_update,
        }
    running = (
        current.get("disabled") is False
        and current.get("interval") == delay
        and (current.get("n_intervals") or 0) < 1
    )
    if running and not restart:
        return {
            "disabled": dash.no_update,
            "interval": dash.no_update,
            "n_intervals": dash.no_update,
            "max_intervals": dash.no_update,
        }
    return {"disabled": False, "interval": delay, "n_intervals": 0, "max_intervals": 1}


def interval_props(
    plan: TimerPlan, current: Optional[dict] = None, rearm: Iterable[str] = ()
) -> dict:
    """
    Map a TimerPlan onto ``dcc.Interval`` props.

    The advance timer is a repeating interval. Reset and settle are one-shot
    intervals (``max_intervals=1``) restarted by zeroing ``n_intervals``; an
    already running one-shot timer is left alone unless listed in ``rearm``.

    Args:
        plan: Desired timers.
        current: Current props per timer name, as read from the Interval components.
        rearm: Timer names that must restart even when already running.

    Returns:
        Dict of timer name to prop values (``dash.no_update`` where unchanged).
    """
    current = current or {}
    rearm = set(rearm)
    return {
        ADVANCE: {
            "disabled": plan.advance_interval_ms is None,
            "interval": plan.advance_interval_ms
            or current.get(ADVANCE, {}).get("interval")
            or IDLE_INTERVAL_MS,
        },
        RESET: _one_shot_props(plan.reset_timeout_ms, current.get(RESET, {}), RESET in rearm),
        SETTLE: _one_shot_props(plan.settle_delay_ms, current.get(SETTLE, {}), SETTLE in rearm),
    }
