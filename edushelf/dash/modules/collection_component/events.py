"""
Collection Component - Browser Event Payloads

Event definitions for the ``dash_extensions.EventListener`` wrappers of a
collection and parsing of their payloads into ScrollMetrics.
"""

from typing import Any, Optional

from edushelf.models.components import ScrollMetrics

# Set on the track element by the clientside scroll callback while an
# auto-advance scroll is in flight
AUTO_SCROLL_FLAG = "target.dataset.autoScrolling"

SCROLL_PROPS = [
    "type",
    "target.scrollLeft",
    "target.scrollTop",
    "target.scrollWidth",
    "target.scrollHeight",
    "target.clientWidth",
    "target.clientHeight",
    AUTO_SCROLL_FLAG,
]

INTERACTION_BEGIN = {"pointerdown", "touchstart", "dragstart", "mouseenter"}
INTERACTION_END = {"pointerup", "pointercancel", "touchend", "touchcancel", "dragend", "mouseleave"}

# Attached to the scroll track with useCapture so events on cards reach it
TRACK_EVENTS = [{"event": "scroll", "props": SCROLL_PROPS}] + [
    {"event": name, "props": ["type"]}
    for name in (
        "pointerdown",
        "pointerup",
        "pointercancel",
        "touchstart",
        "touchend",
        "touchcancel",
        "dragstart",
        "dragend",
    )
]

# Attached to the viewer's bounding box without capture
HOVER_EVENTS = [
    {"event": "mouseenter", "props": ["type"]},
    {"event": "mouseleave", "props": ["type"]},
]


def _number(event: dict, key: str) -> Optional[float]:
    value = event.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def parse_scroll_event(event: Any, layout: str) -> Optional[ScrollMetrics]:
    """
    Read scroll geometry along the layout's axis from an EventListener payload.

    Args:
        event: The listener's ``event`` prop (or a probe payload with the same keys).
        layout: Viewer layout; ``horizontal-scroll`` reads the x axis, anything else y.

    Returns:
        ScrollMetrics, or None when the payload lacks the required numbers.
    """
    if not isinstance(event, dict):
        return None
    if layout == "horizontal-scroll":
        keys = ("target.scrollLeft", "target.scrollWidth", "target.clientWidth")
    else:
        keys = ("target.scrollTop", "target.scrollHeight", "target.clientHeight")

    offset, content_size, viewport_size = (_number(event, key) for key in keys)
    if offset is None or content_size is None or viewport_size is None:
        return None
    if content_size < 0 or viewport_size < 0:
        return None
    return ScrollMetrics(offset=max(0.0, offset), content_size=content_size, viewport_size=viewport_size)


def event_type(event: Any) -> Optional[str]:
    if not isinstance(event, dict):
        return None
    kind = event.get("type")
    return kind if isinstance(kind, str) else None


def is_programmatic(event: Any) -> bool:
    """Whether a scroll event is the echo of an auto-advance ``scrollTo``."""
    return isinstance(event, dict) and event.get(AUTO_SCROLL_FLAG) == "1"
