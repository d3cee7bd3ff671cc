"""
Collection Component - Viewer Registry

Process-wide map of viewer id to the data and callables a viewer was built
with. Dash callbacks only receive JSON props, so they look up records,
renderers and the caller's ``on_item_click`` / ``on_view_all`` here.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from edushelf.configs.logging_init import logger
from edushelf.models.components import DisplayItem, ViewerConfiguration


class ViewerSpec(BaseModel):
    """Everything a collection viewer was built with."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    viewer_id: str
    records: list[Any] = Field(default_factory=list)
    items: list[DisplayItem] = Field(default_factory=list)
    config: ViewerConfiguration
    renderer: Callable[[DisplayItem, Any, int], Any]
    is_loading: bool = False
    empty_state: Optional[Any] = None

    @property
    def item_count(self) -> int:
        return len(self.items)

    def find(self, item_id: str) -> Optional[tuple[DisplayItem, Any]]:
        """Return ``(item, record)`` for ``item_id``, or None if unknown."""
        for item, record in zip(self.items, self.records):
            if item.id == item_id:
                return item, record
        return None


_viewers: dict[str, ViewerSpec] = {}


def register_viewer(spec: ViewerSpec) -> ViewerSpec:
    if spec.viewer_id in _viewers:
        logger.debug(f"Replacing registered viewer '{spec.viewer_id}'")
    _viewers[spec.viewer_id] = spec
    return spec


def get_viewer(viewer_id: str) -> Optional[ViewerSpec]:
    spec = _viewers.get(viewer_id)
    if spec is None:
        logger.warning(f"No collection viewer registered under '{viewer_id}'")
    return spec


def unregister_viewer(viewer_id: str) -> None:
    _viewers.pop(viewer_id, None)


def clear_registry() -> None:
    _viewers.clear()


def _invoke(label: str, callback: Optional[Callable], *args) -> bool:
    if callback is None:
        return False
    try:
        callback(*args)
    except Exception as e:
        logger.exception(f"{label} callback raised: {e}")
    return True


def dispatch_item_click(viewer_id: str, item_id: str) -> bool:
    """Invoke ``on_item_click(record)`` for an activated card."""
    spec = get_viewer(viewer_id)
    if spec is None:
        return False
    found = spec.find(item_id)
    if found is None:
        logger.warning(f"Viewer '{viewer_id}' has no item '{item_id}'")
        return False
    _, record = found
    return _invoke(f"on_item_click ({viewer_id})", spec.config.on_item_click, record)


def dispatch_view_all(viewer_id: str) -> bool:
    spec = get_viewer(viewer_id)
    if spec is None:
        return False
    return _invoke(f"on_view_all ({viewer_id})", spec.config.on_view_all)
