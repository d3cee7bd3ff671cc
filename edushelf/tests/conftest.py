from typing import Any, Callable

import pytest

from edushelf.models.components import ScrollMetrics, ViewerConfiguration


class ManualClock:
    """Deterministic clock: timers only fire when ``advance`` moves time past them."""

    def __init__(self):
        self.time = 0.0
        self._sequence = 0
        self._timers: dict[int, tuple[float, Callable[[], None]]] = {}

    def now(self) -> float:
        return self.time

    def set_timer(self, delay_ms: float, callback: Callable[[], None]) -> int:
        self._sequence += 1
        self._timers[self._sequence] = (self.time + delay_ms, callback)
        return self._sequence

    def cancel_timer(self, handle: int) -> None:
        self._timers.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, ms: float) -> None:
        target = self.time + ms
        while True:
            due = [(when, handle) for handle, (when, _) in self._timers.items() if when <= target]
            if not due:
                break
            when, handle = min(due)
            _, callback = self._timers.pop(handle)
            self.time = when
            callback()
        self.time = target


class LeakyClock(ManualClock):
    """Clock whose cancellations are ignored, so stale callbacks still fire."""

    def cancel_timer(self, handle: int) -> None:
        pass


class FakeViewport:
    """Scroll track with fixed geometry; ``scroll_to`` jumps immediately."""

    def __init__(self, content_size: float = 2000.0, viewport_size: float = 800.0, offset: float = 0.0):
        self.content_size = content_size
        self.viewport_size = viewport_size
        self.offset = offset
        self.scroll_calls: list[float] = []

    def get_scroll_metrics(self) -> ScrollMetrics:
        return ScrollMetrics(
            offset=self.offset, content_size=self.content_size, viewport_size=self.viewport_size
        )

    def scroll_to(self, offset: float, smooth: bool = True) -> None:
        self.offset = offset
        self.scroll_calls.append(offset)


def walk_components(component: Any):
    """Yield a Dash component and all of its descendants (strings included)."""
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if child is None:
            continue
        yield from walk_components(child)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def leaky_clock() -> LeakyClock:
    return LeakyClock()


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


@pytest.fixture
def make_viewport() -> Callable[..., FakeViewport]:
    return FakeViewport


@pytest.fixture
def make_config() -> Callable[..., ViewerConfiguration]:
    def factory(**overrides) -> ViewerConfiguration:
        values = {"title": "Test", "initial_display_count": 6, "max_display_count": 12}
        values.update(overrides)
        return ViewerConfiguration(**values)

    return factory


@pytest.fixture
def scroll_config(make_config) -> ViewerConfiguration:
    return make_config(layout="horizontal-scroll", auto_scroll=True, auto_scroll_interval=3000)


@pytest.fixture
def walk():
    return walk_components


@pytest.fixture
def texts():
    def collect(component: Any) -> list[str]:
        return [node for node in walk_components(component) if isinstance(node, str)]

    return collect


@pytest.fixture
def find_by_id():
    def find(component: Any, component_id: Any) -> list:
        return [
            node
            for node in walk_components(component)
            if getattr(node, "id", None) == component_id
        ]

    return find


@pytest.fixture(autouse=True)
def clean_viewer_registry():
    from edushelf.dash.modules.collection_component.registry import clear_registry

    clear_registry()
    yield
    clear_registry()
