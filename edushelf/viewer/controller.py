"""
Presentation controller.

Owns one viewer's PresentationState, applies the pure transitions from
``edushelf.viewer.transitions`` and keeps real timers in line with
``timer_plan``. At most one timer of each kind is pending at any time.
"""

from typing import Any, Iterable, Optional

from edushelf.configs.logging_init import logger
from edushelf.models.components import (
    PresentationState,
    ScrollMetrics,
    ViewContext,
    ViewerConfiguration,
)
from edushelf.models.components.constants import ADVANCE, RESET, SETTLE, TIMER_NAMES
from edushelf.viewer import transitions
from edushelf.viewer.clock import Clock, ViewportProbe


class PresentationController:
    """
    Single owning context of a viewer's presentation state.

    Example:
        controller = PresentationController(config, AsyncioClock(), viewport, item_count=10)
        controller.mount()
        controller.handle_pointer_down()
        controller.handle_pointer_up()
        controller.unmount()
    """

    def __init__(
        self,
        config: ViewerConfiguration,
        clock: Clock,
        viewport: ViewportProbe,
        item_count: int = 0,
        is_loading: bool = False,
    ):
        self.config = config
        self.clock = clock
        self.viewport = viewport
        self.item_count = item_count
        self.is_loading = is_loading

        self._handles: dict[str, Any] = {}
        self._delays: dict[str, int] = {}
        self._generation: dict[str, int] = dict.fromkeys(TIMER_NAMES, 0)
        self._last_interaction_at: Optional[float] = None

        self.state: PresentationState = transitions.initial_state(config, self.context())

    # ------------------------------------------------------------------
    # Context and timer reconciliation
    # ------------------------------------------------------------------

    def context(self, metrics: Optional[ScrollMetrics] = None) -> ViewContext:
        if metrics is None:
            metrics = self.viewport.get_scroll_metrics()
        return ViewContext(
            item_count=self.item_count, is_loading=self.is_loading, extent=metrics.extent
        )

    @property
    def pending_timers(self) -> int:
        return len(self._handles)

    @property
    def idle_ms(self) -> Optional[float]:
        """Milliseconds since the last user interaction, None if there was none yet."""
        if self._last_interaction_at is None:
            return None
        return self.clock.now() - self._last_interaction_at

    def _touch(self) -> None:
        self._last_interaction_at = self.clock.now()

    def _apply(self, state: PresentationState, rearm: Iterable[str] = ()) -> PresentationState:
        previous = self.state
        self.state = state
        if previous.phase != state.phase:
            logger.debug(f"Viewer '{self.config.title}': {previous.phase.value} -> {state.phase.value}")
        self._reconcile(set(rearm))
        return state

    def _reconcile(self, rearm: set[str]) -> None:
        plan = transitions.timer_plan(self.state, self.config)
        desired = {
            ADVANCE: plan.advance_interval_ms,
            RESET: plan.reset_timeout_ms,
            SETTLE: plan.settle_delay_ms,
        }
        for name, delay in desired.items():
            if delay is None:
                self._cancel(name)
            elif name in rearm or self._delays.get(name) != delay:
                self._cancel(name)
                self._arm(name, delay)

    def _arm(self, name: str, delay: int) -> None:
        self._generation[name] += 1
        generation = self._generation[name]
        self._handles[name] = self.clock.set_timer(delay, lambda: self._fire(name, generation))
        self._delays[name] = delay

    def _cancel(self, name: str) -> None:
        handle = self._handles.pop(name, None)
        self._delays.pop(name, None)
        if handle is not None:
            self.clock.cancel_timer(handle)

    def _fire(self, name: str, generation: int) -> None:
        if generation != self._generation[name] or name not in self._handles:
            return
        self._handles.pop(name, None)
        self._delays.pop(name, None)
        if not self.state.mounted:
            return

        if name == ADVANCE:
            self._on_advance()
        elif name == RESET:
            self._on_idle_timeout()
        else:
            self._apply(transitions.settle_elapsed(self.state, self.config, self.context()))

    def _on_advance(self) -> None:
        metrics = self.viewport.get_scroll_metrics()
        state = transitions.advance_tick(self.state, self.config, self.context(metrics), metrics)
        if state.advancing and metrics.extent > 0:
            self.viewport.scroll_to(transitions.scroll_offset(state, metrics.extent))
        self._apply(state)

    def _on_idle_timeout(self) -> None:
        previous = self.state
        state = transitions.idle_timeout(previous, self.config, self.context())
        if previous.is_expanded and not state.is_expanded:
            logger.debug(
                f"Viewer '{self.config.title}': idle reset to {state.display_count} items "
                f"after {self.idle_ms} ms"
            )
            self.viewport.scroll_to(0.0)
        self._apply(state)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self) -> PresentationState:
        return self._apply(transitions.mount(self.config, self.context()))

    def unmount(self) -> PresentationState:
        state = self._apply(transitions.unmount(self.state))
        for name in list(self._handles):
            self._cancel(name)
        return state

    def update(
        self,
        config: Optional[ViewerConfiguration] = None,
        item_count: Optional[int] = None,
        is_loading: Optional[bool] = None,
    ) -> PresentationState:
        """Re-render with a new configuration, item count or loading flag."""
        if config is not None:
            self.config = config
        if item_count is not None:
            self.item_count = item_count
        if is_loading is not None:
            self.is_loading = is_loading
        return self._apply(transitions.sync(self.state, self.config, self.context()))

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def handle_scroll(
        self, metrics: Optional[ScrollMetrics] = None, user: bool = True
    ) -> PresentationState:
        """
        Scroll event on the track.

        Hosts whose viewport reports the controller's own ``scroll_to`` calls as
        scroll events pass ``user=False`` for those echoes.
        """
        if not self.state.mounted:
            return self.state
        if metrics is None:
            metrics = self.viewport.get_scroll_metrics()
        if user:
            self._touch()
        state = transitions.on_scroll(self.state, self.config, self.context(metrics), metrics, user=user)
        return self._apply(state, rearm=(RESET,))

    def _begin(self, hover: bool = False) -> PresentationState:
        if self.state.mounted:
            self._touch()
        return self._apply(transitions.begin_interaction(self.state, hover=hover))

    def _end(self, leave: bool = False) -> PresentationState:
        if self.state.mounted:
            self._touch()
        return self._apply(
            transitions.end_interaction(self.state, self.config, self.context(), leave=leave)
        )

    def handle_pointer_down(self) -> PresentationState:
        return self._begin()

    def handle_pointer_up(self) -> PresentationState:
        return self._end()

    def handle_touch_start(self) -> PresentationState:
        return self._begin()

    def handle_touch_end(self) -> PresentationState:
        return self._end()

    def handle_drag_start(self) -> PresentationState:
        return self._begin()

    def handle_drag_end(self) -> PresentationState:
        return self._end()

    def handle_mouse_enter(self) -> PresentationState:
        return self._begin(hover=True)

    def handle_mouse_leave(self) -> PresentationState:
        return self._end(leave=True)

    def load_more(self) -> PresentationState:
        if not self.state.mounted:
            return self.state
        return self._apply(transitions.load_more(self.state, self.config, self.context()))
