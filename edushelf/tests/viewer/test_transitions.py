import pytest

from edushelf.models.components import PresentationState, ScrollMetrics, ViewContext, ViewerPhase
from edushelf.viewer import transitions

EXTENT_CONTEXT = ViewContext(item_count=10, is_loading=False, extent=1200.0)


def metrics(offset: float, content: float = 2000.0, viewport: float = 800.0) -> ScrollMetrics:
    return ScrollMetrics(offset=offset, content_size=content, viewport_size=viewport)


def advancing_state(scroll_config, ctx=EXTENT_CONTEXT) -> PresentationState:
    state = transitions.mount(scroll_config, ctx)
    return transitions.settle_elapsed(state, scroll_config, ctx)


class TestMount:
    """Initial state and the mount settle delay."""

    def test_initial_display_count_is_clamped_to_items(self, make_config):
        config = make_config(initial_display_count=6)

        state = transitions.initial_state(config, ViewContext(item_count=4))

        assert state.display_count == 4
        assert state.phase == ViewerPhase.IDLE
        assert not state.mounted

    def test_mount_arms_settle_for_auto_scroll(self, scroll_config):
        state = transitions.mount(scroll_config, EXTENT_CONTEXT)

        assert state.mounted
        assert state.settle_delay_ms == 500
        assert transitions.timer_plan(state, scroll_config).settle_delay_ms == 500

    def test_mount_without_auto_scroll_arms_nothing(self, make_config):
        config = make_config(layout="horizontal-scroll")

        state = transitions.mount(config, EXTENT_CONTEXT)

        assert transitions.timer_plan(state, config).armed_count == 0

    def test_grid_never_auto_advances(self, make_config):
        config = make_config(layout="grid", auto_scroll=True)

        state = transitions.mount(config, EXTENT_CONTEXT)

        assert not transitions.can_auto_advance(state, config, EXTENT_CONTEXT)
        assert state.settle_delay_ms is None

    def test_nothing_to_scroll_means_no_auto_advance(self, scroll_config):
        ctx = ViewContext(item_count=3, extent=0.0)

        state = transitions.mount(scroll_config, ctx)

        assert state.settle_delay_ms is None

    def test_unmeasured_extent_counts_as_scrollable(self, scroll_config):
        state = transitions.mount(scroll_config, ViewContext(item_count=10, extent=None))

        assert state.settle_delay_ms == 500

    def test_settle_elapsed_starts_advancing(self, scroll_config):
        state = advancing_state(scroll_config)

        assert state.advancing
        assert state.phase == ViewerPhase.AUTO_ADVANCING
        assert state.settle_delay_ms is None
        assert transitions.timer_plan(state, scroll_config).advance_interval_ms == 3000


class TestAdvanceTick:
    """Auto-advance stepping and wrap-around."""

    def test_step_from_live_offset(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(400))

        assert transitions.scroll_offset(state, 1200) == pytest.approx(600)

    def test_vertical_step_is_smaller(self, make_config):
        config = make_config(layout="vertical-scroll", auto_scroll=True)
        state = advancing_state(config)

        state = transitions.advance_tick(state, config, EXTENT_CONTEXT, metrics(0))

        assert transitions.scroll_offset(state, 1200) == pytest.approx(100)

    def test_wraps_to_origin_at_the_end(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(1100))

        assert state.scroll_position == 0.0

    def test_reaching_extent_exactly_wraps(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(1000))

        assert state.scroll_position == 0.0

    def test_offset_never_exceeds_extent(self, scroll_config):
        state = advancing_state(scroll_config)
        offset = 0.0
        for _ in range(20):
            state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(offset))
            offset = transitions.scroll_offset(state, 1200)
            assert 0.0 <= offset < 1200

    def test_remaining_duration_tracks_position(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(400))

        # base = ceil(1200 / 200) * 3000
        assert state.remaining_duration_ms == pytest.approx(18000 * (1 - 0.5))

    def test_explicit_cycle_duration(self, make_config):
        config = make_config(layout="horizontal-scroll", auto_scroll=True, cycle_duration_ms=10000)

        assert transitions.base_cycle_duration(config, 1200) == 10000
        assert transitions.remaining_duration(10000, 0.25) == pytest.approx(7500)
        assert transitions.remaining_duration(10000, -0.25) == pytest.approx(7500)

    def test_tick_is_ignored_when_not_advancing(self, scroll_config):
        state = transitions.mount(scroll_config, EXTENT_CONTEXT)

        assert transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(400)) == state


class TestInteraction:
    """Pointer, touch, drag and hover suspension."""

    def test_begin_stops_advancing_and_captures_position(self, scroll_config):
        state = advancing_state(scroll_config)
        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(200))

        state = transitions.begin_interaction(state)

        assert not state.advancing
        assert state.user_interacted
        assert state.paused_position == pytest.approx(400 / 1200)
        assert transitions.timer_plan(state, scroll_config).advance_interval_ms is None

    def test_end_arms_resume_settle(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config))

        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        assert not state.user_interacted
        assert state.settle_delay_ms == 100

    def test_resume_keeps_captured_position(self, scroll_config):
        state = advancing_state(scroll_config)
        state = transitions.advance_tick(state, scroll_config, EXTENT_CONTEXT, metrics(200))
        state = transitions.begin_interaction(state)
        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        state = transitions.settle_elapsed(state, scroll_config, EXTENT_CONTEXT)

        assert state.advancing
        assert state.scroll_position == pytest.approx(400 / 1200)
        assert state.remaining_duration_ms == pytest.approx(18000 * (1 - 400 / 1200))

    def test_hover_blocks_resume_until_leave(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config), hover=True)
        state = transitions.begin_interaction(state)
        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        assert state.hovering
        assert state.settle_delay_ms is None

        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT, leave=True)

        assert not state.hovering
        assert state.settle_delay_ms == 100

    def test_hover_flicker_cancels_pending_settle(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config), hover=True)
        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT, leave=True)

        state = transitions.begin_interaction(state, hover=True)

        assert state.settle_delay_ms is None

    def test_pointer_is_held_until_end(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config))

        assert state.pointer_held
        assert not transitions.can_auto_advance(
            state.model_copy(update={"user_interacted": False}), scroll_config, EXTENT_CONTEXT
        )

        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        assert not state.pointer_held
        assert transitions.can_auto_advance(state, scroll_config, EXTENT_CONTEXT)

    def test_hover_does_not_hold_the_pointer(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config), hover=True)

        assert state.hovering
        assert not state.pointer_held

    def test_never_starts_while_user_interacted(self, scroll_config):
        state = transitions.mount(scroll_config, EXTENT_CONTEXT)
        state = state.model_copy(update={"user_interacted": True})

        state = transitions.settle_elapsed(state, scroll_config, EXTENT_CONTEXT)

        assert not state.advancing

    def test_interaction_ignored_when_unmounted(self):
        state = PresentationState(display_count=6)

        assert transitions.begin_interaction(state) == state


class TestScrollThreshold:
    """Progressive disclosure on scroll."""

    def test_scenario_d(self, make_config):
        config = make_config(layout="horizontal-scroll", initial_display_count=6, max_display_count=12)
        ctx = ViewContext(item_count=15, extent=1200.0)
        state = PresentationState(display_count=8, mounted=True)

        # (1100 + 800) / 2000 = 95%
        state = transitions.on_scroll(state, config, ctx, metrics(1100))

        assert state.display_count == min(8 + config.increment, 12, 15)

    def test_custom_increment(self, make_config):
        config = make_config(layout="horizontal-scroll", load_increment=2)
        ctx = ViewContext(item_count=15, extent=1200.0)
        state = PresentationState(display_count=8, mounted=True)

        state = transitions.on_scroll(state, config, ctx, metrics(1100))

        assert state.display_count == 10

    def test_below_threshold_changes_nothing(self, make_config):
        config = make_config(layout="horizontal-scroll")
        ctx = ViewContext(item_count=15, extent=1200.0)
        state = PresentationState(display_count=8, mounted=True)

        state = transitions.on_scroll(state, config, ctx, metrics(900))

        assert state.display_count == 8
        assert state.user_interacted
        assert state.reset_pending

    def test_clamped_to_item_count(self, make_config):
        config = make_config(layout="horizontal-scroll")
        ctx = ViewContext(item_count=9, extent=1200.0)
        state = PresentationState(display_count=6, mounted=True)

        state = transitions.on_scroll(state, config, ctx, metrics(1100))

        assert state.display_count == 9
        assert not state.is_expanded

    def test_expands_at_max(self, make_config):
        config = make_config(layout="horizontal-scroll")
        ctx = ViewContext(item_count=20, extent=1200.0)
        state = PresentationState(display_count=12, mounted=True)

        state = transitions.on_scroll(state, config, ctx, metrics(1100))

        assert state.is_expanded
        assert state.display_count == 12

    def test_user_scroll_stops_advancing(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.on_scroll(state, scroll_config, EXTENT_CONTEXT, metrics(300))

        assert not state.advancing
        assert state.paused_position == pytest.approx(300 / 1200)

    def test_auto_scroll_echo_keeps_advancing(self, scroll_config):
        state = advancing_state(scroll_config)

        state = transitions.on_scroll(state, scroll_config, EXTENT_CONTEXT, metrics(300), user=False)

        assert state.advancing
        assert not state.user_interacted
        assert state.reset_pending

    def test_auto_scroll_echo_into_expansion_halts(self, make_config):
        config = make_config(layout="horizontal-scroll", auto_scroll=True, max_display_count=6)
        ctx = ViewContext(item_count=10, extent=1200.0)
        state = advancing_state(config, ctx)

        state = transitions.on_scroll(state, config, ctx, metrics(1100), user=False)

        assert state.is_expanded
        assert not state.advancing


class TestIdleTimeout:
    """Idle reset."""

    def expanded(self, config):
        ctx = ViewContext(item_count=20, extent=1200.0)
        state = PresentationState(display_count=12, mounted=True)
        return transitions.on_scroll(state, config, ctx, metrics(1100)), ctx

    def test_resets_expanded_viewer(self, make_config):
        config = make_config(layout="horizontal-scroll")
        state, ctx = self.expanded(config)

        state = transitions.idle_timeout(state, config, ctx)

        assert state.display_count == 6
        assert not state.is_expanded
        assert not state.user_interacted
        assert state.scroll_position == 0.0
        assert state.phase == ViewerPhase.IDLE

    def test_is_idempotent(self, make_config):
        config = make_config(layout="horizontal-scroll")
        state, ctx = self.expanded(config)

        once = transitions.idle_timeout(state, config, ctx)
        twice = transitions.idle_timeout(once, config, ctx)

        assert twice == once

    def test_not_expanded_only_clears_interaction(self, make_config):
        config = make_config(layout="horizontal-scroll")
        ctx = ViewContext(item_count=20, extent=1200.0)
        state = transitions.on_scroll(PresentationState(display_count=6, mounted=True), config, ctx, metrics(1100))

        state = transitions.idle_timeout(state, config, ctx)

        assert state.display_count == 12
        assert not state.user_interacted
        assert not state.is_expanded

    def test_reset_resumes_auto_advance(self, scroll_config):
        ctx = ViewContext(item_count=20, extent=1200.0)
        state = transitions.mount(scroll_config, ctx)
        state = state.model_copy(update={"display_count": 12})
        state = transitions.on_scroll(state, scroll_config, ctx, metrics(1100))

        state = transitions.idle_timeout(state, scroll_config, ctx)

        assert state.settle_delay_ms == 100

    def test_held_pointer_keeps_interaction(self, scroll_config):
        state = transitions.mount(scroll_config, EXTENT_CONTEXT)
        state = transitions.begin_interaction(state)
        state = transitions.on_scroll(state, scroll_config, EXTENT_CONTEXT, metrics(300))

        state = transitions.idle_timeout(state, scroll_config, EXTENT_CONTEXT)

        assert state.user_interacted
        assert not state.reset_pending
        assert state.settle_delay_ms is None
        assert state.phase == ViewerPhase.USER_INTERACTING

        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        assert state.settle_delay_ms == 100

    def test_no_op_without_pending_reset(self, make_config):
        config = make_config(layout="horizontal-scroll")
        state = PresentationState(display_count=12, is_expanded=True, mounted=True)

        assert transitions.idle_timeout(state, config, ViewContext(item_count=20)) == state


class TestLoadMore:
    """Scenario A and the grid "Load More" action."""

    def test_scenario_a(self, make_config):
        config = make_config(layout="grid")
        ctx = ViewContext(item_count=20)
        state = transitions.mount(config, ctx)

        assert state.display_count == 6

        state = transitions.load_more(state, config, ctx)

        assert state.display_count == 12
        assert transitions.load_more(state, config, ctx) == state

    def test_clamped_to_items(self, make_config):
        config = make_config(layout="grid")
        ctx = ViewContext(item_count=8)

        state = transitions.load_more(transitions.mount(config, ctx), config, ctx)

        assert state.display_count == 8


class TestSyncAndUnmount:
    """Re-render with new inputs and teardown."""

    def test_loading_suspends_every_timer(self, scroll_config):
        state = advancing_state(scroll_config)
        state = transitions.on_scroll(state, scroll_config, EXTENT_CONTEXT, metrics(100), user=False)

        state = transitions.sync(state, scroll_config, ViewContext(item_count=10, is_loading=True, extent=1200.0))

        assert transitions.timer_plan(state, scroll_config).armed_count == 0

    def test_mount_settle_rearmed_after_loading(self, scroll_config):
        state = transitions.mount(scroll_config, ViewContext(item_count=0, is_loading=True))
        assert state.settle_delay_ms is None

        state = transitions.sync(state, scroll_config, EXTENT_CONTEXT)

        assert state.display_count == 6
        assert state.settle_delay_ms == 500

    def test_display_count_clamped_to_new_items(self, make_config):
        config = make_config()
        state = PresentationState(display_count=12, mounted=True)

        state = transitions.sync(state, config, ViewContext(item_count=7))

        assert state.display_count == 7

    def test_disabling_auto_scroll_halts(self, scroll_config, make_config):
        state = advancing_state(scroll_config)

        state = transitions.sync(state, make_config(layout="horizontal-scroll"), EXTENT_CONTEXT)

        assert not state.advancing

    def test_unmount_clears_every_timer(self, scroll_config):
        state = advancing_state(scroll_config)
        state = transitions.on_scroll(state, scroll_config, EXTENT_CONTEXT, metrics(100))
        state = transitions.end_interaction(state, scroll_config, EXTENT_CONTEXT)

        state = transitions.unmount(state)

        assert transitions.timer_plan(state, scroll_config).armed_count == 0
        assert not state.mounted

    def test_unmount_releases_held_pointer(self, scroll_config):
        state = transitions.begin_interaction(advancing_state(scroll_config))

        assert not transitions.unmount(state).pointer_held


class TestDisplayCountBounds:
    """display_count stays within [min(initial, n), min(max, n)]."""

    @pytest.mark.parametrize("item_count", [0, 3, 6, 10, 15, 30])
    def test_bounds_hold_over_event_sequence(self, make_config, item_count):
        config = make_config(layout="vertical-scroll", auto_scroll=True)
        ctx = ViewContext(item_count=item_count, extent=1200.0)
        low, high = transitions.display_bounds(config, item_count)
        state = transitions.mount(config, ctx)

        events = [1100, 200, 1100, 1100, None, 1150, None, None, 1100, 0]
        for offset in events:
            if offset is None:
                state = transitions.idle_timeout(state, config, ctx)
            else:
                state = transitions.on_scroll(state, config, ctx, metrics(offset))
            assert low <= state.display_count <= high
