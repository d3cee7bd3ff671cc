"""
Collection Component - Core Callbacks

Every server callback delegates to a plain function of this module so the
state handling can be tested without a running Dash server.

Callbacks:
- handle_viewer_event: scroll/pointer/touch/drag/hover events from the listeners
- handle_advance_probe: advance tick, after the clientside probe measured the track
- handle_reset_timer / handle_settle_timer: one-shot idle reset and settle delay
- handle_load_more: grid "Load More" button
- sync_timers: keep the dcc.Interval props in line with timer_plan
- refresh_collection: re-render items, indicators and affordances
- handle_item_click / handle_view_all: dispatch the caller's Python callbacks
"""

from typing import Any, Optional

import dash
from dash import ALL, MATCH, Input, Output, State, ctx

from edushelf.configs.logging_init import logger
from edushelf.dash.modules.collection_component.events import (
    INTERACTION_BEGIN,
    INTERACTION_END,
    event_type,
    is_programmatic,
    parse_scroll_event,
)
from edushelf.dash.modules.collection_component.frontend import (
    affordance_styles,
    current_plan,
    render_indicators,
    render_items,
)
from edushelf.dash.modules.collection_component.registry import (
    ViewerSpec,
    dispatch_item_click,
    dispatch_view_all,
    get_viewer,
)
from edushelf.dash.modules.collection_component.utils import (
    dump_state,
    interval_props,
    load_state,
    scroll_command,
    viewer_context,
)
from edushelf.models.components import ScrollMetrics
from edushelf.models.components.constants import ADVANCE, RESET, SETTLE
from edushelf.viewer import transitions

# ---------------------------------------------------------------------------
# Plain state functions
# ---------------------------------------------------------------------------


def apply_event(spec: ViewerSpec, store: Any, event: Any) -> Optional[dict]:
    """
    Apply one listener event to the stored state.

    Returns:
        New store data, or None when the event is not understood.
    """
    state, extent = load_state(store)
    kind = event_type(event)
    config = spec.config
    rearm: tuple[str, ...] = ()

    if kind == "scroll":
        metrics = parse_scroll_event(event, config.layout)
        if metrics is None:
            logger.debug(f"Ignoring malformed scroll event for '{spec.viewer_id}': {event}")
            return None
        extent = metrics.extent
        context = viewer_context(spec.item_count, spec.is_loading, extent)
        state = transitions.on_scroll(state, config, context, metrics, user=not is_programmatic(event))
        rearm = (RESET,)
    elif kind in INTERACTION_BEGIN:
        state = transitions.begin_interaction(state, hover=kind == "mouseenter")
    elif kind in INTERACTION_END:
        context = viewer_context(spec.item_count, spec.is_loading, extent)
        state = transitions.end_interaction(state, config, context, leave=kind == "mouseleave")
    else:
        return None

    return dump_state(state, extent, rearm=rearm)


def apply_timer(
    spec: ViewerSpec, store: Any, timer: str, metrics: Optional[ScrollMetrics] = None
) -> tuple[Optional[dict], Optional[dict]]:
    """
    Apply a fired timer to the stored state.

    Args:
        spec: Registered viewer.
        store: Current state store data.
        timer: ``advance``, ``reset`` or ``settle``.
        metrics: Live track geometry; required for ``advance``.

    Returns:
        ``(store data, scroll command)``; either may be None when nothing changes.
    """
    state, extent = load_state(store)
    config = spec.config

    if timer == ADVANCE:
        if metrics is None:
            return None, None
        extent = metrics.extent
        context = viewer_context(spec.item_count, spec.is_loading, extent)
        new_state = transitions.advance_tick(state, config, context, metrics)
        command = None
        if new_state.advancing and extent > 0:
            command = scroll_command(transitions.scroll_offset(new_state, extent), config.layout)
        return dump_state(new_state, extent), command

    context = viewer_context(spec.item_count, spec.is_loading, extent)
    if timer == RESET:
        new_state = transitions.idle_timeout(state, config, context)
        command = None
        if state.is_expanded and not new_state.is_expanded:
            logger.debug(f"Viewer '{spec.viewer_id}' reset to {new_state.display_count} items")
            command = scroll_command(0.0, config.layout)
        return dump_state(new_state, extent), command

    if timer == SETTLE:
        return dump_state(transitions.settle_elapsed(state, config, context), extent), None

    logger.warning(f"Unknown timer '{timer}' for viewer '{spec.viewer_id}'")
    return None, None


def apply_load_more(spec: ViewerSpec, store: Any) -> dict:
    state, extent = load_state(store)
    context = viewer_context(spec.item_count, spec.is_loading, extent)
    return dump_state(transitions.load_more(state, spec.config, context), extent)


def timer_props(spec: ViewerSpec, store: Any, current: Optional[dict] = None) -> dict:
    state, _ = load_state(store)
    rearm = store.get("rearm", []) if isinstance(store, dict) else []
    return interval_props(transitions.timer_plan(state, spec.config), current, rearm)


def refresh_outputs(spec: ViewerSpec, store: Any) -> tuple[list, list, dict, dict]:
    """Items, indicators, Load More style and View All style for the stored state."""
    state, extent = load_state(store)
    plan = current_plan(spec, state, extent)
    load_more_style, view_all_style = affordance_styles(plan)
    return render_items(spec, plan), render_indicators(plan), load_more_style, view_all_style


def _viewer_or_none(component_id: Any) -> Optional[ViewerSpec]:
    if not isinstance(component_id, dict):
        return None
    return get_viewer(component_id.get("index"))


# ---------------------------------------------------------------------------
# Clientside code
# ---------------------------------------------------------------------------

# Dash serializes dict ids with sorted keys
_FIND_TRACK_JS = """
function edushelfFindTrack(id) {
    const keys = Object.keys(id).sort();
    const parts = keys.map(k => JSON.stringify(k) + ':' + JSON.stringify(id[k]));
    return document.getElementById('{' + parts.join(',') + '}');
}
"""

PROBE_TRACK_JS = (
    """
function(n_intervals, track_id) {
"""
    + _FIND_TRACK_JS
    + """
    const el = edushelfFindTrack(track_id);
    if (!el || !n_intervals) {
        return window.dash_clientside.no_update;
    }
    return {
        "type": "probe",
        "n": n_intervals,
        "target.scrollLeft": el.scrollLeft,
        "target.scrollTop": el.scrollTop,
        "target.scrollWidth": el.scrollWidth,
        "target.scrollHeight": el.scrollHeight,
        "target.clientWidth": el.clientWidth,
        "target.clientHeight": el.clientHeight
    };
}
"""
)

SCROLL_TRACK_JS = (
    """
function(command, track_id) {
"""
    + _FIND_TRACK_JS
    + """
    const el = edushelfFindTrack(track_id);
    if (!el || !command) {
        return window.dash_clientside.no_update;
    }
    el.dataset.autoScrolling = "1";
    clearTimeout(el._edushelfScrollTimer);
    el._edushelfScrollTimer = setTimeout(function() {
        delete el.dataset.autoScrolling;
    }, 800);
    const options = {behavior: command.smooth ? "smooth" : "auto"};
    options[command.axis] = command.offset;
    el.scrollTo(options);
    return command.issued_at;
}
"""
)


def register_core_callbacks(app):
    """Register the collection viewer callbacks."""

    app.clientside_callback(
        PROBE_TRACK_JS,
        Output({"type": "collection-probe", "index": MATCH}, "data"),
        Input({"type": "collection-advance", "index": MATCH}, "n_intervals"),
        State({"type": "collection-track", "index": MATCH}, "id"),
        prevent_initial_call=True,
    )

    app.clientside_callback(
        SCROLL_TRACK_JS,
        Output({"type": "collection-scroll-ack", "index": MATCH}, "data"),
        Input({"type": "collection-scroll-command", "index": MATCH}, "data"),
        State({"type": "collection-track", "index": MATCH}, "id"),
        prevent_initial_call=True,
    )

    @app.callback(
        Output({"type": "collection-state", "index": MATCH}, "data", allow_duplicate=True),
        Input({"type": "collection-listener", "index": MATCH}, "n_events"),
        Input({"type": "collection-hover-listener", "index": MATCH}, "n_events"),
        State({"type": "collection-listener", "index": MATCH}, "event"),
        State({"type": "collection-hover-listener", "index": MATCH}, "event"),
        State({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def handle_viewer_event(n_track, n_hover, track_event, hover_event, store):
        triggered = ctx.triggered_id
        spec = _viewer_or_none(triggered)
        if spec is None:
            return dash.no_update
        event = hover_event if triggered.get("type") == "collection-hover-listener" else track_event
        data = apply_event(spec, store, event)
        return data if data is not None else dash.no_update

    @app.callback(
        Output({"type": "collection-state", "index": MATCH}, "data", allow_duplicate=True),
        Output({"type": "collection-scroll-command", "index": MATCH}, "data", allow_duplicate=True),
        Input({"type": "collection-probe", "index": MATCH}, "data"),
        State({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def handle_advance_probe(probe, store):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None:
            return dash.no_update, dash.no_update
        data, command = apply_timer(
            spec, store, ADVANCE, parse_scroll_event(probe, spec.config.layout)
        )
        return (
            data if data is not None else dash.no_update,
            command if command is not None else dash.no_update,
        )

    @app.callback(
        Output({"type": "collection-state", "index": MATCH}, "data", allow_duplicate=True),
        Output({"type": "collection-scroll-command", "index": MATCH}, "data", allow_duplicate=True),
        Input({"type": "collection-reset", "index": MATCH}, "n_intervals"),
        State({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def handle_reset_timer(n_intervals, store):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None or not n_intervals:
            return dash.no_update, dash.no_update
        data, command = apply_timer(spec, store, RESET)
        return (
            data if data is not None else dash.no_update,
            command if command is not None else dash.no_update,
        )

    @app.callback(
        Output({"type": "collection-state", "index": MATCH}, "data", allow_duplicate=True),
        Input({"type": "collection-settle", "index": MATCH}, "n_intervals"),
        State({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def handle_settle_timer(n_intervals, store):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None or not n_intervals:
            return dash.no_update
        data, _ = apply_timer(spec, store, SETTLE)
        return data if data is not None else dash.no_update

    @app.callback(
        Output({"type": "collection-state", "index": MATCH}, "data", allow_duplicate=True),
        Input({"type": "collection-load-more", "index": MATCH}, "n_clicks"),
        State({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def handle_load_more(n_clicks, store):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None or not n_clicks:
            return dash.no_update
        return apply_load_more(spec, store)

    @app.callback(
        Output({"type": "collection-advance", "index": MATCH}, "disabled"),
        Output({"type": "collection-advance", "index": MATCH}, "interval"),
        Output({"type": "collection-reset", "index": MATCH}, "disabled"),
        Output({"type": "collection-reset", "index": MATCH}, "interval"),
        Output({"type": "collection-reset", "index": MATCH}, "n_intervals"),
        Output({"type": "collection-reset", "index": MATCH}, "max_intervals"),
        Output({"type": "collection-settle", "index": MATCH}, "disabled"),
        Output({"type": "collection-settle", "index": MATCH}, "interval"),
        Output({"type": "collection-settle", "index": MATCH}, "n_intervals"),
        Output({"type": "collection-settle", "index": MATCH}, "max_intervals"),
        Input({"type": "collection-state", "index": MATCH}, "data"),
        State({"type": "collection-advance", "index": MATCH}, "interval"),
        State({"type": "collection-reset", "index": MATCH}, "disabled"),
        State({"type": "collection-reset", "index": MATCH}, "interval"),
        State({"type": "collection-reset", "index": MATCH}, "n_intervals"),
        State({"type": "collection-settle", "index": MATCH}, "disabled"),
        State({"type": "collection-settle", "index": MATCH}, "interval"),
        State({"type": "collection-settle", "index": MATCH}, "n_intervals"),
        prevent_initial_call=True,
    )
    def sync_timers(
        store,
        advance_interval,
        reset_disabled,
        reset_interval,
        reset_n,
        settle_disabled,
        settle_interval,
        settle_n,
    ):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None:
            return [dash.no_update] * 10
        current = {
            ADVANCE: {"interval": advance_interval},
            RESET: {"disabled": reset_disabled, "interval": reset_interval, "n_intervals": reset_n},
            SETTLE: {
                "disabled": settle_disabled,
                "interval": settle_interval,
                "n_intervals": settle_n,
            },
        }
        props = timer_props(spec, store, current)
        one_shot = ("disabled", "interval", "n_intervals", "max_intervals")
        return (
            [props[ADVANCE]["disabled"], props[ADVANCE]["interval"]]
            + [props[RESET][key] for key in one_shot]
            + [props[SETTLE][key] for key in one_shot]
        )

    @app.callback(
        Output({"type": "collection-track", "index": MATCH}, "children"),
        Output({"type": "collection-indicators", "index": MATCH}, "children"),
        Output({"type": "collection-load-more-wrapper", "index": MATCH}, "style"),
        Output({"type": "collection-view-all", "index": MATCH}, "style"),
        Input({"type": "collection-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )
    def refresh_collection(store):
        spec = _viewer_or_none(ctx.triggered_id)
        if spec is None:
            return dash.no_update, dash.no_update, dash.no_update, dash.no_update
        return refresh_outputs(spec, store)

    @app.callback(
        Output({"type": "collection-click-sink", "viewer": MATCH}, "data"),
        Input({"type": "collection-item", "viewer": MATCH, "item": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def handle_item_click(n_clicks):
        triggered = ctx.triggered_id
        if not isinstance(triggered, dict) or not any(n_clicks or []):
            return dash.no_update
        # Re-rendered cards come back with n_clicks=0
        if not ctx.triggered or not ctx.triggered[0].get("value"):
            return dash.no_update
        dispatched = dispatch_item_click(triggered["viewer"], triggered["item"])
        return {"item": triggered["item"], "dispatched": dispatched}

    @app.callback(
        Output({"type": "collection-view-all-sink", "index": MATCH}, "data"),
        Input({"type": "collection-view-all", "index": MATCH}, "n_clicks"),
        prevent_initial_call=True,
    )
    def handle_view_all(n_clicks):
        triggered = ctx.triggered_id
        if not n_clicks or not isinstance(triggered, dict):
            return dash.no_update
        return {"dispatched": dispatch_view_all(triggered["index"]), "n_clicks": n_clicks}
