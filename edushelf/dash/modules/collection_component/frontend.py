"""
Collection Component - Layout

``build_collection`` assembles a viewer section: header with the optional
"View All" button, the body planned by ``plan_layout``, the state stores,
the three timer intervals and the EventListeners feeding the callbacks.
"""

from typing import Any, Iterable, Optional

import dash_mantine_components as dmc
from dash import dcc, html
from dash_extensions import EventListener
from dash_iconify import DashIconify

from edushelf.configs.logging_init import logger
from edushelf.dash.colors import colors
from edushelf.dash.modules.collection_component.events import HOVER_EVENTS, TRACK_EVENTS
from edushelf.dash.modules.collection_component.registry import ViewerSpec, register_viewer
from edushelf.dash.modules.collection_component.renderers import ImageResolver, Renderer, select_renderer
from edushelf.dash.modules.collection_component.utils import (
    IDLE_INTERVAL_MS,
    component_id,
    dump_state,
    item_component_id,
    viewer_context,
)
from edushelf.models.components import LayoutPlan, PresentationState, ViewerConfiguration
from edushelf.viewer import transitions
from edushelf.viewer.layout import plan_layout
from edushelf.viewer.normalizer import Mapper, normalize

HIDDEN = {"display": "none"}
VERTICAL_TRACK_HEIGHT = 480


def default_empty_state():
    return dmc.Stack(
        [
            dmc.ThemeIcon(
                DashIconify(icon="tabler:inbox", width=28),
                size=56,
                radius="xl",
                variant="light",
                color="gray",
            ),
            dmc.Text("No items available", fw=600, size="lg"),
            dmc.Text("Check back later for updates", size="sm", c="dimmed"),
        ],
        align="center",
        gap="xs",
        py="xl",
    )


def _skeletons(plan: LayoutPlan, config: ViewerConfiguration):
    cards = [dmc.Skeleton(h=220, radius="md") for _ in range(plan.skeleton_count)]
    if config.layout == "grid":
        return [dmc.SimpleGrid(cards, cols=plan.grid_cols, spacing="lg")]
    if config.is_horizontal:
        return [
            dmc.Group(
                [html.Div(card, style={"width": plan.track_item_width, "flexShrink": 0}) for card in cards],
                gap="lg",
                wrap="nowrap",
                style={"overflow": "hidden"},
            )
        ]
    return [dmc.Stack(cards, gap="md")]


def _loading_sentinel(plan: LayoutPlan, config: ViewerConfiguration):
    return dmc.Center(
        dmc.Loader(size="sm", type="dots"),
        style=_track_item_style(plan, config) | {"minHeight": 120},
    )


def _track_item_style(plan: LayoutPlan, config: ViewerConfiguration) -> dict:
    if config.is_horizontal:
        return {"width": plan.track_item_width, "flexShrink": 0}
    return {"width": "100%"}


def track_style(config: ViewerConfiguration) -> dict:
    if config.is_horizontal:
        return {
            "display": "flex",
            "gap": "var(--mantine-spacing-lg)",
            "overflowX": "auto",
            "scrollSnapType": "x proximity",
            "paddingBottom": "var(--mantine-spacing-sm)",
        }
    if config.layout == "vertical-scroll":
        return {
            "display": "flex",
            "flexDirection": "column",
            "gap": "var(--mantine-spacing-md)",
            "overflowY": "auto",
            "maxHeight": VERTICAL_TRACK_HEIGHT,
        }
    return {}


def render_items(spec: ViewerSpec, plan: LayoutPlan) -> list:
    """Children of the items container for one render pass."""
    config = spec.config
    if plan.mode == "skeleton":
        return _skeletons(plan, config)
    if plan.mode == "empty":
        return [spec.empty_state if spec.empty_state is not None else default_empty_state()]

    style = _track_item_style(plan, config) if config.is_scroll_layout else {"height": "100%"}
    children = []
    for index, item in enumerate(spec.items[: plan.visible_count]):
        record = spec.records[index] if index < len(spec.records) else None
        children.append(
            html.Div(
                spec.renderer(item, record, index),
                id=item_component_id(spec.viewer_id, item.id),
                n_clicks=0,
                style=style,
            )
        )

    if config.layout == "grid":
        return [dmc.SimpleGrid(children, cols=plan.grid_cols, spacing="lg")]
    if plan.show_loading_sentinel:
        children.append(_loading_sentinel(plan, config))
    return children


def render_indicators(plan: LayoutPlan) -> list:
    if not plan.indicator_count:
        return []
    return [
        dmc.Group(
            [
                html.Div(
                    style={
                        "width": 24 if index == plan.active_indicator else 8,
                        "height": 8,
                        "borderRadius": 4,
                        "backgroundColor": colors["indigo"]
                        if index == plan.active_indicator
                        else "var(--mantine-color-gray-4)",
                        "transition": "width 200ms ease",
                    }
                )
                for index in plan.indicator_range
            ],
            justify="center",
            gap=6,
            mt="sm",
        )
    ]


def affordance_styles(plan: LayoutPlan) -> tuple[dict, dict]:
    """Styles of the Load More and View All buttons."""
    return (
        {} if plan.show_load_more else HIDDEN,
        {} if plan.show_view_all else HIDDEN,
    )


def current_plan(spec: ViewerSpec, state: PresentationState, extent: Optional[float] = None) -> LayoutPlan:
    return plan_layout(
        spec.config,
        state,
        spec.item_count,
        is_loading=spec.is_loading,
        has_view_all=spec.config.has_view_all,
        extent=extent,
    )


def render_collection_body(
    spec: ViewerSpec, state: PresentationState, extent: Optional[float] = None
):
    """Body of a viewer: listeners around the items container, indicators and Load More."""
    config = spec.config
    plan = current_plan(spec, state, extent)
    load_more_style, _ = affordance_styles(plan)
    scrolling = config.is_scroll_layout and plan.mode == config.layout

    items_container = html.Div(
        render_items(spec, plan),
        id=component_id("track", spec.viewer_id),
        style=track_style(config) if scrolling else {},
    )

    return html.Div(
        [
            EventListener(
                EventListener(
                    items_container,
                    events=TRACK_EVENTS if scrolling else [],
                    logging=False,
                    useCapture=True,
                    id=component_id("listener", spec.viewer_id),
                ),
                events=HOVER_EVENTS if scrolling else [],
                logging=False,
                id=component_id("hover-listener", spec.viewer_id),
            ),
            html.Div(render_indicators(plan), id=component_id("indicators", spec.viewer_id)),
            dmc.Center(
                dmc.Button(
                    "Load More",
                    id=component_id("load-more", spec.viewer_id),
                    variant="light",
                    radius="xl",
                    leftSection=DashIconify(icon="tabler:chevron-down", width=16),
                    n_clicks=0,
                ),
                mt="lg",
                id=component_id("load-more-wrapper", spec.viewer_id),
                style=load_more_style,
            ),
        ],
        id=component_id("body", spec.viewer_id),
    )


def _header(spec: ViewerSpec, plan: LayoutPlan):
    config = spec.config
    _, view_all_style = affordance_styles(plan)
    heading = [dmc.Title(config.title, order=2)] if config.title else []
    if config.subtitle:
        heading.append(dmc.Text(config.subtitle, c="dimmed"))
    return dmc.Group(
        [
            dmc.Stack(heading, gap=4),
            dmc.Button(
                "View All",
                id=component_id("view-all", spec.viewer_id),
                variant="subtle",
                rightSection=DashIconify(icon="tabler:arrow-right", width=16),
                n_clicks=0,
                style=view_all_style,
            ),
        ],
        justify="space-between",
        align="flex-end",
        mb="lg",
    )


def _interval(kind: str, viewer_id: str, delay: Optional[int], one_shot: bool) -> dcc.Interval:
    kwargs: dict[str, Any] = {
        "id": component_id(kind, viewer_id),
        "interval": delay or IDLE_INTERVAL_MS,
        "disabled": delay is None,
        "n_intervals": 0,
    }
    if one_shot:
        kwargs["max_intervals"] = 1
    return dcc.Interval(**kwargs)


def build_collection(
    viewer_id: str,
    records: Optional[Iterable[Any]] = None,
    config: Optional[ViewerConfiguration] = None,
    mapper: Optional[Mapper] = None,
    renderer: Optional[Renderer] = None,
    is_loading: bool = False,
    empty_state: Optional[Any] = None,
    resolve_image: Optional[ImageResolver] = None,
    **config_overrides,
):
    """
    Build a collection viewer section and register it for the callbacks.

    Args:
        viewer_id: Unique id of the viewer; used in every pattern-matching id.
        records: Source records of arbitrary shape.
        config: Viewer configuration; built from settings plus ``config_overrides`` if omitted.
        mapper: Optional record -> DisplayItem mapping.
        renderer: Optional card renderer replacing the category's built-in one.
        is_loading: Render skeleton placeholders and keep every timer off.
        empty_state: Component shown instead of the default empty state.
        resolve_image: Image resolver for the built-in renderers.

    Returns:
        dmc.Paper holding the whole section.
    """
    if config is None:
        config = ViewerConfiguration.from_settings(**config_overrides)
    records = list(records or [])
    items = normalize(records, mapper=mapper)

    spec = register_viewer(
        ViewerSpec(
            viewer_id=viewer_id,
            records=records,
            items=items,
            config=config,
            renderer=select_renderer(config.category, custom=renderer, resolve_image=resolve_image),
            is_loading=is_loading,
            empty_state=empty_state,
        )
    )

    state = transitions.mount(config, viewer_context(len(items), is_loading, None))
    plan = current_plan(spec, state)
    timers = transitions.timer_plan(state, config)
    logger.debug(
        f"Built collection '{viewer_id}': {len(items)} items, layout={config.layout}, "
        f"mode={plan.mode}, timers={timers.armed_count}"
    )

    return dmc.Paper(
        [
            _header(spec, plan),
            render_collection_body(spec, state),
            dcc.Store(id=component_id("state", viewer_id), data=dump_state(state)),
            dcc.Store(id=component_id("probe", viewer_id)),
            dcc.Store(id=component_id("scroll-command", viewer_id)),
            dcc.Store(id=component_id("scroll-ack", viewer_id)),
            dcc.Store(id=component_id("view-all-sink", viewer_id)),
            dcc.Store(id={"type": "collection-click-sink", "viewer": viewer_id}),
            _interval("advance", viewer_id, timers.advance_interval_ms, one_shot=False),
            _interval("reset", viewer_id, timers.reset_timeout_ms, one_shot=True),
            _interval("settle", viewer_id, timers.settle_delay_ms, one_shot=True),
        ],
        id=component_id("section", viewer_id),
        p="lg",
        radius="md",
        withBorder=False,
        mb="xl",
    )
