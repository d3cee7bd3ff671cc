"""
Collection Component - Card Renderers

One built-in renderer per SectionCategory. ``select_renderer`` returns a
callable ``(item, record, index) -> component``; a caller-supplied renderer
replaces the built-in selection entirely.
"""

from datetime import datetime
from typing import Any, Callable, Optional

import dash_mantine_components as dmc
from dash import html
from dash_iconify import DashIconify

from edushelf.configs.logging_init import logger
from edushelf.dash.colors import level_colors, online_color, placeholder_gradients
from edushelf.models.components import DisplayItem, ImageReference, SectionCategory, resolve_category
from edushelf.viewer.images import resolve_image as default_resolve_image
from edushelf.viewer.normalizer import metadata_value

Renderer = Callable[[DisplayItem, Any, int], Any]
ImageResolver = Callable[[Optional[ImageReference], Optional[str]], Optional[str]]

CARD_STYLE = {"height": "100%", "cursor": "pointer"}


def format_date(value: Optional[str]) -> Optional[str]:
    """Format an ISO date as ``Mar 15, 2024``; unparseable values are shown as-is."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def initial_of(title: str) -> str:
    return title[:1].upper() or "?"


def gradient_placeholder(category: SectionCategory, glyph: str, size: int = 64, radius: str = "md"):
    """Gradient glyph shown when no image resolves."""
    return dmc.ThemeIcon(
        dmc.Text(glyph, fz=size // 2, fw=700, c="white"),
        size=size,
        radius=radius,
        variant="gradient",
        gradient=placeholder_gradients[category.value],
    )


def _header_image(src: Optional[str], alt: str, height: int, fallback):
    if src:
        return dmc.CardSection(dmc.Image(src=src, alt=alt, h=height, fit="cover"))
    return dmc.CardSection(
        dmc.Center(fallback, h=height, style={"overflow": "hidden"}),
    )


def _stat(icon: str, value: Optional[str]):
    if value is None:
        return None
    return dmc.Group(
        [dmc.Text(icon, size="sm"), dmc.Text(value, size="sm", fw=500)],
        gap=4,
    )


def _text_block(item: DisplayItem, title_order: int = 4):
    children = [dmc.Title(item.title, order=title_order, lineClamp=2)]
    if item.subtitle:
        children.append(dmc.Text(item.subtitle, size="sm", c="dimmed"))
    if item.description:
        children.append(dmc.Text(item.description, size="sm", lineClamp=3))
    return children


def _compact(children):
    return [child for child in children if child is not None]


def _card(children, **kwargs):
    return dmc.Card(
        children=children,
        withBorder=True,
        shadow="sm",
        radius="md",
        padding="lg",
        style=CARD_STYLE,
        **kwargs,
    )


def render_blog(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    src = resolve(item.image, item.image_id)
    date = format_date(metadata_value(item, "date"))
    read_time = metadata_value(item, "readTime")

    footer = _compact(
        [
            dmc.Text(f"📅 {date}", size="xs", c="dimmed") if date else None,
            dmc.Text(f"⏱️ {read_time} min read", size="xs", c="dimmed") if read_time else None,
        ]
    )
    return _card(
        _compact(
            [
                _header_image(src, item.title, 180, gradient_placeholder(SectionCategory.BLOG, "📝", 96)),
                dmc.Stack(_text_block(item), gap=6, mt="md"),
                dmc.Group(footer, justify="space-between", mt="md") if footer else None,
            ]
        )
    )


def render_course(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    src = resolve(item.image, item.image_id)
    level = metadata_value(item, "level")

    header = _header_image(src, item.title, 160, gradient_placeholder(SectionCategory.COURSE, "📚", 96))
    children = [header]
    if level:
        children.append(
            dmc.Badge(
                level,
                color=level_colors.get(level.lower(), "blue"),
                variant="light",
                mt="md",
            )
        )
    children.append(dmc.Stack(_text_block(item), gap=6, mt="sm"))

    stats = _compact(
        [
            _stat("👥", metadata_value(item, "students")),
            _stat("⭐", metadata_value(item, "rating")),
        ]
    )
    if stats:
        children.append(dmc.Group(stats, justify="space-between", mt="md"))
    return _card(children)


def render_instructor(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    src = resolve(item.image, item.image_id)
    portrait = (
        dmc.Avatar(src=src, alt=item.title, size=112, radius="xl")
        if src
        else gradient_placeholder(SectionCategory.INSTRUCTOR, initial_of(item.title), 112, "xl")
    )
    stats = _compact(
        [
            _stat("📚", metadata_value(item, "courses")),
            _stat("👥", metadata_value(item, "students")),
            _stat("⭐", metadata_value(item, "rating")),
        ]
    )
    body = [portrait, *_text_block(item, title_order=5)]
    if stats:
        body.append(dmc.Group(stats, justify="center", gap="md"))
    return _card(dmc.Stack(body, align="center", gap=6, ta="center"))


def render_user(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    src = resolve(item.image, item.image_id)
    is_online = metadata_value(item, "isOnline") == "true"
    role = metadata_value(item, "role")

    if src:
        avatar = dmc.Indicator(
            dmc.Avatar(src=src, alt=item.title, size=56, radius="xl"),
            color=online_color,
            size=12,
            offset=6,
            position="bottom-end",
            withBorder=True,
            disabled=not is_online,
        )
    else:
        avatar = gradient_placeholder(SectionCategory.USER, initial_of(item.title), 56, "xl")

    details = [dmc.Text(item.title, fw=600, lineClamp=1)]
    if item.subtitle:
        details.append(dmc.Text(item.subtitle, size="sm", c="dimmed", lineClamp=1))
    if role:
        details.append(dmc.Badge(role, variant="light", size="sm"))
    return _card(
        dmc.Group(
            [avatar, dmc.Stack(details, gap=4, style={"flex": 1, "minWidth": 0})],
            gap="md",
            wrap="nowrap",
        )
    )


def render_category(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    if item.icon:
        visual = dmc.Text(item.icon, fz=40) if not _is_iconify_name(item.icon) else DashIconify(
            icon=item.icon, width=40
        )
    else:
        src = resolve(item.image, item.image_id)
        visual = (
            dmc.Image(src=src, alt=item.title, w=64, h=64, radius="md", fit="cover")
            if src
            else gradient_placeholder(SectionCategory.CATEGORY, "📁")
        )
    count = metadata_value(item, "count")
    body = [visual, dmc.Text(item.title, fw=600, ta="center")]
    if count:
        body.append(dmc.Text(f"{count} items", size="xs", c="dimmed"))
    return _card(dmc.Stack(body, align="center", gap=8))


def render_default(item: DisplayItem, record: Any, index: int, resolve: ImageResolver):
    src = resolve(item.image, item.image_id)
    children = []
    if src:
        children.append(dmc.CardSection(dmc.Image(src=src, alt=item.title, h=160, fit="cover")))
    body = []
    if item.icon:
        body.append(dmc.Text(item.icon, fz=28))
    body.extend(_text_block(item))
    children.append(dmc.Stack(body, gap=6, mt="md" if src else 0))
    return _card(children)


def _is_iconify_name(icon: str) -> bool:
    return ":" in icon and icon.isascii()


BUILT_IN_RENDERERS = {
    SectionCategory.BLOG: render_blog,
    SectionCategory.COURSE: render_course,
    SectionCategory.INSTRUCTOR: render_instructor,
    SectionCategory.USER: render_user,
    SectionCategory.CATEGORY: render_category,
    SectionCategory.DEFAULT: render_default,
}


def select_renderer(
    category: str | SectionCategory | None,
    custom: Optional[Renderer] = None,
    resolve_image: Optional[ImageResolver] = None,
) -> Renderer:
    """
    Pick the card renderer for ``category``.

    Args:
        category: Category tag; aliases and unknown tags resolve to ``default``.
        custom: Caller-supplied renderer, used verbatim when given.
        resolve_image: Image resolver, defaults to the bundled registry.

    Returns:
        Callable rendering ``(item, record, index)`` into a Dash component.
    """
    if custom is not None:
        return custom

    section = resolve_category(category)
    renderer = BUILT_IN_RENDERERS.get(section, render_default)
    resolve = resolve_image or default_resolve_image

    def render(item: DisplayItem, record: Any, index: int):
        try:
            return renderer(item, record, index, resolve)
        except Exception as e:
            logger.exception(f"Failed to render item '{item.id}' as {section.value}: {e}")
            return render_fallback(item)

    render.category = section
    return render


def render_fallback(item: DisplayItem):
    """Minimal card used when a built-in renderer fails."""
    return _card(html.Div(dmc.Text(item.title, fw=600)))
