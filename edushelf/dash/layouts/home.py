"""
Home page: the platform's content sections, each rendered as a collection viewer.
"""

from typing import Any

import dash_mantine_components as dmc
from dash_iconify import DashIconify

from edushelf.configs.logging_init import logger
from edushelf.dash.data.mock_data import (
    ARTICLES,
    CATEGORIES,
    COURSES,
    INSTRUCTORS,
    MEMBERS,
    TESTIMONIALS,
    article_mapper,
    course_mapper,
    member_mapper,
)
from edushelf.dash.modules.collection_component.frontend import build_collection
from edushelf.models.components import DisplayItem, ViewerConfiguration


def log_item_click(record: Any) -> None:
    record_id = record.get("id") if isinstance(record, dict) else getattr(record, "id", None)
    logger.info(f"Item activated: {record_id}")


def view_all(section: str):
    def handler() -> None:
        logger.info(f"View all requested for '{section}'")

    return handler


def render_testimonial(item: DisplayItem, record: Any, index: int):
    """Quote card used by the testimonials section."""
    return dmc.Paper(
        dmc.Stack(
            [
                DashIconify(icon="tabler:quote", width=28, color="var(--mantine-color-indigo-5)"),
                dmc.Text(record.get("quote", ""), fs="italic"),
                dmc.Group(
                    [
                        dmc.Avatar(item.title[:1], radius="xl", color="indigo"),
                        dmc.Stack(
                            [
                                dmc.Text(item.title, fw=600, size="sm"),
                                dmc.Text(record.get("programme", ""), size="xs", c="dimmed"),
                            ],
                            gap=0,
                        ),
                    ],
                    gap="sm",
                ),
            ],
            gap="md",
        ),
        p="lg",
        radius="md",
        withBorder=True,
        h="100%",
    )


def create_home_layout():
    sections = [
        build_collection(
            "featured-courses",
            COURSES,
            ViewerConfiguration.from_settings(
                title="Featured Courses",
                subtitle="Hand-picked courses to boost your career",
                category="course",
                layout="horizontal-scroll",
                auto_scroll=True,
                auto_scroll_interval=4000,
                initial_display_count=8,
                max_display_count=15,
                on_item_click=log_item_click,
                on_view_all=view_all("featured-courses"),
            ),
            mapper=course_mapper,
        ),
        build_collection(
            "latest-articles",
            ARTICLES,
            ViewerConfiguration.from_settings(
                title="Latest Articles",
                subtitle="Stay updated with our latest tutorials and guides",
                category="blog",
                layout="grid",
                initial_display_count=6,
                max_display_count=12,
                on_item_click=log_item_click,
                on_view_all=view_all("latest-articles"),
            ),
            mapper=article_mapper,
        ),
        build_collection(
            "instructors",
            INSTRUCTORS,
            ViewerConfiguration.from_settings(
                title="Meet Our Instructors",
                subtitle="Learn from industry experts and educators",
                category="instructor",
                layout="grid",
                initial_display_count=5,
                max_display_count=15,
                on_item_click=log_item_click,
            ),
        ),
        build_collection(
            "active-members",
            MEMBERS,
            ViewerConfiguration.from_settings(
                title="Active Community Members",
                subtitle="Connect with members currently online",
                category="user",
                layout="vertical-scroll",
                auto_scroll=True,
                auto_scroll_interval=3000,
                reset_timeout=10000,
                initial_display_count=6,
                max_display_count=20,
                on_item_click=log_item_click,
                on_view_all=view_all("active-members"),
            ),
            mapper=member_mapper,
        ),
        build_collection(
            "categories",
            CATEGORIES,
            ViewerConfiguration.from_settings(
                title="Explore Categories",
                subtitle="Find the perfect course for your learning goals",
                category="category",
                layout="grid",
                initial_display_count=8,
                on_item_click=log_item_click,
            ),
        ),
        build_collection(
            "testimonials",
            TESTIMONIALS,
            ViewerConfiguration.from_settings(
                title="What Students Say",
                layout="horizontal-scroll",
                initial_display_count=4,
                max_display_count=4,
            ),
            mapper=lambda record: {"id": record["id"], "title": record["author"]},
            renderer=render_testimonial,
        ),
    ]
    return dmc.Container(sections, size="xl", py="xl")
