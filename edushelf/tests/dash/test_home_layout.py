"""
Unit tests for the demo home page.
"""

import dash_mantine_components as dmc

from edushelf.dash.data.mock_data import COURSES, INSTRUCTORS, MEMBERS
from edushelf.dash.layouts.home import create_home_layout, log_item_click, view_all
from edushelf.dash.modules.collection_component.registry import get_viewer

SECTIONS = [
    "featured-courses",
    "latest-articles",
    "instructors",
    "active-members",
    "categories",
    "testimonials",
]


class TestHomeLayout:
    """Tests for create_home_layout."""

    def test_every_section_is_registered(self):
        """Should build and register one viewer per section."""
        layout = create_home_layout()

        assert isinstance(layout, dmc.Container)
        assert len(layout.children) == len(SECTIONS)
        for viewer_id in SECTIONS:
            assert get_viewer(viewer_id) is not None

    def test_mappers_and_inference(self):
        """Should normalize every record of the mock data."""
        create_home_layout()

        assert get_viewer("featured-courses").item_count == len(COURSES)
        assert get_viewer("active-members").item_count == len(MEMBERS)
        instructors = get_viewer("instructors")
        assert instructors.item_count == len(INSTRUCTORS)
        assert instructors.items[0].title == INSTRUCTORS[0]["name"]

    def test_section_callbacks(self):
        """Should wire item clicks everywhere and View All where offered."""
        create_home_layout()

        assert get_viewer("featured-courses").config.has_view_all
        assert not get_viewer("instructors").config.has_view_all
        assert get_viewer("categories").config.on_item_click is log_item_click

    def test_handlers_do_not_raise(self):
        log_item_click({"id": "c1"})
        log_item_click(object())
        view_all("courses")()
