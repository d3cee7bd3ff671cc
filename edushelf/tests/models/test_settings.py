"""
Unit tests for settings loading.

Tests cover:
- Environment overrides with the EDUSHELF_ prefixes
- Building viewer configurations from settings
"""

from edushelf.configs.settings_models import DashConfig, Settings, ViewerSettings
from edushelf.models.components import ViewerConfiguration


class TestViewerSettings:
    """Tests for ViewerSettings."""

    def test_defaults(self):
        """Should match the viewer configuration defaults."""
        settings = ViewerSettings()

        assert settings.initial_display_count == 6
        assert settings.max_display_count == 12
        assert settings.auto_scroll is False
        assert settings.load_threshold == 0.9

    def test_environment_overrides(self, monkeypatch):
        """Should read EDUSHELF_VIEWER_* variables."""
        monkeypatch.setenv("EDUSHELF_VIEWER_INITIAL_DISPLAY_COUNT", "4")
        monkeypatch.setenv("EDUSHELF_VIEWER_AUTO_SCROLL", "true")
        monkeypatch.setenv("EDUSHELF_VIEWER_RESET_TIMEOUT", "8000")

        settings = ViewerSettings()

        assert settings.initial_display_count == 4
        assert settings.auto_scroll is True
        assert settings.reset_timeout == 8000


class TestSettings:
    """Tests for the aggregated Settings."""

    def test_nested_sections(self, monkeypatch):
        """Should build every section from its own prefix."""
        monkeypatch.setenv("EDUSHELF_DASH_PORT", "9000")
        monkeypatch.setenv("EDUSHELF_LOGGING_VERBOSITY_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.dash.port == 9000
        assert settings.logging.verbosity_level == "DEBUG"
        assert settings.viewer.max_display_count == 12

    def test_dash_defaults(self):
        assert DashConfig().title == "EduShelf"


class TestFromSettings:
    """Tests for ViewerConfiguration.from_settings."""

    def test_overrides_win(self):
        """Should apply keyword overrides over the settings defaults."""
        config = ViewerConfiguration.from_settings(title="Courses", layout="horizontal-scroll")

        assert config.title == "Courses"
        assert config.layout == "horizontal-scroll"
        assert config.initial_display_count == 6

    def test_settings_values_are_used(self, monkeypatch):
        """Should pick up values from the loaded settings."""
        from edushelf.configs import config as config_module

        monkeypatch.setattr(
            config_module.settings, "viewer", ViewerSettings(initial_display_count=3, max_display_count=9)
        )

        config = ViewerConfiguration.from_settings(title="Members")

        assert config.initial_display_count == 3
        assert config.max_display_count == 9
