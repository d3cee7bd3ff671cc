from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewerSettings(BaseSettings):
    """Defaults applied to every collection viewer built through ``from_settings``."""

    initial_display_count: int = Field(default=6)
    max_display_count: int = Field(default=12)
    load_increment: Optional[int] = Field(default=None)
    auto_scroll: bool = Field(default=False)
    auto_scroll_interval: int = Field(default=3000, description="Auto-advance tick in ms")
    reset_timeout: int = Field(default=5000, description="Idle time before reset in ms")
    show_view_all_button: bool = Field(default=True)
    cycle_duration_ms: Optional[int] = Field(default=None)

    # Tuning
    horizontal_step_px: int = Field(default=200)
    vertical_step_px: int = Field(default=100)
    load_threshold: float = Field(default=0.9)
    mount_settle_ms: int = Field(default=500)
    resume_settle_ms: int = Field(default=100)

    model_config = SettingsConfigDict(env_prefix="EDUSHELF_VIEWER_")


class DashConfig(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5080)
    debug: bool = Field(default=False)
    title: str = Field(default="EduShelf")

    model_config = SettingsConfigDict(env_prefix="EDUSHELF_DASH_")


class LoggingConfig(BaseSettings):
    verbosity_level: str = Field(default="ERROR")

    model_config = SettingsConfigDict(env_prefix="EDUSHELF_LOGGING_")


class Settings(BaseSettings):
    """Aggregated settings; environment variables override the defaults."""

    context: str = Field(default="server")
    viewer: ViewerSettings = Field(default_factory=ViewerSettings)
    dash: DashConfig = Field(default_factory=DashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="EDUSHELF_")
