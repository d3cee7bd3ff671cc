"""
Factory module for creating and configuring the Dash application.
"""

import os

import dash

from edushelf.configs.config import settings
from edushelf.configs.logging_init import logger


def create_dash_app():
    """
    Create and configure a new Dash application instance.

    Returns:
        dash.Dash: Configured Dash application instance
    """
    dash_root_path = os.path.dirname(os.path.dirname(__file__))
    assets_folder = os.path.join(dash_root_path, "assets")

    app = dash.Dash(
        __name__,
        requests_pathname_prefix="/",
        suppress_callback_exceptions=True,
        title=settings.dash.title,
        assets_folder=assets_folder,
        assets_url_path="/assets",
    )

    # Configure Flask's logger to use custom logging settings
    server = app.server
    server.logger.handlers = logger.handlers
    server.logger.setLevel(logger.level)

    logger.info(f"Dash app '{settings.dash.title}' created (debug={settings.dash.debug})")
    return app
