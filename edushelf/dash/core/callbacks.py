"""
Central callback registration for the Dash application.
"""

from edushelf.configs.logging_init import logger


def register_all_callbacks(app):
    """
    Register every callback of the application.

    Args:
        app: Dash application instance
    """
    from edushelf.dash.modules.collection_component.callbacks import (
        register_callbacks_collection_component,
    )

    if register_callbacks_collection_component(app):
        logger.debug("Collection component callbacks registered")
