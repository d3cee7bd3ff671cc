"""
Collection Component Callbacks

All viewer callbacks are pattern-matching, so they are registered once at app
startup and serve every collection on the page.
"""

# ids of the apps the callbacks were registered on
_registered_apps: set[int] = set()


def register_callbacks_collection_component(app):
    """
    Register the collection viewer callbacks.

    Args:
        app: Dash application instance

    Returns:
        bool: True if callbacks were registered, False if already registered
    """
    if id(app) in _registered_apps:
        return False

    from .core import register_core_callbacks

    register_core_callbacks(app)
    _registered_apps.add(id(app))

    return True
