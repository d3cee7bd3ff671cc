from edushelf.configs.config import settings
from edushelf.dash.core.app_factory import create_dash_app
from edushelf.dash.core.callbacks import register_all_callbacks
from edushelf.dash.layouts.app_layout import create_app_layout

# Create and configure the Dash application
app = create_dash_app()

# Set the application layout
app.layout = create_app_layout

# Register all callbacks
register_all_callbacks(app)

# Get the Flask server instance for WSGI
server = app.server


def main():
    print(f"Starting Dash server on {settings.dash.host}:{settings.dash.port}")
    app.run(host=settings.dash.host, port=settings.dash.port, debug=settings.dash.debug)


# Run the server if executed directly (not through WSGI)
if __name__ == "__main__":
    main()
