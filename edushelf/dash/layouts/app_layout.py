import dash_mantine_components as dmc
from dash_iconify import DashIconify

from edushelf.configs.config import settings
from edushelf.dash.layouts.home import create_home_layout
from edushelf.version import get_version


def create_header():
    return dmc.AppShellHeader(
        dmc.Group(
            [
                dmc.Group(
                    [
                        DashIconify(icon="tabler:books", width=28, color="var(--mantine-color-indigo-6)"),
                        dmc.Title(settings.dash.title, order=3),
                        dmc.Badge(f"v{get_version()}", variant="light", size="sm"),
                    ],
                    gap="xs",
                ),
            ],
            h="100%",
            px="md",
        )
    )


def create_app_layout():
    """Root layout; rebuilt on every page load so each visitor gets fresh viewer state."""
    return dmc.MantineProvider(
        id="mantine-provider",
        forceColorScheme="light",
        children=dmc.AppShell(
            [
                create_header(),
                dmc.AppShellMain(create_home_layout()),
            ],
            header={"height": 60},
            padding="md",
        ),
    )
