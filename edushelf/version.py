"""
Version retrieval module.

This module provides a way to get the project version from pyproject.toml.
"""

from importlib.metadata import PackageNotFoundError, version as installed_version
from pathlib import Path

import tomli
from pydantic import validate_call

from edushelf.configs.logging_init import logger


@validate_call(validate_return=True)
def get_version() -> str:
    """
    Retrieve the version from pyproject.toml, or from the installed
    distribution when the source tree is not available.

    Returns:
        str: Project version
    """
    project_root = Path(__file__).parent.parent
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        try:
            return installed_version("edushelf")
        except PackageNotFoundError:
            logger.warning("edushelf is neither in a source tree nor installed")
            return "0.0.0"

    with open(pyproject_path, "rb") as f:
        pyproject_data = tomli.load(f)

    version = pyproject_data["project"]["version"]
    logger.debug(f"Project version: {version}")

    return version
