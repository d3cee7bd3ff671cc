import logging
import re
import sys
from io import StringIO
from typing import Any

import pydantic
from colorlog import ColoredFormatter
from rich.console import Console
from rich.pretty import Pretty
from rich.theme import Theme

# Pydantic-friendly variant of Rich's default repr theme
custom_theme = Theme(
    {
        "repr.tag_name": "bold magenta",
        "repr.attrib_name": "yellow",
        "repr.attrib_value": "green",
        "repr.attrib_equal": "dim",
        "repr.bool_true": "bold bright_green",
        "repr.bool_false": "bold bright_red",
        "repr.none": "dim",
        "repr.number": "cyan",
        "repr.str": "green",
        "repr.brace": "bold dim",
    }
)

MAX_VALUE_LENGTH = 30


def format_pydantic(
    model: pydantic.BaseModel, max_line_length: int = 80, color: bool = True
) -> str:
    """
    Format a Pydantic model for use in f-strings and log messages.

    Args:
        model: A Pydantic model instance
        max_line_length: Maximum length for single-line representation
        color: Whether to apply ANSI color formatting

    Returns:
        Formatted string representation of the model
    """
    if not isinstance(model, pydantic.BaseModel):
        return str(model)

    model_dict = model.model_dump()
    model_name = model.__class__.__name__

    plain_items = [f"{key}={_plain_format_value(value)}" for key, value in model_dict.items()]
    plain_text_length = len(f"{model_name}({', '.join(plain_items)})")

    if color:
        items = [
            f"\033[33m{key}\033[0m={_color_format_value(value)}"
            for key, value in model_dict.items()
        ]
        head = f"\033[1;95m{model_name}\033[0m"
    else:
        items = plain_items
        head = model_name

    if plain_text_length <= max_line_length:
        return f"{head}({', '.join(items)})"

    lines = [f"{head}("]
    lines.extend(f"    {item}," for item in items)
    lines.append(")")
    return "\n".join(lines)


def _plain_format_value(value: Any) -> str:
    """Format a value without ANSI colors"""
    if value is None or isinstance(value, bool | int | float):
        return str(value)
    elif isinstance(value, str):
        if len(value) > MAX_VALUE_LENGTH:
            return f"'{value[:27]}...'"
        return f"'{value}'"
    elif isinstance(value, list | tuple):
        if len(value) <= 3:
            items = ", ".join(_plain_format_value(item) for item in value)
            return f"[{items}]" if isinstance(value, list) else f"({items})"
        return f"[{len(value)} items]" if isinstance(value, list) else f"({len(value)} items)"
    elif isinstance(value, dict):
        if len(value) <= 2:
            items = ", ".join(f"{k}: {_plain_format_value(v)}" for k, v in value.items())
            return f"{{{items}}}"
        return f"{{{len(value)} items}}"

    repr_val = repr(value)
    if len(repr_val) > MAX_VALUE_LENGTH:
        return repr_val[:27] + "..."
    return repr_val


def _color_format_value(value: Any) -> str:
    """Format a value with ANSI color codes"""
    if value is None:
        return "\033[2mNone\033[0m"
    elif isinstance(value, bool):
        return "\033[1;92mTrue\033[0m" if value else "\033[1;91mFalse\033[0m"
    elif isinstance(value, int | float):
        return f"\033[36m{value}\033[0m"
    elif isinstance(value, str):
        return f"\033[32m{_plain_format_value(value)}\033[0m"
    elif isinstance(value, list | tuple):
        opening, closing = ("[", "]") if isinstance(value, list) else ("(", ")")
        if len(value) <= 3:
            items = ", ".join(_color_format_value(item) for item in value)
        else:
            items = f"{len(value)} items"
        return f"\033[1;37m{opening}\033[0m{items}\033[1;37m{closing}\033[0m"
    elif isinstance(value, dict):
        if len(value) <= 2:
            items = ", ".join(
                f"\033[33m{k}\033[0m: {_color_format_value(v)}" for k, v in value.items()
            )
        else:
            items = f"{len(value)} items"
        return f"\033[1;37m{{\033[0m{items}\033[1;37m}}\033[0m"
    return _plain_format_value(value)


class RichReprFormatter(ColoredFormatter):
    """
    A formatter that renders Pydantic models (viewer configuration, presentation
    state, layout plans) with Rich-like styling while keeping the colored log format.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.string_console = Console(
            highlight=True, width=120, theme=custom_theme, file=StringIO()
        )
        self.max_single_line_length = 80

    def _pretty(self, obj: Any) -> str:
        self.string_console.file = StringIO()
        self.string_console.print(Pretty(obj))
        return self.string_console.file.getvalue().strip()

    def format(self, record):
        if isinstance(record.msg, pydantic.BaseModel):
            try:
                record.msg = format_pydantic(record.msg, self.max_single_line_length)
            except Exception:
                record.msg = self._pretty(record.msg)
        elif not isinstance(record.msg, str | int | float | bool | type(None)):
            record.msg = self._pretty(record.msg)

        # Shorten pathname to start from 'edushelf/'
        match = re.search(r"(edushelf/.*?)$", getattr(record, "pathname", "") or "")
        if match:
            record.pathname = match.group(1)

        return super().format(record)


def setup_logging(name=None, level="INFO"):
    """
    Set up the ``edushelf`` logger with:
    - Path from edushelf folder only
    - Colored level name
    - Bold line number and function name
    - Rich-like representation for Pydantic models
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("edushelf")
    logger.setLevel(numeric_level)
    logger.propagate = True

    # Avoid duplicate handlers when re-initialized
    if logger.handlers:
        logger.handlers = []

    formatter = RichReprFormatter(
        "%(asctime)s - %(log_color)s%(levelname)s%(reset)s - %(pathname)s:%(bold)s%(lineno)d%(reset)s - %(bold)s%(funcName)s%(reset)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={
            "bold": {
                "DEBUG": "bold",
                "INFO": "bold",
                "WARNING": "bold",
                "ERROR": "bold",
                "CRITICAL": "bold",
            }
        },
        style="%",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
