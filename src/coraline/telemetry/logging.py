"""Console logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from coraline.speech.errors import ConfigurationError

_HANDLER_NAME = "coraline-rich"


def resolve_level(level: str | int) -> int:
    """Map a level name such as ``debug`` to its numeric value."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: str | int = "INFO") -> None:
    """Install a stderr rich handler on the root logger once and set the level."""
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)
    root.setLevel(numeric_level)
