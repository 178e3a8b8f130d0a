"""
Logging helpers

Library modules only call logging.getLogger(__name__). Applications that want
to see those records call setup_logger() once, which routes the
entity_registry logger through a rich console handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import Config

ROOT_LOGGER_NAME = "entity_registry"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or a child of it for name."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(
    name: Optional[str] = None,
    level: Optional[int] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Safe to call repeatedly: the handler is added once and only the level
    is updated on later calls.

    Args:
        name: Optional child logger name (e.g., "cli")
        level: Logging level; defaults to Config.log_level()
        console: Console to write to; defaults to stderr

    Returns:
        The configured logger
    """
    if level is None:
        level = Config.log_level()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=Config.DEBUG,
            rich_tracebacks=True,
        )
        root.addHandler(handler)
    handler.setLevel(level)

    return get_logger(name)
