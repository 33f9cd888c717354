"""Shared logger initialization for the CLI.

Usage:
    from assistant_cli.utils.logger import get_logger
    log = get_logger(__name__)
    log.debug("message")
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_DEFAULT_HANDLER = RichHandler(
    console=Console(stderr=True), rich_tracebacks=True, show_path=False
)

_FORMAT = "%(message)s"  # rich handler already adds time & level


def configure_logging(level: int = logging.WARNING) -> None:
    """Idempotently attach the rich handler to the root logger and set its level."""
    root = logging.getLogger()
    if _DEFAULT_HANDLER not in root.handlers:
        _DEFAULT_HANDLER.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_DEFAULT_HANDLER)
    root.setLevel(level)
    _DEFAULT_HANDLER.setLevel(level)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
