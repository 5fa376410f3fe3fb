"""Logging setup for the CLI.

Library modules only call logging.getLogger(__name__); the CLI installs a
single RichHandler on the root logger writing to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "stepcalc-rich"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Install (or reconfigure) the rich handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(root.level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(root.level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
