"""Logging configuration for the CLI.

Log records go to stderr through Rich so they never mix with the progress
and guidance printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    effective = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=effective,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
