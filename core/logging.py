"""Logging setup for the demo runner.

Diagnostics (registration, factory selection, state transitions) go through
standard ``logging`` loggers. Narration is separate and never routed here.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.logging import RichHandler

_INITIALIZED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Install a RichHandler on the root logger once.

    Level comes from the argument, then ``LOG_LEVEL``, then WARNING so that
    demo narration is not drowned in diagnostics by default.
    """
    global _INITIALIZED
    lvl_name = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    lvl = getattr(logging, lvl_name, logging.WARNING)
    if _INITIALIZED:
        logging.getLogger().setLevel(lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    _INITIALIZED = True
