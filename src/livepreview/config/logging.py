"""Logging setup for the livepreview CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Attach a terse handler to the root logger.

    Logs go to stderr by default; stdout is reserved for reconciled JSON.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=stream or sys.stderr,
        force=force,
    )
