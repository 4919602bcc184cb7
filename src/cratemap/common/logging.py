"""Shared logging helpers for cratemap."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for CLI use.

    Workspace warnings (resolve nodes or edges that reference unknown packages) are
    emitted at WARNING; cargo command lines and telemetry counts at DEBUG. Pass
    ``force=True`` to replace handlers installed by an embedding application.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
