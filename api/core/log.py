"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging() -> None:
    level = logging.getLevelName(settings.log_level())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # uvicorn installs its own handlers; keep its access log at our level.
    logging.getLogger("uvicorn.access").setLevel(level)
