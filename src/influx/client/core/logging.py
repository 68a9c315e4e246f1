from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger

from influx.client.core.config import settings


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> None:
    """Install a single JSON handler on the root logger.

    httpx logs every request at INFO; it is kept at WARNING unless the
    client itself runs at DEBUG.
    """
    level = (level or settings.log_level).upper()
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    # Avoid duplicate handlers on repeated configuration
    root.handlers = [handler]

    logging.getLogger("httpx").setLevel(
        logging.DEBUG if level == "DEBUG" else logging.WARNING
    )
