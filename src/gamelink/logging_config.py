from __future__ import annotations

import logging

from gamelink.api.middleware.correlation_id import RequestIdLogFilter

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdLogFilter())

    root = logging.getLogger("gamelink")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    root.propagate = False
