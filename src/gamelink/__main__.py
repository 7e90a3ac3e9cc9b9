"""Entrypoint: python -m gamelink"""
from __future__ import annotations

import uvicorn

from gamelink.config import settings
from gamelink.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "gamelink.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
