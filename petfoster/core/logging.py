from __future__ import annotations

import logging

from petfoster.core.config import settings


def configure_logging(level: str | None = None) -> None:
    log_level = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # SQL echo is controlled by the engine, not by the root level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
