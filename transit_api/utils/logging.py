# path: transit-api/transit_api/utils/logging.py

from __future__ import annotations

import logging
from typing import List, Optional

from transit_api.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {settings.log_level}")

    handlers: Optional[List[logging.Handler]] = None
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(settings.log_file, encoding="utf-8"), logging.StreamHandler()]

    logging.basicConfig(level=level, format=settings.log_format, handlers=handlers)
