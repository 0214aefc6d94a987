# backend/famapp/core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from famapp.core.config_loader import settings


# -------------------------------------------------------------------
# FORMATTER
# -------------------------------------------------------------------
LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

formatter = logging.Formatter(LOG_FORMAT)


# -------------------------------------------------------------------
# HANDLER: CONSOLE
# -------------------------------------------------------------------
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)


# -------------------------------------------------------------------
# HANDLER: FILE (rotating, optional)
# -------------------------------------------------------------------
def _build_file_handler() -> RotatingFileHandler:
    log_dir = Path(settings.log_dir) if settings.log_dir else Path(__file__).resolve().parents[2] / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / "famapp.log",
        maxBytes=5 * 1024 * 1024,   # 5 MB
        backupCount=5,              # keep 5 files
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    handler.setLevel(logging.INFO)
    return handler


# -------------------------------------------------------------------
# GLOBAL LOGGER
# -------------------------------------------------------------------
logger = logging.getLogger("famapp")
logger.setLevel(getattr(logging, settings.log_level.upper(), logging.DEBUG))

# Prevent duplicate handlers when reloading app
if not logger.handlers:
    logger.addHandler(console_handler)
    if settings.log_to_file:
        logger.addHandler(_build_file_handler())


logger.debug("Logger initialized successfully.")
