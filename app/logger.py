# app/logger.py
import logging
import sys
from typing import Optional
from app.config import config

APP_LOGGER = "app"
_DEFAULT_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# follow LOG_LEVEL
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")
# Gemini SDK transport; request lines only at DEBUG
_SDK_LOGGERS = ("google_genai", "httpx", "httpcore")

_configured = False

def _level_value(level: Optional[str]) -> int:
    return getattr(logging, (level or config.log_level).upper(), logging.INFO)

def configure_logging(level: Optional[str] = None, fmt: str = _DEFAULT_FMT) -> None:
    """
    Route app logs to stdout once, at LOG_LEVEL.
    Handlers installed earlier by gunicorn/uvicorn are reused rather than duplicated.
    """
    global _configured
    if _configured:
        return

    level_value = _level_value(level)
    formatter = logging.Formatter(fmt)

    root = logging.getLogger()
    root.setLevel(level_value)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(formatter)
        root.addHandler(h)
    for h in root.handlers:
        h.setLevel(level_value)
        if not h.formatter:
            h.setFormatter(formatter)

    logging.getLogger(APP_LOGGER).setLevel(level_value)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)
    sdk_level = level_value if level_value <= logging.DEBUG else max(level_value, logging.WARNING)
    for name in _SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    _configured = True

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the app namespace; module names like app.features.story.service pass through."""
    configure_logging()
    if not name:
        return logging.getLogger(APP_LOGGER)
    if name == APP_LOGGER or name.startswith(APP_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER}.{name}")
