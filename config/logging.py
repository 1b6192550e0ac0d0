"""
Classroom Hub - Logging Configuration
"""
import sys
import logging
import json
from datetime import datetime, timezone
from typing import Any, Dict

from config.settings import get_settings

SERVICE_NAME = "classroom-api"
DEBUG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

# Üçüncü parti kütüphanelerin gürültüsü
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "env": "dev" if get_settings().debug else "prod",
            "service": SERVICE_NAME,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # logger.info(..., extra={"extra_data": {"code": code}})
        log_obj.update(getattr(record, "extra_data", None) or {})

        request_id = getattr(record, "request_id", None)
        if request_id:
            log_obj["request_id"] = request_id

        return json.dumps(log_obj, ensure_ascii=False)


def _level(settings) -> int:
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging():
    """Root logger: readable lines when DEBUG is on, JSON lines otherwise."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(DEBUG_FORMAT) if settings.debug else JSONFormatter()
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(_level(settings))
    # Exactly one handler, however many times this runs
    root_logger.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
