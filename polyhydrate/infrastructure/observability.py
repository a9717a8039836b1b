"""Structured Logging — JSON formatter and setup for hydration diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (type_name, key, discriminator_value, mode) surfaced when present
    - A logged hydration error contributes its error code even without extra=
    - setup_logging owns at most one handler on the 'polyhydrate' logger;
      calling it again replaces that handler instead of stacking another

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is opt-in: the library never configures logging on import
    - Installed handlers are tagged, so handlers added by the application are
      never removed
"""

import logging
import json
from datetime import datetime, timezone
from typing import IO

from polyhydrate.config import get_settings

LIBRARY_LOGGER = "polyhydrate"

_EXTRA_FIELDS = (
    "type_name", "key", "field", "discriminator_value", "mode", "error_code",
)
_OWNED_MARKER = "_polyhydrate_owned"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            code = getattr(record.exc_info[1], "code", None)
            if isinstance(code, str):
                log.setdefault("error_code", code)
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Configure the 'polyhydrate' logger; defaults come from settings."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _OWNED_MARKER, False):
            logger.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler(stream)
    setattr(handler, _OWNED_MARKER, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
