"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (project_id, iso_code, error_code, path, user_id) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging installs exactly one application handler, however often it runs

Design Decisions:
    - setup_logging called once per lifespan; repeated app startups in tests replace
      the previous handler instead of stacking duplicates
    - SQLAlchemy engine chatter held at WARNING unless LOG_LEVEL is DEBUG
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("project_id", "iso_code", "error_code", "path", "user_id")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with request/domain identifiers when attached."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _AppHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed earlier."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = _AppHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    for existing in [h for h in logging.root.handlers if isinstance(h, _AppHandler)]:
        logging.root.removeHandler(existing)
    logging.root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(root_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.DEBUG if root_level == logging.DEBUG else logging.WARNING,
    )
    return handler
