import datetime
import logging
import os
from logging.config import dictConfig

LOGGER_NAME = "websearch_mcp"

# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__) | {"message", "asctime"}


def logfmt_value(value) -> str:
    text = str(value)
    if text and not any(ch in text for ch in ' "=\n'):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def logfmt_line(fields: dict) -> str:
    return " ".join(f"{key}={logfmt_value(value)}" for key, value in fields.items())


class LogfmtFormatter(logging.Formatter):
    """Renders records as `ts=... level=... logger=... msg=...` followed by extras."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc)
        fields = {
            "ts": created.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(record.msecs):03d}Z",
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            fields["exc"] = self.formatException(record.exc_info)
        return logfmt_line(fields)


def build_logging_config(level: str) -> dict:
    """dictConfig shared by the app and uvicorn, everything on one console handler."""
    def console(lvl: str) -> dict:
        return {"level": lvl, "handlers": ["console"], "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"logfmt": {"()": LogfmtFormatter}},
        "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "logfmt"}},
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn.access": console("INFO"),
            "uvicorn.error": console("INFO"),
            LOGGER_NAME: console(level),
        },
    }


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOGGING_CONFIG = build_logging_config(LOG_LEVEL)

dictConfig(LOGGING_CONFIG)

log = logging.getLogger(LOGGER_NAME)
