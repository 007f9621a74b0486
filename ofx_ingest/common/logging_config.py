import logging
import json
import os
import datetime
from typing import Any, Optional


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs JSON records.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if they exist
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_data.update(record.extra_fields)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(log_level: int = logging.INFO, log_file: Optional[str] = None):
    """
    Configure global logging settings.

    The library never calls this itself; applications embedding the
    loader opt in to JSON output here.
    """
    # Create logs directory if it doesn't exist
    if log_file and os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    if root_logger.handlers:
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.info("Logging infrastructure initialized.", extra={"extra_fields": {"status": "ready"}})


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Adapter that allows passing extra context easily.

    Keyword arguments on a log call and context bound at creation time
    both end up in ``record.extra_fields``.
    """
    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        fields = dict(self.extra or {})
        fields.update(extra.get("extra_fields", {}))

        # Merge keyword args into extra_fields if they aren't part of Logger.log
        standard_args = {'exc_info', 'stack_info', 'stacklevel', 'extra'}
        new_kwargs = {}
        for key, value in kwargs.items():
            if key in standard_args:
                new_kwargs[key] = value
            else:
                fields[key] = value

        extra["extra_fields"] = fields
        new_kwargs["extra"] = extra
        return msg, new_kwargs

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        """Return a new adapter with *context* added to every record."""
        merged = dict(self.extra or {})
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Return a structured logger for the given name.
    """
    return StructuredLoggerAdapter(logging.getLogger(name), context)
