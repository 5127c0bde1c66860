"""
Logging integration - Hooks the redaction policy into the stdlib logging pipeline.

Usage:
    import logging
    from log_redaction import SensitiveDataFilter

    handler = logging.StreamHandler()
    handler.addFilter(SensitiveDataFilter())
    logging.getLogger().addHandler(handler)

    logging.getLogger("app").info("login with password: %s", "hunter2")
    # Emits: login with ***REDACTED***
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .policy import RedactionPolicy, get_default_policy

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def structured_properties(record: logging.LogRecord) -> dict[str, Any]:
    """Return the extra properties attached to a record."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }


class SensitiveDataFilter(logging.Filter):
    """
    Redact the formatted message and string properties of every record.

    Attach it to handlers rather than loggers: logger filters do not run for
    records propagated up from child loggers.

    Always returns True; records are rewritten, never dropped.
    """

    def __init__(self, policy: Optional[RedactionPolicy] = None, name: str = ""):
        super().__init__(name)
        self.policy = policy if policy is not None else get_default_policy()

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Bad format args: emit msg and args as plain text, still redacted.
            record.msg = self.policy.redact(f"{record.msg} {record.args!r}")
            record.args = None
            message = record.msg
        redacted = self.policy.redact(message)
        if redacted is not message:
            record.msg = redacted
            record.args = None

        for key, value in structured_properties(record).items():
            handled, property_value = self.policy.try_destructure(value)
            if handled:
                setattr(record, key, property_value)

        return True


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(structured_properties(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)
