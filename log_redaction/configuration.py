"""
LoggerConfiguration - Fluent setup of a logger, its sinks and redaction.

Example:
    logger = (
        LoggerConfiguration.create("payments")
        .with_minimum_level(logging.DEBUG)
        .with_console_sink(use_json=True)
        .with_cloudwatch_sink("/app/payments", "web-1")
        .with_sensitive_data_redaction()
        .build()
    )
    logger.info("Charging card 4532-1234-5678-9010")
    # Every sink receives: Charging card ***REDACTED***
"""

import logging
import os
import sys
from typing import Any, Optional, TextIO, Union

from .logging_hooks import JsonFormatter, SensitiveDataFilter
from .policy import RedactionPolicy, get_default_policy
from .sinks import CloudWatchLogsHandler

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_FILE = os.path.join("logs", "app.log")

Level = Union[int, str]


def _resolve_level(level: Level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


class LoggerConfiguration:
    """
    Accumulates logger settings; build() applies them to a named logger.

    Every with_* call returns the same builder so calls can be chained in
    any order.
    """

    def __init__(self, name: str = "app"):
        self.name = name
        self._level = logging.INFO
        self._overrides: dict[str, int] = {}
        self._handlers: list[logging.Handler] = []
        self._policy: Optional[RedactionPolicy] = None

    @classmethod
    def create(cls, name: str = "app") -> "LoggerConfiguration":
        return cls(name)

    def with_minimum_level(self, level: Level) -> "LoggerConfiguration":
        self._level = _resolve_level(level)
        return self

    def override_minimum_level(self, logger_name: str, level: Level) -> "LoggerConfiguration":
        """Set a separate minimum level for another logger (e.g. 'botocore')."""
        self._overrides[logger_name] = _resolve_level(level)
        return self

    def with_handler(self, handler: logging.Handler) -> "LoggerConfiguration":
        self._handlers.append(handler)
        return self

    def with_console_sink(
        self,
        use_json: bool = False,
        stream: Optional[TextIO] = None,
    ) -> "LoggerConfiguration":
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(JsonFormatter() if use_json else logging.Formatter(DEFAULT_FORMAT))
        return self.with_handler(handler)

    def with_file_sink(
        self,
        path: str = DEFAULT_LOG_FILE,
        use_json: bool = False,
    ) -> "LoggerConfiguration":
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8", delay=True)
        handler.setFormatter(JsonFormatter() if use_json else logging.Formatter(DEFAULT_FORMAT))
        return self.with_handler(handler)

    def with_cloudwatch_sink(
        self,
        log_group_name: str,
        log_stream_name: str,
        client: Optional[Any] = None,
    ) -> "LoggerConfiguration":
        handler = CloudWatchLogsHandler(log_group_name, log_stream_name, client=client)
        handler.setFormatter(JsonFormatter())
        return self.with_handler(handler)

    def with_sensitive_data_redaction(
        self,
        policy: Optional[RedactionPolicy] = None,
    ) -> "LoggerConfiguration":
        self._policy = policy if policy is not None else get_default_policy()
        return self

    def with_defaults(self) -> "LoggerConfiguration":
        """Console sink plus the default redaction policy."""
        return self.with_console_sink().with_sensitive_data_redaction()

    def build(self) -> logging.Logger:
        """
        Apply the configuration and return the logger.

        Handlers installed by an earlier build() of the same logger are
        replaced. With redaction enabled, each sink gets its own
        SensitiveDataFilter.
        """
        logger = logging.getLogger(self.name)
        logger.setLevel(self._level)
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if handler not in self._handlers:
                handler.close()

        for handler in self._handlers:
            for existing in [f for f in handler.filters if isinstance(f, SensitiveDataFilter)]:
                handler.removeFilter(existing)
            if self._policy is not None:
                handler.addFilter(SensitiveDataFilter(self._policy))
            logger.addHandler(handler)

        for logger_name, level in self._overrides.items():
            logging.getLogger(logger_name).setLevel(level)

        return logger
