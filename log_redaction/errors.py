"""
Errors raised by the redaction engine.

All errors are reported synchronously to the immediate caller. The engine
never logs them itself, since it sits inside the logging pipeline it serves.
"""


class RedactionError(Exception):
    """Base class for every error raised by log_redaction."""


class InvalidPatternError(RedactionError, ValueError):
    """A custom pattern failed to compile while configuring a policy."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid redaction pattern {pattern!r}: {reason}")


class NullInputError(RedactionError, TypeError):
    """redact() was handed None instead of a string."""

    def __init__(self, message: str = "Cannot redact None; expected a string"):
        super().__init__(message)
