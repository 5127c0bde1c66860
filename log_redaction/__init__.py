"""
Log Redaction - Sensitive-data redaction for the logging pipeline

This package masks credit-card numbers, SSNs, passwords, API keys, secrets
and custom patterns in log text before any sink sees it.

Architecture:
    - RedactionPolicyOptions: Fluent builder (defaults, disable, custom patterns)
    - RedactionPolicy: Immutable rule set that performs the redaction
    - SensitiveDataFilter: logging.Filter applying a policy to each record
    - LoggerConfiguration: Fluent logger setup with console/file/CloudWatch sinks

Example:
    from log_redaction import RedactionPolicyOptions, redact_sensitive_data

    redact_sensitive_data("My SSN is 123-45-6789")
    # "My SSN is ***REDACTED***"

    policy = (
        RedactionPolicyOptions.create()
        .disable_credit_card_redaction()
        .add_custom_pattern(r"\\bCLIENT_SECRET\\b")
        .build()
    )
    policy.redact("password: admin and CLIENT_SECRET")
    # "***REDACTED*** and ***REDACTED***"
"""

from .base_profile import ComplianceProfile, PatternRule
from .configuration import LoggerConfiguration
from .errors import InvalidPatternError, NullInputError, RedactionError
from .logging_hooks import JsonFormatter, SensitiveDataFilter
from .options import RedactionPolicyOptions
from .policy import (
    REDACTION_MARKER,
    RedactionPolicy,
    get_default_policy,
    redact_sensitive_data,
)
from .sinks import CloudWatchLogsHandler

__all__ = [
    "ComplianceProfile",
    "PatternRule",
    "RedactionPolicy",
    "RedactionPolicyOptions",
    "REDACTION_MARKER",
    "get_default_policy",
    "redact_sensitive_data",
    "SensitiveDataFilter",
    "JsonFormatter",
    "LoggerConfiguration",
    "CloudWatchLogsHandler",
    "RedactionError",
    "InvalidPatternError",
    "NullInputError",
]
