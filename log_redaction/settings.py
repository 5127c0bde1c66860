"""
Environment-driven configuration.

Values are read from the process environment, after loading a ``.env`` file
if one is present:

    LOG_REDACTION_DISABLE_DEFAULTS   true/1/yes to start with no default rules
    LOG_REDACTION_DISABLED_RULES     comma-separated rule names, e.g. "CreditCard,Ssn"
    LOG_REDACTION_CUSTOM_PATTERNS    one regex per line
    LOG_LEVEL                        minimum level for configure_from_env()
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .configuration import LoggerConfiguration
from .options import RedactionPolicyOptions
from .policy import RedactionPolicy

ENV_DISABLE_DEFAULTS = "LOG_REDACTION_DISABLE_DEFAULTS"
ENV_DISABLED_RULES = "LOG_REDACTION_DISABLED_RULES"
ENV_CUSTOM_PATTERNS = "LOG_REDACTION_CUSTOM_PATTERNS"
ENV_LOG_LEVEL = "LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)


def _split(value: str, separator: str) -> list[str]:
    return [item.strip() for item in value.split(separator) if item.strip()]


def policy_from_env(environ: Optional[Mapping[str, str]] = None) -> RedactionPolicy:
    """
    Build a RedactionPolicy from environment variables.

    Args:
        environ: Mapping to read instead of os.environ (the .env file is
                 only loaded when this is omitted).

    Raises:
        InvalidPatternError: If a custom pattern does not compile. This
            surfaces at startup instead of leaking unredacted data later.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    options = RedactionPolicyOptions.create()

    if environ.get(ENV_DISABLE_DEFAULTS, "").strip().lower() in _TRUTHY:
        options.disable_all_defaults()

    for name in _split(environ.get(ENV_DISABLED_RULES, ""), ","):
        options.disable(name)

    for pattern in _split(environ.get(ENV_CUSTOM_PATTERNS, ""), "\n"):
        options.add_custom_pattern(pattern)

    return options.build()


def configure_from_env(
    name: str = "app",
    environ: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """Return a console logger whose output is redacted per the environment."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    policy = policy_from_env(environ)
    level = environ.get(ENV_LOG_LEVEL, "INFO")

    configured = (
        LoggerConfiguration.create(name)
        .with_minimum_level(level)
        .with_console_sink()
        .with_sensitive_data_redaction(policy)
        .build()
    )
    logger.debug(
        "Configured logger %r with redaction rules: %s",
        name, ", ".join(policy.enabled_rule_names) or "(none)",
    )
    return configured
