"""
Tests for environment-driven configuration.
"""

import logging

import pytest

from log_redaction import REDACTION_MARKER, InvalidPatternError, SensitiveDataFilter
from log_redaction.settings import configure_from_env, policy_from_env

CARD = "4532-1234-5678-9010"


class TestPolicyFromEnv:

    def test_empty_environment_gives_defaults(self):
        policy = policy_from_env({})

        assert policy.enabled_rule_names == ["CreditCard", "Ssn", "Password", "ApiKey", "Secret"]

    def test_disabled_rules(self):
        policy = policy_from_env({"LOG_REDACTION_DISABLED_RULES": "CreditCard, Ssn ,"})

        assert policy.redact(CARD) == CARD
        assert policy.redact("123-45-6789") == "123-45-6789"
        assert policy.redact("pwd=x") == REDACTION_MARKER

    @pytest.mark.parametrize("flag", ["true", "1", "YES", " on "])
    def test_disable_defaults(self, flag):
        policy = policy_from_env({"LOG_REDACTION_DISABLE_DEFAULTS": flag})

        assert policy.enabled_rule_names == []

    def test_custom_patterns_one_per_line(self):
        policy = policy_from_env({
            "LOG_REDACTION_DISABLE_DEFAULTS": "false",
            "LOG_REDACTION_CUSTOM_PATTERNS": "\\btoken\\b\n\n\\bsecret\\b\n",
        })

        assert policy.enabled_rule_names[-2:] == [r"\btoken\b", r"\bsecret\b"]
        assert policy.redact("token and secret values") == "***REDACTED*** and ***REDACTED*** values"

    def test_invalid_custom_pattern_fails_at_startup(self):
        with pytest.raises(InvalidPatternError):
            policy_from_env({"LOG_REDACTION_CUSTOM_PATTERNS": "[broken"})


class TestConfigureFromEnv:

    def test_builds_redacting_logger(self, logger_name):
        logger = configure_from_env(logger_name, {
            "LOG_LEVEL": "DEBUG",
            "LOG_REDACTION_DISABLED_RULES": "Password",
        })

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        filters = [f for f in logger.handlers[0].filters if isinstance(f, SensitiveDataFilter)]
        assert len(filters) == 1
        assert "Password" not in filters[0].policy.enabled_rule_names

    def test_defaults_to_info(self, logger_name):
        logger = configure_from_env(logger_name, {})

        assert logger.level == logging.INFO
