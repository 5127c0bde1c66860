"""
Tests for LoggerConfiguration.
"""

import io
import json
import logging

import pytest

from log_redaction import LoggerConfiguration, RedactionPolicyOptions, SensitiveDataFilter


class TestFluentApi:

    @pytest.mark.parametrize("call", [
        lambda c: c.with_minimum_level(logging.DEBUG),
        lambda c: c.override_minimum_level("tests.noisy", logging.WARNING),
        lambda c: c.with_console_sink(),
        lambda c: c.with_console_sink(use_json=True),
        lambda c: c.with_sensitive_data_redaction(),
        lambda c: c.with_defaults(),
    ])
    def test_calls_return_same_builder(self, call):
        config = LoggerConfiguration.create()

        assert call(config) is config

    def test_level_names_are_accepted(self, logger_name):
        logger = LoggerConfiguration.create(logger_name).with_minimum_level("debug").build()

        assert logger.level == logging.DEBUG

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            LoggerConfiguration.create().with_minimum_level("LOUD")

    def test_override_minimum_level(self, logger_name):
        other = f"{logger_name}.noisy"
        LoggerConfiguration.create(logger_name).override_minimum_level(other, "ERROR").build()

        assert logging.getLogger(other).level == logging.ERROR


class TestBuild:

    def test_console_sink_is_redacted(self, logger_name):
        stream = io.StringIO()
        logger = (
            LoggerConfiguration.create(logger_name)
            .with_console_sink(stream=stream)
            .with_sensitive_data_redaction()
            .build()
        )

        logger.info("Charging card 4532-1234-5678-9010")

        output = stream.getvalue()
        assert "Charging card ***REDACTED***" in output
        assert "4532" not in output

    def test_without_redaction_text_passes_through(self, logger_name):
        stream = io.StringIO()
        logger = LoggerConfiguration.create(logger_name).with_console_sink(stream=stream).build()

        logger.info("password: hunter2")

        assert "password: hunter2" in stream.getvalue()

    def test_json_console_sink(self, logger_name):
        stream = io.StringIO()
        logger = (
            LoggerConfiguration.create(logger_name)
            .with_console_sink(use_json=True, stream=stream)
            .with_sensitive_data_redaction()
            .build()
        )

        logger.warning("ssn %s", "123-45-6789", extra={"api_token": "api_key=abc"})

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "ssn ***REDACTED***"
        assert payload["api_token"] == "***REDACTED***"
        assert payload["level"] == "WARNING"

    def test_child_logger_records_are_redacted(self, logger_name):
        stream = io.StringIO()
        (
            LoggerConfiguration.create(logger_name)
            .with_console_sink(stream=stream)
            .with_sensitive_data_redaction()
            .build()
        )

        logging.getLogger(f"{logger_name}.db").info("connecting with pwd=s3cr3t")

        assert "connecting with ***REDACTED***" in stream.getvalue()
        assert "s3cr3t" not in stream.getvalue()

    def test_custom_policy(self, logger_name):
        stream = io.StringIO()
        policy = RedactionPolicyOptions.create().disable_credit_card_redaction().build()
        logger = (
            LoggerConfiguration.create(logger_name)
            .with_console_sink(stream=stream)
            .with_sensitive_data_redaction(policy)
            .build()
        )

        logger.info("card 4532-1234-5678-9010 ssn 123-45-6789")

        assert "card 4532-1234-5678-9010 ssn ***REDACTED***" in stream.getvalue()

    def test_file_sink(self, logger_name, tmp_path):
        path = tmp_path / "logs" / "app.log"
        logger = (
            LoggerConfiguration.create(logger_name)
            .with_file_sink(str(path))
            .with_sensitive_data_redaction()
            .build()
        )

        logger.info("api_key=abc123 accepted")
        for handler in logger.handlers:
            handler.close()

        content = path.read_text(encoding="utf-8")
        assert "***REDACTED*** accepted" in content
        assert "abc123" not in content

    def test_rebuild_does_not_duplicate_handlers_or_filters(self, logger_name):
        config = (
            LoggerConfiguration.create(logger_name)
            .with_console_sink(stream=io.StringIO())
            .with_sensitive_data_redaction()
        )

        config.build()
        logger = config.build()

        assert len(logger.handlers) == 1
        filters = [f for f in logger.handlers[0].filters if isinstance(f, SensitiveDataFilter)]
        assert len(filters) == 1
        assert logger.propagate is False
