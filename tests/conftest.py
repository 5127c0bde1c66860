"""
Pytest configuration and shared fixtures for log-redaction tests.

Uses moto to mock CloudWatch Logs for the remote sink tests, so no real AWS
credentials are needed.
"""

import logging
import os
import sys
import uuid

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def set_aws_credentials():
    """
    Set mock AWS credentials for moto.
    This runs automatically before each test.
    """
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_REGION"] = "us-east-1"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    yield


@pytest.fixture
def cloudwatch_logs_client():
    """Provide a mocked CloudWatch Logs client."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        client = boto3.client("logs", region_name="us-east-1")
        yield client


@pytest.fixture
def logger_name():
    """A unique logger name; handlers are removed after the test."""
    name = f"tests.{uuid.uuid4().hex}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def make_record(msg, args=(), **extra) -> logging.LogRecord:
    """Build a LogRecord the way Logger.makeRecord would, extras included."""
    record = logging.LogRecord("tests", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record
