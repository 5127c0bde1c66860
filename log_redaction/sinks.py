"""
Sinks - Remote collector handlers for the logging pipeline.

CloudWatchLogsHandler ships each formatted record to an AWS CloudWatch Logs
stream. Put a SensitiveDataFilter on it (LoggerConfiguration does this for
you) so only redacted text leaves the process.
"""

import logging
import os
import threading
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError


def get_cloudwatch_client():
    """Create and return a CloudWatch Logs client using environment credentials."""
    return boto3.client(
        "logs",
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
        region_name=os.getenv("AWS_REGION", "us-east-1")
    )


class CloudWatchLogsHandler(logging.Handler):
    """
    Logging handler that writes records to a CloudWatch Logs stream.

    Args:
        log_group_name: Target log group. Created on first emit if missing.
        log_stream_name: Target log stream. Created on first emit if missing.
        client: Optional boto3 ``logs`` client; built from the environment
                when omitted.
        level: Minimum level handled.

    Failures while sending are routed to ``handleError`` like any stdlib
    handler, so a collector outage never breaks the calling code.
    """

    def __init__(
        self,
        log_group_name: str,
        log_stream_name: str,
        client: Optional[Any] = None,
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self.log_group_name = log_group_name
        self.log_stream_name = log_stream_name
        self._client = client
        self._stream_ready = False
        self._setup_lock = threading.Lock()

    @property
    def client(self):
        if self._client is None:
            self._client = get_cloudwatch_client()
        return self._client

    def _ensure_stream(self) -> None:
        if self._stream_ready:
            return
        with self._setup_lock:
            if self._stream_ready:
                return
            self._create_if_missing(
                self.client.create_log_group,
                logGroupName=self.log_group_name,
            )
            self._create_if_missing(
                self.client.create_log_stream,
                logGroupName=self.log_group_name,
                logStreamName=self.log_stream_name,
            )
            self._stream_ready = True

    @staticmethod
    def _create_if_missing(create, **params) -> None:
        try:
            create(**params)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code != "ResourceAlreadyExistsException":
                raise

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._ensure_stream()
            self.client.put_log_events(
                logGroupName=self.log_group_name,
                logStreamName=self.log_stream_name,
                logEvents=[
                    {"timestamp": int(record.created * 1000), "message": message},
                ]
            )
        except Exception:
            self.handleError(record)

    def __repr__(self) -> str:
        return f"<CloudWatchLogsHandler {self.log_group_name}/{self.log_stream_name}>"
