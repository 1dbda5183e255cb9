"""
Module: conftest.py
Description: Shared pytest fixtures for SQS log target tests.

Provides fake AWS credentials, settings factories, and a moto-backed
SQS queue so tests never touch a real AWS account.
"""

import pytest
from moto import mock_aws
import boto3

from sqs_log_target.config.settings import TargetSettings

TEST_REGION = "us-east-1"
TEST_QUEUE_NAME = "test-log-queue"


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """
    Isolate tests from the developer's environment.

    Sets fake AWS credentials for moto and clears any SQS_LOG_*
    variables that would leak into TargetSettings.
    """
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)

    for name in (
        "REGION",
        "AWS_ACCESS_KEY",
        "AWS_SECRET_KEY",
        "QUEUE_URL",
        "MAX_MESSAGE_SIZE",
        "DELAY_SECONDS",
        "LOG_LEVEL",
        "DIAGNOSTIC_LEVEL",
    ):
        monkeypatch.delenv(f"SQS_LOG_{name}", raising=False)


@pytest.fixture
def make_settings():
    """
    Provide a factory for TargetSettings with .env loading disabled.

    Keyword arguments override the test defaults.
    """
    def _make(**overrides):
        values = {"region": TEST_REGION}
        values.update(overrides)
        return TargetSettings(_env_file=None, **values)

    return _make


@pytest.fixture
def sqs_backend():
    """Start moto's SQS mock for the duration of a test."""
    with mock_aws():
        yield boto3.client("sqs", region_name=TEST_REGION)


@pytest.fixture
def queue_url(sqs_backend):
    """Create a mock SQS queue and return its URL."""
    response = sqs_backend.create_queue(QueueName=TEST_QUEUE_NAME)
    return response["QueueUrl"]


@pytest.fixture
def receive_bodies(sqs_backend, queue_url):
    """Provide a helper that drains the mock queue and returns message bodies."""
    def _receive():
        response = sqs_backend.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=10,
            WaitTimeSeconds=0
        )
        return [message["Body"] for message in response.get("Messages", [])]

    return _receive
