"""
Module: test_sqs.py
Description: Unit tests for the SQS transport client.

Tests client construction, SendMessage against a moto queue, and the
translation of botocore exceptions into ConfigurationError and
TransportError.
"""

import pytest
from unittest.mock import patch
from botocore.exceptions import ClientError, EndpointConnectionError

from sqs_log_target.sqs_queue.exceptions import ConfigurationError, TransportError
from sqs_log_target.sqs_queue.sqs import SQSClient


class TestSQSClient:
    """Test cases for SQSClient."""

    def test_client_initialization(self, sqs_backend):
        client = SQSClient(region="us-east-1")

        assert client.region == "us-east-1"
        assert client.sqs.meta.region_name == "us-east-1"

    def test_client_initialization_explicit_credentials(self, sqs_backend):
        client = SQSClient(
            region="us-west-2",
            aws_access_key="AKIDEXAMPLE",
            aws_secret_key="secret"
        )

        credentials = client.sqs._request_signer._credentials
        assert credentials.access_key == "AKIDEXAMPLE"
        assert client.sqs.meta.region_name == "us-west-2"

    @pytest.mark.parametrize("region", ["", None])
    def test_client_initialization_missing_region(self, region):
        with pytest.raises(ConfigurationError, match="region must be a non-empty string"):
            SQSClient(region=region)

    def test_client_initialization_partial_credentials(self):
        with pytest.raises(ConfigurationError, match="must be provided together"):
            SQSClient(region="us-east-1", aws_access_key="AKIDEXAMPLE")

        with pytest.raises(ConfigurationError, match="must be provided together"):
            SQSClient(region="us-east-1", aws_secret_key="secret")

    def test_client_initialization_invalid_region(self):
        with pytest.raises(ConfigurationError, match="Failed to create SQS client"):
            SQSClient(region="not a region!")

    def test_send_message_success(self, queue_url, receive_bodies):
        client = SQSClient(region="us-east-1")

        message_id = client.send_message(queue_url, "hello from the log target")

        assert message_id
        assert receive_bodies() == ["hello from the log target"]

    def test_send_message_client_error(self, sqs_backend):
        client = SQSClient(region="us-east-1")
        error = ClientError(
            error_response={
                'Error': {'Code': 'AccessDenied', 'Message': 'Access denied'},
                'ResponseMetadata': {'RequestId': 'req-42', 'HTTPStatusCode': 403}
            },
            operation_name='SendMessage'
        )

        with patch.object(client.sqs, 'send_message', side_effect=error):
            with pytest.raises(TransportError) as exc_info:
                client.send_message("https://sqs.example/q", "body")

        assert exc_info.value.error_code == "AccessDenied"
        assert exc_info.value.error_message == "Access denied"
        assert exc_info.value.status_code == 403
        assert exc_info.value.request_id == "req-42"

    def test_send_message_connection_error(self, sqs_backend):
        client = SQSClient(region="us-east-1")
        error = EndpointConnectionError(endpoint_url="https://sqs.us-east-1.amazonaws.com")

        with patch.object(client.sqs, 'send_message', side_effect=error):
            with pytest.raises(TransportError) as exc_info:
                client.send_message("https://sqs.example/q", "body")

        assert exc_info.value.error_code is None
        assert exc_info.value.request_id is None
        assert "Could not connect" in exc_info.value.error_message

    def test_send_message_passes_delay(self, sqs_backend):
        client = SQSClient(region="us-east-1")

        with patch.object(client.sqs, 'send_message', return_value={'MessageId': 'm-1'}) as send:
            client.send_message("https://sqs.example/q", "body", delay_seconds=15)

        send.assert_called_once_with(
            QueueUrl="https://sqs.example/q",
            MessageBody="body",
            DelaySeconds=15
        )

    def test_close(self, sqs_backend):
        client = SQSClient(region="us-east-1")

        with patch.object(client.sqs, 'close') as close:
            client.close()

        close.assert_called_once()
