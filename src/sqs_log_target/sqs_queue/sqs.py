"""
Module: sqs.py
Description: SQS client for log message delivery.

Builds a boto3 SQS client from region and optional credentials and
sends one message per call. botocore exceptions are translated into
ConfigurationError and TransportError at this boundary.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sqs_log_target.sqs_queue.exceptions import ConfigurationError, TransportError


class SQSClient:
    """
    SQS client for log message delivery.

    Attributes:
        region: AWS region the client was built for
        sqs: boto3 SQS client

    Example:
        >>> client = SQSClient(region="us-east-1")
        >>> client.send_message(queue_url, "service started", delay_seconds=0)
        '5fea7756-0ea4-451a-a703-a558b933e274'
    """

    def __init__(
        self,
        region: str,
        aws_access_key: Optional[str] = None,
        aws_secret_key: Optional[str] = None
    ):
        """
        Initialize SQS client.

        Args:
            region: AWS region name (e.g. 'us-east-1')
            aws_access_key: Optional access key id
            aws_secret_key: Optional secret access key

        Raises:
            ConfigurationError: If the region or credentials are unusable
        """
        if not region or not isinstance(region, str):
            raise ConfigurationError("region must be a non-empty string")
        if bool(aws_access_key) != bool(aws_secret_key):
            raise ConfigurationError(
                "aws_access_key and aws_secret_key must be provided together"
            )

        self.region = region

        try:
            if aws_access_key:
                session = boto3.session.Session(
                    aws_access_key_id=aws_access_key,
                    aws_secret_access_key=aws_secret_key,
                    region_name=region
                )
            else:
                session = boto3.session.Session(region_name=region)
            self.sqs = session.client('sqs', region_name=region)

        except (BotoCoreError, ValueError) as e:
            raise ConfigurationError(f"Failed to create SQS client: {e}") from e

    def send_message(
        self,
        queue_url: str,
        body: str,
        delay_seconds: int = 0
    ) -> str:
        """
        Send a log message to an SQS queue.

        Args:
            queue_url: URL of the destination queue
            body: Message body
            delay_seconds: Delay before the message becomes visible

        Returns:
            Message ID from SQS

        Raises:
            TransportError: If the SendMessage call fails
        """
        try:
            response = self.sqs.send_message(
                QueueUrl=queue_url,
                MessageBody=body,
                DelaySeconds=delay_seconds
            )

        except ClientError as e:
            error = e.response.get('Error', {})
            metadata = e.response.get('ResponseMetadata', {})
            raise TransportError(
                error.get('Message') or str(e),
                error_code=error.get('Code'),
                status_code=metadata.get('HTTPStatusCode'),
                request_id=metadata.get('RequestId')
            ) from e

        except BotoCoreError as e:
            raise TransportError(str(e)) from e

        return response['MessageId']

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.sqs.close()
