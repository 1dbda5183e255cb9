"""
Package: sqs_queue
Description: SQS transport for rendered log messages.

Wraps the boto3 SQS client behind a construct/send boundary and
translates botocore exceptions into the target's own error types.
"""

from .exceptions import ConfigurationError, TransportError
from .sqs import SQSClient

__all__ = [
    "ConfigurationError",
    "TransportError",
    "SQSClient",
]
