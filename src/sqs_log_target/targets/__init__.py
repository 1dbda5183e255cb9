"""
Package: targets
Description: Log targets that forward rendered messages to SQS.

- SQSLogTarget: Size-limited delivery of one message per call
- SQSLogHandler: stdlib logging adapter for SQSLogTarget
"""

from .handler import SQSLogHandler
from .sqs_target import SinkState, SQSLogTarget

__all__ = [
    "SinkState",
    "SQSLogHandler",
    "SQSLogTarget",
]
