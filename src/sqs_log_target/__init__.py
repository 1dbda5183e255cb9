"""
Package: sqs_log_target
Description: Python logging target that forwards log messages to Amazon SQS.

Subpackages:
- config: TargetSettings loaded from SQS_LOG_* environment variables
- models: Per-event delivery outcome
- sqs_queue: boto3 SQS transport
- targets: SQSLogTarget and the SQSLogHandler logging adapter
- utils: Diagnostic logging
"""

from sqs_log_target.config.settings import TargetSettings
from sqs_log_target.targets.handler import SQSLogHandler
from sqs_log_target.targets.sqs_target import SinkState, SQSLogTarget

__all__ = [
    "SinkState",
    "SQSLogHandler",
    "SQSLogTarget",
    "TargetSettings",
]
