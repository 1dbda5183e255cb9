"""
Module: sqs_target.py
Description: Log target that forwards rendered messages to SQS.

Key Components:
- SinkState: Lifecycle states of a target
- SQSLogTarget: open() builds the SQS client once; handle() truncates
  and sends a single rendered message per call

A target never raises into the logging framework that drives it.
Every failure is reported on the diagnostic log and the event is
dropped. A diagnostic stream that itself fails is ignored.

Dependencies: boto3 (via sqs_queue), structlog, pydantic
"""

from enum import Enum
from typing import Callable, Optional

from sqs_log_target.config.settings import TargetSettings
from sqs_log_target.models.outcome import DeliveryOutcome, DeliveryStatus
from sqs_log_target.sqs_queue.exceptions import ConfigurationError, TransportError
from sqs_log_target.sqs_queue.sqs import SQSClient
from sqs_log_target.targets.sizing import (
    byte_length,
    resolve_max_message_size,
    truncate_message,
    truncation_budget,
)
from sqs_log_target.utils.logger import get_logger


class SinkState(str, Enum):
    """
    Lifecycle of a target.

    UNINITIALIZED -> READY | DEGRADED; READY -> CLOSED on close().
    DEGRADED and CLOSED are terminal.
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    DEGRADED = "degraded"
    CLOSED = "closed"


class SQSLogTarget:
    """
    Forwards rendered log messages to an SQS queue.

    Use SQSLogTarget.open() rather than the constructor; open() resolves
    the size limits and builds the SQS client.

    Attributes:
        settings: Frozen target settings
        state: Current SinkState
        logger: Diagnostic logger filtered at settings.diagnostic_level
        max_message_size_bytes: Effective size limit for a message body
        truncate_size_bytes: Prefix budget for truncated bodies

    Example:
        >>> target = SQSLogTarget.open(TargetSettings(region="us-east-1", queue_url=url))
        >>> target.handle("2024-01-15 10:30:00 INFO service started").status
        <DeliveryStatus.SENT: 'sent'>
    """

    def __init__(self, settings: TargetSettings):
        self.settings = settings
        self.state = SinkState.UNINITIALIZED
        self.client: Optional[SQSClient] = None
        self.logger = get_logger(__name__, level=settings.diagnostic_level)

        self.max_message_size_bytes = resolve_max_message_size(settings.max_message_size)
        self.truncate_size_bytes = truncation_budget(self.max_message_size_bytes)

        self._diagnose(
            "info",
            "Max message size configured",
            max_message_size_kb=self.max_message_size_bytes // 1024
        )

    @classmethod
    def open(
        cls,
        settings: TargetSettings,
        client_factory: Callable[..., SQSClient] = SQSClient
    ) -> "SQSLogTarget":
        """
        Build a target and its SQS client.

        A client that cannot be constructed leaves the target DEGRADED:
        it keeps truncating and reporting diagnostics but never sends.

        Args:
            settings: Target settings
            client_factory: Callable building the SQS client

        Returns:
            Target in READY or DEGRADED state
        """
        target = cls(settings)
        target._connect(client_factory)
        return target

    def _diagnose(self, method: str, event: str, **kwargs) -> None:
        try:
            getattr(self.logger, method)(event, **kwargs)
        except Exception:
            # Nowhere left to report to; the event outcome stands
            pass

    def _connect(self, client_factory: Callable[..., SQSClient]) -> None:
        settings = self.settings

        if not settings.has_credentials:
            self._diagnose(
                "info",
                "AWS access keys are not specified, using ambient credentials",
                region=settings.region
            )

        secret = settings.aws_secret_key.get_secret_value() if settings.aws_secret_key else None

        try:
            self.client = client_factory(
                region=settings.region,
                aws_access_key=settings.aws_access_key,
                aws_secret_key=secret
            )
        except ConfigurationError as e:
            self._diagnose(
                "critical",
                "SQS client failed to be configured, no messages will be sent",
                region=settings.region,
                error=str(e),
                exc_info=True
            )
            self.state = SinkState.DEGRADED
            return
        except Exception as e:
            self._diagnose(
                "critical",
                "Unexpected error configuring SQS client, no messages will be sent",
                region=settings.region,
                error=str(e),
                exc_info=True
            )
            self.state = SinkState.DEGRADED
            return

        self.state = SinkState.READY
        self._diagnose(
            "info",
            "SQS client initialized",
            region=settings.region,
            explicit_credentials=settings.has_credentials
        )

    def handle(self, message: str) -> DeliveryOutcome:
        """
        Deliver one rendered log message.

        Args:
            message: Rendered log line

        Returns:
            DeliveryOutcome describing what happened to the event
        """
        try:
            return self._handle(message)
        except Exception as e:
            self._diagnose(
                "critical",
                "Unexpected error sending log message to SQS",
                error=str(e),
                exc_info=True
            )
            return DeliveryOutcome(
                status=DeliveryStatus.TRANSPORT_ERROR,
                error_message=str(e)
            )

    def _handle(self, message: str) -> DeliveryOutcome:
        if not isinstance(message, str):
            message = str(message)

        truncated = False
        if byte_length(message) > self.max_message_size_bytes:
            self._diagnose(
                "warning",
                "Logging message will be truncated",
                original_message=message
            )
            message = truncate_message(message, self.truncate_size_bytes)
            truncated = True

        queue_url = self.settings.queue_url
        if not queue_url:
            self._diagnose("error", "Queue URL is not defined", region=self.settings.region)
            return DeliveryOutcome(
                status=DeliveryStatus.SKIPPED_NO_DESTINATION,
                truncated=truncated
            )

        if self.state == SinkState.CLOSED:
            return DeliveryOutcome(status=DeliveryStatus.SKIPPED_CLOSED, truncated=truncated)
        if self.state != SinkState.READY or self.client is None:
            return DeliveryOutcome(status=DeliveryStatus.SKIPPED_DEGRADED, truncated=truncated)

        try:
            message_id = self.client.send_message(
                queue_url,
                message,
                delay_seconds=self.settings.delay_seconds
            )

        except TransportError as e:
            self._diagnose(
                "critical",
                "Failed to send log message to SQS",
                request_id=e.request_id,
                error_code=e.error_code,
                status_code=e.status_code,
                error_message=e.error_message,
                queue_url=queue_url,
                exc_info=True
            )
            return DeliveryOutcome(
                status=DeliveryStatus.TRANSPORT_ERROR,
                truncated=truncated,
                error_code=e.error_code,
                status_code=e.status_code,
                request_id=e.request_id,
                error_message=e.error_message
            )

        self._diagnose(
            "debug",
            "Log message sent to SQS",
            message_id=message_id,
            queue_url=queue_url,
            truncated=truncated
        )
        return DeliveryOutcome(
            status=DeliveryStatus.SENT,
            truncated=truncated,
            message_id=message_id
        )

    def close(self) -> None:
        """Release the SQS client. Safe to call more than once."""
        client, self.client = self.client, None
        if self.state == SinkState.READY:
            self.state = SinkState.CLOSED
        if client is None:
            return

        try:
            client.close()
        except Exception as e:
            self._diagnose("error", "Failed to close SQS client", error=str(e))
