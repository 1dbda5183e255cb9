"""
Module: outcome.py
Description: Per-event delivery outcome for the SQS log target.

Key Components:
- DeliveryStatus: Enum of the ways a single log event can end
- DeliveryOutcome: Result returned by SQSLogTarget.handle()

Dependencies: pydantic, enum, typing
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeliveryStatus(str, Enum):
    """How a single log event was disposed of."""

    SENT = "sent"
    SKIPPED_NO_DESTINATION = "skipped_no_destination"
    SKIPPED_DEGRADED = "skipped_degraded"
    SKIPPED_CLOSED = "skipped_closed"
    TRANSPORT_ERROR = "transport_error"


class DeliveryOutcome(BaseModel):
    """
    Result of handing one rendered message to the target.

    Attributes:
        status: Final disposition of the event
        truncated: Whether the body was shortened to fit the size limit
        message_id: SQS message id when the send succeeded
        error_code: Provider error code on transport failure
        status_code: HTTP status reported by the provider
        request_id: Provider request id for support tickets
        error_message: Human-readable failure description
    """

    model_config = ConfigDict(frozen=True)

    status: DeliveryStatus = Field(..., description="Final disposition of the event")
    truncated: bool = Field(default=False)
    message_id: Optional[str] = None
    error_code: Optional[str] = None
    status_code: Optional[int] = None
    request_id: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status == DeliveryStatus.SENT
