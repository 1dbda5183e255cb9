"""
Module: models
Description: Package initialization for Pydantic data models.

- DeliveryStatus: Disposition of a single log event
- DeliveryOutcome: Result returned for each handled log event
"""

from .outcome import DeliveryOutcome, DeliveryStatus

__all__ = [
    "DeliveryOutcome",
    "DeliveryStatus",
]
