"""
Module: exceptions.py
Description: Errors raised at the SQS transport boundary.
"""

from typing import Optional


class ConfigurationError(Exception):
    """Raised when the SQS client cannot be constructed."""

    pass


class TransportError(Exception):
    """
    Raised when SendMessage fails.

    Carries whatever diagnostic fields the provider returned; fields
    are None for failures that never reached the service (connection
    errors, endpoint resolution).
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None
    ):
        super().__init__(message)
        self.error_message = message
        self.error_code = error_code
        self.status_code = status_code
        self.request_id = request_id
