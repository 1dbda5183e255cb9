"""
Module: handler.py
Description: stdlib logging handler backed by an SQSLogTarget.

The handler's formatter is the layout: each record is formatted and
the resulting line is handed to the target.

Example:
    >>> import logging
    >>> handler = SQSLogHandler(region="us-east-1", queue_url=url)
    >>> handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    >>> logging.getLogger("app").addHandler(handler)
"""

import logging
from typing import Optional

from sqs_log_target.config.settings import TargetSettings
from sqs_log_target.targets.sqs_target import SQSLogTarget


class SQSLogHandler(logging.Handler):
    """
    Logging handler that sends each formatted record to SQS.

    Attributes:
        settings: Target settings the handler was built from
        target: SQSLogTarget receiving the formatted records
    """

    def __init__(self, settings: Optional[TargetSettings] = None, **overrides):
        """
        Initialize the handler and open its target.

        Args:
            settings: Prebuilt settings; loaded from the environment when omitted
            **overrides: Setting values used when loading from the environment
        """
        if settings is None:
            settings = TargetSettings(**overrides)

        super().__init__(level=settings.log_level)
        self.settings = settings
        self.target = SQSLogTarget.open(settings)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.target.handle(self.format(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self.target.close()
        finally:
            self.release()
        super().close()
