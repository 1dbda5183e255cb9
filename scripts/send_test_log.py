#!/usr/bin/env python3
"""
Script: send_test_log.py
Description: Send one log record through the SQS log handler.

Useful for checking queue permissions and credentials after deploying
a new queue. Settings not given on the command line are read from
SQS_LOG_* environment variables.

Usage:
    python scripts/send_test_log.py --queue-url https://sqs.us-east-1.amazonaws.com/123456789012/app-logs
    python scripts/send_test_log.py --message "hello" --level WARNING --region eu-west-1

Note:
    Delivery failures never raise; check the JSON diagnostic output
    written to stdout.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from sqs_log_target.targets.handler import SQSLogHandler


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Send a test log record to an SQS queue"
    )
    parser.add_argument(
        "--message",
        default="SQS log target test message",
        help="Log message to send"
    )
    parser.add_argument(
        "--level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Level of the test record (default: INFO)"
    )
    parser.add_argument("--queue-url", help="Destination queue URL")
    parser.add_argument("--region", help="AWS region of the queue")

    args = parser.parse_args()

    overrides = {"log_level": "DEBUG"}
    if args.queue_url:
        overrides["queue_url"] = args.queue_url
    if args.region:
        overrides["region"] = args.region

    try:
        handler = SQSLogHandler(**overrides)
    except ValidationError as e:
        print(f"ERROR: invalid settings\n{e}", file=sys.stderr)
        return 1

    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))

    test_logger = logging.getLogger("sqs_log_target.test")
    test_logger.setLevel(logging.DEBUG)
    test_logger.propagate = False
    test_logger.addHandler(handler)

    try:
        test_logger.log(logging.getLevelName(args.level), args.message)
    finally:
        test_logger.removeHandler(handler)
        handler.close()

    print(f"Test record handed to SQS target for {handler.settings.queue_url or '<no queue url>'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
