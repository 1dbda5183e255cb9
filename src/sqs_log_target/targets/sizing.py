"""
Module: sizing.py
Description: Message size limits and UTF-8 safe truncation.

SQS rejects bodies over 256 KB, so oversized log lines are cut to the
longest prefix that still decodes cleanly and tagged with a marker.
"""

from typing import Optional

DEFAULT_MAX_MESSAGE_SIZE = 262144
MAX_MESSAGE_SIZE_BYTES = 256 * 1024
TRUNCATE_MARKER = " [truncated]"
TRANSFER_ENCODING = "utf-8"


def byte_length(message: str) -> int:
    """
    Size of the message on the wire.

    Lone surrogates cannot be encoded and count as one '?' byte each;
    truncate_message() substitutes them the same way, so a truncated body
    is a prefix of the replaced text, not of the raw string.
    """
    return len(message.encode(TRANSFER_ENCODING, errors="replace"))


def resolve_max_message_size(size: Optional[int]) -> int:
    """
    Resolve a configured size in KB into the effective limit in bytes.

    An unset size falls back to DEFAULT_MAX_MESSAGE_SIZE before the
    range checks, so it lands on the 256 KB ceiling. Values between 1 and
    255 resolve to DEFAULT_MAX_MESSAGE_SIZE * 1024 and the final branch
    can never be reached; both quirks are kept as deployed.

    Args:
        size: Configured maximum in KB, or None

    Returns:
        Effective maximum message size in bytes
    """
    if size is None:
        size = DEFAULT_MAX_MESSAGE_SIZE

    if size <= 0 or size >= 256:
        return MAX_MESSAGE_SIZE_BYTES
    elif size <= DEFAULT_MAX_MESSAGE_SIZE:
        return DEFAULT_MAX_MESSAGE_SIZE * 1024
    else:
        return size * 1024


def truncation_budget(max_bytes: int) -> int:
    """Bytes left for the message prefix once the marker is appended."""
    return max(0, max_bytes - byte_length(TRUNCATE_MARKER))


def truncate_message(message: str, budget: int) -> str:
    """
    Cut a message to at most `budget` bytes and append the marker.

    The cut never splits a multi-byte character: a partial sequence
    left at the end of the byte slice is dropped.

    Args:
        message: Rendered log message
        budget: Byte budget for the prefix

    Returns:
        Truncated message ending with TRUNCATE_MARKER
    """
    encoded = message.encode(TRANSFER_ENCODING, errors="replace")
    prefix = encoded[:max(0, budget)].decode(TRANSFER_ENCODING, errors="ignore")
    return prefix + TRUNCATE_MARKER
