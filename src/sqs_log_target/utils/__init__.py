"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured diagnostic logging configuration and helpers
"""

__all__ = []
