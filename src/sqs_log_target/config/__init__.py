"""
Module: config
Description: Package initialization for target configuration.
"""

from .settings import TargetSettings

__all__ = ["TargetSettings"]
