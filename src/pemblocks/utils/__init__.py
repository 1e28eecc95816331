"""Utility modules for pemblocks.

Provides:
- logger: get_logger for logging
"""

from pemblocks.utils.logger import get_logger

__all__ = [
    "get_logger",
]
