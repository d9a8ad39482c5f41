"""Utility modules for graphdoc.

Provides:
- logger: get_logger for logging
"""

from graphdoc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
