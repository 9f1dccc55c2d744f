"""Utility modules for fsmlex.

Provides:
- logger: get_logger for namespaced logging
"""

from fsmlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
