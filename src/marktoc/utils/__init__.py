"""Utility modules for marktoc.

Provides:
- logger: get_logger for namespaced logging
"""

from marktoc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
