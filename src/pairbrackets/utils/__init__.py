"""Utility modules for pairbrackets.

Provides:
- logger: get_logger for logging
"""

from pairbrackets.utils.logger import get_logger

__all__ = [
    "get_logger",
]
