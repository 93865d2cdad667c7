"""Utility modules for anyorder.

Provides:
- logger: get_logger for logging
- text: has_uppercase for smart-case decisions
"""

from anyorder.utils.logger import get_logger
from anyorder.utils.text import has_uppercase

__all__ = [
    "get_logger",
    "has_uppercase",
]
