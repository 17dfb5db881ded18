"""Utility modules for palabras.

Provides:
- text: punctuation helpers used by the classifiers
- logger: get_logger for logging
"""

from palabras.utils.logger import get_logger
from palabras.utils.text import is_punct, leading_punct_end, trailing_punct_start

__all__ = [
    "get_logger",
    "is_punct",
    "leading_punct_end",
    "trailing_punct_start",
]
