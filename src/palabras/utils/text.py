"""Character-class helpers for palabras.

Punctuation means Unicode general category P* (Pc, Pd, Ps, Pe, Pi, Pf, Po).
Symbols such as ``$``, ``+`` or ``<`` are not punctuation.

Example:
    >>> from palabras.utils.text import leading_punct_end
    >>> leading_punct_end("'quoted'")
    1
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache


@lru_cache(maxsize=4096)
def is_punct(char: str) -> bool:
    """Check whether a single character is Unicode punctuation."""
    return unicodedata.category(char).startswith("P")


def leading_punct_end(text: str) -> int:
    """Return the index just past the leading punctuation run.

    Returns 0 if text does not start with punctuation.
    """
    pos = 0
    text_len = len(text)
    while pos < text_len and is_punct(text[pos]):
        pos += 1
    return pos


def trailing_punct_start(text: str) -> int:
    """Return the index where the trailing punctuation run begins.

    Returns len(text) if text does not end with punctuation.
    """
    pos = len(text)
    while pos > 0 and is_punct(text[pos - 1]):
        pos -= 1
    return pos
