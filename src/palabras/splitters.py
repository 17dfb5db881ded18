"""First-stage splitting of raw text into fragments.

The first step in tokenization is a simple regex split. The vanilla splitter
only splits on whitespace and keeps the whitespace runs, so joining the
fragments reproduces the input exactly.

The markup splitter also treats ``<...>`` spans as atomic formatting
fragments. Formatting has to be handled at this stage because it takes
priority over spaces when reading text.

Example:
    >>> from palabras.splitters import vanilla_split, markup_split
    >>> vanilla_split("a  b")
    ['a', '  ', 'b']
    >>> markup_split("<i>x</i>")
    ['', Token(FORMAT, '<i>'), 'x', Token(FORMAT, '</i>'), '']

Thread Safety:
All splitters are pure functions. Safe to call from any thread.

"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

from palabras.errors import ConfigurationError
from palabras.tokens import Token, TokenType

_WHITESPACE_PATTERN = re.compile(r"(\s+)")

# Non-greedy and single-line, so "<a> b <c>" is two spans
_MARKUP_PATTERN = re.compile(r"(<.*?>)")


def vanilla_split(text: str) -> list[str | Token]:
    """Split on runs of whitespace, keeping the runs as fragments.

    Leading/trailing empty strings may appear; the lexer drops them.
    """
    return _WHITESPACE_PATTERN.split(text)


def markup_split(text: str) -> list[str | Token]:
    """Split out ``<...>`` spans as FORMAT tokens, then split on whitespace.

    Text between spans is entity-decoded (``&amp;`` -> ``&``) before the
    whitespace split, so decoded whitespace such as ``&nbsp;`` splits too.
    """
    fragments: list[str | Token] = []
    for i, part in enumerate(_MARKUP_PATTERN.split(text)):
        # Odd indices are the captured spans
        if i % 2:
            fragments.append(Token(TokenType.FORMAT, part))
        else:
            fragments.extend(_WHITESPACE_PATTERN.split(html.unescape(part)))
    return fragments


BUILTIN_SPLITTERS: dict[str, Callable[[str], list[str | Token]]] = {
    "vanilla": vanilla_split,
    "markup": markup_split,
}


def get_splitter(
    splitter: str | Callable[[str], list[str | Token]] | None,
) -> Callable[[str], list[str | Token]]:
    """Resolve a splitter name or callable.

    Args:
        splitter: "vanilla", "markup", any callable, or None for vanilla

    Returns:
        Splitter callable

    Raises:
        ConfigurationError: If the name is not a built-in splitter

    """
    if splitter is None:
        return vanilla_split
    if callable(splitter):
        return splitter
    if splitter not in BUILTIN_SPLITTERS:
        available = ", ".join(sorted(BUILTIN_SPLITTERS))
        raise ConfigurationError(f"Unknown splitter {splitter!r}. Available: {available}")
    return BUILTIN_SPLITTERS[splitter]


__all__ = [
    "BUILTIN_SPLITTERS",
    "get_splitter",
    "markup_split",
    "vanilla_split",
]
