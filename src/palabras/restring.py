"""Rebuild text from a token list.

Given tokens, generates the string that should have given rise to them.
Text tokens contribute their literal text. Formatting and index tokens
have none, so they go through an optional formatter; without one,
formatting codes are dropped and index anchors become line breaks.

Example:
    >>> from palabras import Tokenizer
    >>> tokens = Tokenizer("<b>Hi</b> there", splitter="markup").tokens()
    >>> restring(tokens)
    'Hi there'
    >>> restring(tokens, formatter=lambda t: t.value)
    '<b>Hi</b> there'

"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from palabras.tokens import Token, TokenType


def restring(
    tokens: Iterable[Token],
    formatter: Callable[[Token], str] | None = None,
) -> str:
    """Concatenate the text of a token sequence.

    Args:
        tokens: Tokens in stream order
        formatter: Called with each FORMAT and INDEX token; must return
            the text to put in its place

    Returns:
        Reconstructed text
    """
    parts: list[str] = []
    for token in tokens:
        if token.type is TokenType.FORMAT:
            parts.append(formatter(token) if formatter is not None else "")
        elif token.type is TokenType.INDEX:
            parts.append(formatter(token) if formatter is not None else "\n")
        else:
            parts.append(token.text)
    return "".join(parts)


__all__ = ["restring"]
