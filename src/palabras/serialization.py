"""Token serialization: wire shape and JSON round-trip.

The wire shape of a token is a bare string for plain words and a tagged
tuple otherwise: ``("P", ".")``, ``("S", "  ")``, ``("NUMU", "10", "kg")``.
JSON has no tuples, so decoded pairs arrive as lists; both are accepted.

Example:
    >>> from palabras.serialization import to_wire, from_wire
    >>> to_wire(Token(TokenType.PUNCT, "."))
    ('P', '.')
    >>> from_wire("word")
    Token(WORD, 'word')

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from palabras.tokens import Token, TokenType

# Registry of wire tags to token types for deserialization
_TAGS: dict[str, TokenType] = {t.value: t for t in TokenType if t is not TokenType.WORD}


def to_wire(token: Token) -> str | tuple[Any, ...]:
    """Convert a token to its wire shape."""
    if token.type is TokenType.WORD:
        return token.value
    if token.type is TokenType.NUMBER_UNIT:
        return (token.type.value, token.value, token.unit)
    return (token.type.value, token.value)


def from_wire(data: str | tuple[Any, ...] | list[Any]) -> Token:
    """Reconstruct a token from its wire shape.

    Raises:
        ValueError: If the tag is unknown or the payload has the wrong arity.
    """
    if isinstance(data, str):
        return Token(TokenType.WORD, data)

    if not data:
        msg = "Empty wire token"
        raise ValueError(msg)

    tag, *payload = data
    token_type = _TAGS.get(tag)
    if token_type is None:
        msg = f"Unknown token tag: {tag!r}"
        raise ValueError(msg)

    expected = 2 if token_type is TokenType.NUMBER_UNIT else 1
    if len(payload) != expected:
        msg = f"Token tag {tag!r} expects {expected} payload value(s), got {len(payload)}"
        raise ValueError(msg)

    return Token(token_type, *payload)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array of wire shapes.

    FORMAT and INDEX payloads must themselves be JSON-serializable.
    """
    return json.dumps([to_wire(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize tokens from a JSON array (as produced by to_json).

    Raises:
        ValueError: If the JSON is not an array of wire tokens.
    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_wire(item) for item in raw]


__all__ = ["from_json", "from_wire", "to_json", "to_wire"]
