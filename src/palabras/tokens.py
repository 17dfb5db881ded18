"""Token and TokenType definitions for the palabras tokenizer.

The lexer produces a stream of Token objects. Each Token has a type and a
payload; the type decides how the payload is read back as source text.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenType(Enum):
    """Token types produced by the lexer.

    The enum value is the wire tag used by serialization. Plain words have
    no tag on the wire; their value here is only an internal marker.

    Organized by category:
    - Text (WORD)
    - Non-words (SPACE, PUNCT, FORMAT, INDEX)
    - Word-like specials (NUMBER, NUMBER_UNIT, URL, ID)

    Single-letter tags are grammatically not words. The longer tags act as
    words in a sentence but are not expected in a lexicon or spelling list.

    """

    WORD = "W"

    SPACE = "S"
    PUNCT = "P"
    FORMAT = "F"  # Opaque formatting marker from the source
    INDEX = "I"  # Caller-supplied placeholder/anchor

    NUMBER = "NUM"
    NUMBER_UNIT = "NUMU"  # 10kg, 3.5GHz
    URL = "URL"
    ID = "ID"  # ISO-9001, COVID-19


# Types that behave grammatically as words
WORDLIKE_TYPES = frozenset(
    {
        TokenType.WORD,
        TokenType.NUMBER,
        TokenType.NUMBER_UNIT,
        TokenType.URL,
        TokenType.ID,
    }
)

# Types whose payload is not source text
_OPAQUE_TYPES = frozenset({TokenType.FORMAT, TokenType.INDEX})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The payload. Source text for everything except FORMAT and
            INDEX, whose payload is opaque and passed through untouched.
        unit: Unit suffix for NUMBER_UNIT tokens, None otherwise

    """

    type: TokenType
    value: Any
    unit: str | None = None

    @property
    def tag(self) -> str | None:
        """Wire tag for this token; None for plain words."""
        if self.type is TokenType.WORD:
            return None
        return self.type.value

    @property
    def text(self) -> str:
        """Literal source text this token was read from.

        FORMAT and INDEX tokens have no literal text; use
        :func:`palabras.restring.restring` with a formatter to render them.
        """
        if self.type in _OPAQUE_TYPES:
            return ""
        if self.type is TokenType.NUMBER_UNIT:
            return f"{self.value}{self.unit or ''}"
        return self.value

    @property
    def is_word(self) -> bool:
        """Plain word (no special classification)."""
        return self.type is TokenType.WORD

    @property
    def is_space(self) -> bool:
        return self.type is TokenType.SPACE

    @property
    def is_wordlike(self) -> bool:
        """Word or any specialized type that acts as a word."""
        return self.type in WORDLIKE_TYPES

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.NUMBER_UNIT:
            return f"Token({self.type.name}, {self.value!r}, {self.unit!r})"
        return f"Token({self.type.name}, {self.value!r})"


def word(value: str) -> Token:
    return Token(TokenType.WORD, value)


def space(value: str) -> Token:
    return Token(TokenType.SPACE, value)


def punct(value: str) -> Token:
    return Token(TokenType.PUNCT, value)


def fmt(value: Any) -> Token:
    return Token(TokenType.FORMAT, value)


def index(value: Any) -> Token:
    return Token(TokenType.INDEX, value)


def number(value: str) -> Token:
    return Token(TokenType.NUMBER, value)


def number_unit(value: str, unit: str) -> Token:
    return Token(TokenType.NUMBER_UNIT, value, unit)


def url(value: str) -> Token:
    return Token(TokenType.URL, value)


def ident(value: str) -> Token:
    return Token(TokenType.ID, value)


__all__ = [
    "WORDLIKE_TYPES",
    "Token",
    "TokenType",
    "fmt",
    "ident",
    "index",
    "number",
    "number_unit",
    "punct",
    "space",
    "url",
    "word",
]
