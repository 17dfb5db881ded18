"""Recognizer protocol for specialized word-like tokens.

Recognizers run on a fragment after punctuation has been stripped from
both ends. The first recognizer that returns a token wins; if none does,
the fragment becomes a plain word.

Thread Safety:
Recognizers must be stateless. Multiple lexers may call the same
recognizer instance concurrently.

Example:
    >>> class CashtagRecognizer:
    ...     name = "cashtag"
    ...     token_type = TokenType.ID
    ...
    ...     def recognize(self, fragment):
    ...         if fragment.startswith("$") and len(fragment) > 1:
    ...             return Token(TokenType.ID, fragment)
    ...         return None

"""

from __future__ import annotations

import re
from typing import ClassVar, Protocol, runtime_checkable

from palabras.tokens import Token, TokenType


@runtime_checkable
class Recognizer(Protocol):
    """Protocol for recognizer implementations.

    Attributes:
        name: Unique recognizer name, used for registry lookup
        token_type: Token type this recognizer produces

    """

    name: ClassVar[str]
    token_type: ClassVar[TokenType]

    def recognize(self, fragment: str) -> Token | None:
        """Classify a fragment.

        Args:
            fragment: A non-empty fragment with no leading or trailing
                punctuation and no whitespace

        Returns:
            A token whose ``text`` equals the fragment, or None to pass
        """
        ...


class PatternRecognizer:
    """Base class for recognizers driven by one full-match regex.

    Subclasses set ``name``, ``token_type`` and ``pattern``.

    """

    name: ClassVar[str]
    token_type: ClassVar[TokenType]
    pattern: ClassVar[re.Pattern[str]]

    def recognize(self, fragment: str) -> Token | None:
        if self.pattern.fullmatch(fragment) is None:
            return None
        return Token(self.token_type, fragment)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
