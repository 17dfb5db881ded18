"""Punctuation classifier mixin.

Leading and trailing punctuation each become separate PUNCT tokens. Rather
than one regex that finds both, each split pushes the leftover back onto
the head of the buffer, where it re-enters classification on the next
pull. A fragment like ``("quoted").`` therefore comes out as
``("``, ``quoted``, ``").`` without any recursion.

Word-internal punctuation (``don't``, ``e-mail``, ``U.S.A``) is never split.
"""

from __future__ import annotations

from palabras.tokens import Token, TokenType
from palabras.utils.text import leading_punct_end, trailing_punct_start


class PunctuationClassifierMixin:
    """Mixin providing leading/trailing punctuation splitting."""

    def _requeue(self, item: str | Token) -> None:
        """Push an item back to the head of the buffer. Implemented by Lexer."""
        raise NotImplementedError

    def _try_split_leading_punct(self, fragment: str) -> Token | None:
        """Split a leading punctuation run off the fragment.

        The remainder (if any) is requeued for classification on the
        next pull.

        Args:
            fragment: Non-empty, non-whitespace raw fragment

        Returns:
            PUNCT token for the leading run, or None if there is none.
        """
        end = leading_punct_end(fragment)
        if end == 0:
            return None
        if end < len(fragment):
            self._requeue(fragment[end:])
        return Token(TokenType.PUNCT, fragment[:end])

    def _strip_trailing_punct(self, fragment: str) -> str:
        """Strip a trailing punctuation run and requeue it.

        The requeued run becomes a PUNCT token on the next pull. Must be
        called after the leading split, so the stripped fragment is never
        empty.

        Args:
            fragment: Fragment that does not start with punctuation

        Returns:
            The fragment without its trailing punctuation.
        """
        start = trailing_punct_start(fragment)
        if start == len(fragment):
            return fragment
        self._requeue(fragment[start:])
        return fragment[:start]
