"""Whitespace classifier mixin."""

from __future__ import annotations

from palabras.tokens import Token, TokenType


class WhitespaceClassifierMixin:
    """Mixin providing whitespace classification."""

    def _try_classify_space(self, fragment: str) -> Token | None:
        """Classify an all-whitespace fragment as a SPACE token.

        The run is kept verbatim (never collapsed) so the input can be
        rebuilt exactly.

        Args:
            fragment: Non-empty raw fragment

        Returns:
            SPACE token, or None if the fragment has non-space characters.
        """
        if fragment.isspace():
            return Token(TokenType.SPACE, fragment)
        return None
