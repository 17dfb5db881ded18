"""Specialized word-like classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from palabras.tokens import Token

if TYPE_CHECKING:
    from palabras.recognizers.registry import RecognizerRegistry


class SpecialClassifierMixin:
    """Mixin delegating to the recognizer registry.

    The registry (URL, number, number+unit, ID by default) is the
    extension point where lexicon-style classifiers plug in.
    """

    _recognizers: RecognizerRegistry

    def _try_classify_special(self, fragment: str) -> Token | None:
        """Run recognizers in priority order on a stripped fragment.

        Args:
            fragment: Fragment with surrounding punctuation removed

        Returns:
            Specialized token from the first matching recognizer, or None.
        """
        return self._recognizers.recognize(fragment)
