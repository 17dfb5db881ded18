"""Fragment classifiers for the palabras lexer.

Each classifier is a mixin that provides classification logic for one
kind of fragment. Only the punctuation classifier touches the buffer,
and only by requeuing leftovers at its head.
"""

from palabras.lexer.classifiers.punctuation import (
    PunctuationClassifierMixin,
)
from palabras.lexer.classifiers.special import (
    SpecialClassifierMixin,
)
from palabras.lexer.classifiers.whitespace import (
    WhitespaceClassifierMixin,
)

__all__ = [
    "PunctuationClassifierMixin",
    "SpecialClassifierMixin",
    "WhitespaceClassifierMixin",
]
