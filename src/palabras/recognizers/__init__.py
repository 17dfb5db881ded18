"""Pluggable recognizers for specialized word-like tokens.

Recognizers decide whether a punctuation-stripped fragment is a URL,
number, number with unit, ID, or anything a custom recognizer (for
example one backed by a lexicon) knows about. Fragments nobody claims
become plain words.

Usage:
    >>> from palabras.recognizers import create_registry_with_defaults
    >>> builder = create_registry_with_defaults()
    >>> builder.register(MyRecognizer())
    >>> tok = Tokenizer(text, recognizers=builder.build())

"""

from palabras.recognizers.protocol import PatternRecognizer, Recognizer
from palabras.recognizers.registry import (
    EMPTY_REGISTRY,
    RecognizerRegistry,
    RecognizerRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "EMPTY_REGISTRY",
    "PatternRecognizer",
    "Recognizer",
    "RecognizerRegistry",
    "RecognizerRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
