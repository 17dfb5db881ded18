"""
palabras: Incremental Natural-Language Tokenizer for Python

Splits space- and punctuation-delimited text into a typed, lazily pulled
token stream (words, whitespace, punctuation, formatting markers, numbers,
number/unit pairs, URLs and IDs) that preserves the exact input, with
stopword-based phrase and n-gram extraction on top. Zero runtime
dependencies.

Quick Start:
    >>> from palabras import tokenize
    >>> tokenize("Hello,  world")
    [Token(WORD, 'Hello'), Token(PUNCT, ','), Token(SPACE, '  '), Token(WORD, 'world')]

    >>> # Or use the Tokenizer for streaming and lexical analysis
    >>> from palabras import Tokenizer
    >>> tok = Tokenizer("A series of phrases delineated by many more stop words.")
    >>> _ = tok.stopwords("a", "of", "by")
    >>> tok.min_ngram = 2
    >>> tok.ngrams()[:3]
    ['phrases delineated', 'many more', 'more stop']

Streaming input:
    >>> chunks = iter(["First chunk. ", "Second chunk."])
    >>> [t.value for t in Tokenizer(chunks).words()]
    ['First', 'chunk', 'Second', 'chunk']

Installation:
    pip install palabras
"""

from typing import Any

from palabras.analysis import iter_ngrams, iter_phrases, ngrams_of
from palabras.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from palabras.errors import (
    ConfigurationError,
    PalabrasError,
    ReaderStallError,
    RecognizerError,
)
from palabras.lexer import Lexer
from palabras.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from palabras.recognizers import (
    PatternRecognizer,
    Recognizer,
    RecognizerRegistry,
    RecognizerRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from palabras.restring import restring
from palabras.serialization import from_json, from_wire, to_json, to_wire
from palabras.splitters import markup_split, vanilla_split
from palabras.stopwords import ENGLISH_STOPWORDS, StopwordSet
from palabras.tokenizer import Tokenizer
from palabras.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: Any, **kwargs: Any) -> list[Token]:
    """Tokenize a source completely.

    Args:
        source: Text, document, reader or iterator (see Tokenizer)
        **kwargs: Passed to Tokenizer (splitter, recognizers, config)

    Returns:
        Every token, in order

    Example:
        >>> "".join(t.text for t in tokenize("Round  trip, exactly."))
        'Round  trip, exactly.'
    """
    return Tokenizer(source, **kwargs).tokens()


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "restring",
    "Tokenizer",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    # Splitters
    "markup_split",
    "vanilla_split",
    # Recognizers
    "PatternRecognizer",
    "Recognizer",
    "RecognizerRegistry",
    "RecognizerRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Lexical analysis
    "ENGLISH_STOPWORDS",
    "StopwordSet",
    "iter_ngrams",
    "iter_phrases",
    "ngrams_of",
    # Serialization
    "to_wire",
    "from_wire",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
    # Errors
    "PalabrasError",
    "ConfigurationError",
    "ReaderStallError",
    "RecognizerError",
]
