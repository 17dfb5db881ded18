"""High-level tokenizer combining the lexer with lexical analysis.

The Tokenizer takes a document containing natural-language text and hands
back words and other tokens: whitespace (so the exact input can be
restored), punctuation, formatting markers, and word-like specials such
as numbers, number/unit pairs, URLs and IDs. On top of the raw stream it
offers stopword-based phrase segmentation and n-gram extraction.

This model assumes words are delimited by whitespace and punctuation; it
is not suited to languages written without spaces.

Example:
    >>> tok = Tokenizer("A series of phrases delineated by stop words.")
    >>> _ = tok.stopwords("a", "of", "by")
    >>> tok.phrases()
    [['series'], ['phrases', 'delineated'], ['stop', 'words']]

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from palabras.analysis import iter_ngrams, iter_phrases
from palabras.config import TokenizerConfig, get_tokenizer_config
from palabras.lexer import Lexer
from palabras.recognizers.registry import (
    EMPTY_REGISTRY,
    RecognizerRegistry,
    create_default_registry,
)
from palabras.restring import restring
from palabras.sources import resolve_source
from palabras.splitters import get_splitter
from palabras.stopwords import StopwordSet
from palabras.tokens import Token, TokenType


class Tokenizer:
    """Incremental natural-language tokenizer.

    The source may be:
    - nothing: the tokenizer starts empty; feed it with ``buffer()``
    - a string: the text itself
    - a document: any object with a ``tokens()`` method returning a
      reader callable or an iterator of batches
    - a reader: a callable returning the next batch, or None when done
    - an iterator of batches

    A batch is a string, a Token, or an iterable of them. Strings are
    split and classified; tokens pass through untouched.

    Usage:
        >>> tok = Tokenizer("A 'sentence' with punctuation.")
        >>> [t.value for t in tok.text()]
        ['A', "'", 'sentence', "'", 'with', 'punctuation', '.']

    Thread Safety:
        Not thread-safe. A Tokenizer owns a mutable buffer and reader;
        use one per thread or synchronize externally.

    """

    __slots__ = ("_config", "_lexer", "_max_ngram", "_min_ngram", "_stopwords")

    def __init__(
        self,
        source: Any = None,
        *,
        splitter: str | Callable[[str], list[str | Token]] | None = None,
        recognizers: RecognizerRegistry | None = None,
        config: TokenizerConfig | None = None,
    ) -> None:
        """Initialize tokenizer.

        Args:
            source: Text, document, reader, iterator, or None
            splitter: Splitter name ("vanilla", "markup") or callable;
                overrides the config
            recognizers: Recognizer registry; overrides the config
            config: Configuration (defaults to the context's active config)

        Raises:
            ConfigurationError: If the source kind or splitter name is not
                understood
        """
        self._config = config if config is not None else get_tokenizer_config()

        if recognizers is None:
            recognizers = (
                create_default_registry() if self._config.recognizers_enabled else EMPTY_REGISTRY
            )

        resolved = resolve_source(source)
        self._lexer = Lexer(
            resolved.reader,
            splitter=get_splitter(splitter if splitter is not None else self._config.splitter),
            recognizers=recognizers,
            max_empty_batches=self._config.max_empty_batches,
        )
        self._lexer.buffer(*resolved.initial)

        self._stopwords = StopwordSet(self._config.stopwords)
        self._min_ngram = 0
        self._max_ngram = 0
        self.min_ngram = self._config.min_ngram
        self.max_ngram = self._config.max_ngram

    # =========================================================================
    # Input
    # =========================================================================

    def split(self, text: str) -> list[str | Token]:
        """Run the configured splitter on text without buffering it."""
        return self._lexer.split(text)

    def buffer(self, *inputs: str | Token | None) -> None:
        """Push more input onto the buffer.

        Buffered input is read before anything further from the document
        or reader.
        """
        self._lexer.buffer(*inputs)

    @property
    def exhausted(self) -> bool:
        """True once everything has been read and no reader remains."""
        return self._lexer.exhausted

    # =========================================================================
    # Single-step access
    # =========================================================================

    def token(self, peek: bool = False) -> Token | None:
        """Take the next token, or with ``peek`` look at it without taking it.

        Returns:
            Next token, or None at end of stream
        """
        return self._lexer.next_token(peek)

    def peek(self) -> Token | None:
        return self._lexer.next_token(peek=True)

    def word(self) -> Token | None:
        """Next plain word, skipping every other token type."""
        while (token := self._lexer.next_token()) is not None:
            if token.type is TokenType.WORD:
                return token
        return None

    def text_token(self) -> Token | None:
        """Next token that is not whitespace."""
        while (token := self._lexer.next_token()) is not None:
            if token.type is not TokenType.SPACE:
                return token
        return None

    # =========================================================================
    # Lazy streams
    # =========================================================================

    def iter_tokens(self, *inputs: str | Token | None) -> Iterator[Token]:
        """Lazily pull every token, after buffering any inputs given."""
        if inputs:
            self.buffer(*inputs)
        return self._lexer.tokenize()

    def iter_text(self, *inputs: str | Token | None) -> Iterator[Token]:
        """Like iter_tokens but without SPACE tokens."""
        return (t for t in self.iter_tokens(*inputs) if t.type is not TokenType.SPACE)

    def iter_words(self, *inputs: str | Token | None) -> Iterator[Token]:
        """Only plain words: no spaces, punctuation, formatting or specials."""
        return (t for t in self.iter_tokens(*inputs) if t.type is TokenType.WORD)

    def iter_phrases(self, *inputs: str | Token | None) -> Iterator[list[str]]:
        """Lazily segment the stream into phrases (see phrases())."""
        return iter_phrases(self.iter_tokens(*inputs), self.stopword)

    def iter_ngrams(self, *inputs: str | Token | None) -> Iterator[str]:
        """Lazily yield n-grams (see ngrams())."""
        return iter_ngrams(self.iter_phrases(*inputs), self._min_ngram, self._max_ngram)

    def __iter__(self) -> Iterator[Token]:
        return self._lexer.tokenize()

    # =========================================================================
    # Drained lists
    # =========================================================================

    def tokens(self, *inputs: str | Token | None) -> list[Token]:
        """Every token until end of stream.

        The source must be finite; use iter_tokens() to consume lazily.
        """
        return list(self.iter_tokens(*inputs))

    def text(self, *inputs: str | Token | None) -> list[Token]:
        """Like tokens() but drops SPACE tokens.

        Rebuilding a string from this won't be spaced correctly, especially
        around punctuation, unless done carefully.
        """
        return list(self.iter_text(*inputs))

    def words(self, *inputs: str | Token | None) -> list[Token]:
        """Only the plain words; useful for spell checking."""
        return list(self.iter_words(*inputs))

    def phrases(self, *inputs: str | Token | None) -> list[list[str]]:
        """Words broken into phrases on punctuation, formatting and stopwords.

        Any non-space token other than a plain word closes the current
        phrase, as does any registered stopword.
        """
        return list(self.iter_phrases(*inputs))

    def ngrams(self, *inputs: str | Token | None) -> list[str]:
        """All n-grams of every phrase, as space-joined strings.

        Bounded by min_ngram and max_ngram; with neither set, every window
        size from single words up to the whole phrase is returned.
        """
        return list(self.iter_ngrams(*inputs))

    # =========================================================================
    # Stopwords and n-gram window
    # =========================================================================

    def stopwords(self, *words: str) -> frozenset[str]:
        """Register stopwords (case-insensitive).

        Returns:
            All registered stopwords, case-folded
        """
        self._stopwords.add(*words)
        return self._stopwords.frozen()

    def stopword(self, word: str) -> bool:
        """Check whether a word is a registered stopword (case-insensitive)."""
        return word in self._stopwords

    @property
    def min_ngram(self) -> int:
        """Smallest n-gram size returned by ngrams(); 0 means 1."""
        return self._min_ngram

    @min_ngram.setter
    def min_ngram(self, value: int) -> None:
        self._min_ngram = _check_ngram_bound("min_ngram", value)

    @property
    def max_ngram(self) -> int:
        """Largest n-gram size returned by ngrams(); 0 means unbounded."""
        return self._max_ngram

    @max_ngram.setter
    def max_ngram(self, value: int) -> None:
        self._max_ngram = _check_ngram_bound("max_ngram", value)

    # =========================================================================
    # Output
    # =========================================================================

    @staticmethod
    def restring(
        tokens: Iterable[Token],
        formatter: Callable[[Token], str] | None = None,
    ) -> str:
        """Rebuild text from tokens (see palabras.restring.restring)."""
        return restring(tokens, formatter)


def _check_ngram_bound(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be >= 0 (0 means unbounded), got {value}"
        raise ValueError(msg)
    return value


__all__ = ["Tokenizer"]
