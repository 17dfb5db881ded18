"""Buffer-driven, pull-based lexer.

Each pull classifies exactly one token from the head of the buffer,
refilling the buffer from the reader only when it runs dry. Nothing is
tokenized ahead of demand, so arbitrarily long documents stream through
in constant memory.

Thread Safety:
Lexer instances are single-owner. The buffer and reader are unsynchronized
mutable state; share a Lexer across threads only with external locking.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from palabras.buffer import TokenBuffer
from palabras.errors import ReaderStallError
from palabras.lexer.classifiers import (
    PunctuationClassifierMixin,
    SpecialClassifierMixin,
    WhitespaceClassifierMixin,
)
from palabras.profiling import get_tokenize_accumulator
from palabras.recognizers.registry import RecognizerRegistry, create_default_registry
from palabras.splitters import vanilla_split
from palabras.tokens import Token, TokenType
from palabras.utils.logger import get_logger

if TYPE_CHECKING:
    from palabras.sources import ReaderFunc

logger = get_logger(__name__)

DEFAULT_MAX_EMPTY_BATCHES = 1000


class Lexer(
    WhitespaceClassifierMixin,
    PunctuationClassifierMixin,
    SpecialClassifierMixin,
):
    """Incremental token classifier over a refillable buffer.

    Classification of a raw fragment, in order:
    1. All whitespace -> SPACE
    2. Leading punctuation run -> PUNCT (remainder requeued)
    3. Trailing punctuation run stripped and requeued
    4. Recognizers (URL, number, number+unit, ID by default)
    5. Otherwise WORD

    Tokens already in the buffer (formatting markers, index anchors,
    anything pre-classified upstream) pass through unchanged.

    Usage:
        >>> lexer = Lexer()
        >>> lexer.buffer("Hi, there.")
        >>> list(lexer.tokenize())
        [Token(WORD, 'Hi'), Token(PUNCT, ','), Token(SPACE, ' '), Token(WORD, 'there'), Token(PUNCT, '.')]

    Thread Safety:
        Single-owner. All state is instance-local.

    """

    __slots__ = (
        "_buffer",
        "_reader",
        "_recognizers",
        "_max_empty_batches",
    )

    def __init__(
        self,
        reader: ReaderFunc | None = None,
        *,
        splitter: Callable[[str], list[str | Token]] = vanilla_split,
        recognizers: RecognizerRegistry | None = None,
        max_empty_batches: int = DEFAULT_MAX_EMPTY_BATCHES,
    ) -> None:
        """Initialize lexer.

        Args:
            reader: Called when the buffer runs dry; returns a batch or
                None for end of stream
            splitter: Splits buffered strings into raw fragments
            recognizers: Specialized classifiers (defaults to the built-ins)
            max_empty_batches: Consecutive empty reader batches tolerated
                before ReaderStallError
        """
        self._buffer = TokenBuffer(splitter)
        self._reader = reader
        self._recognizers = recognizers if recognizers is not None else create_default_registry()
        self._max_empty_batches = max_empty_batches

    # =========================================================================
    # Buffer
    # =========================================================================

    def buffer(self, *inputs: str | Token | None) -> None:
        """Queue more input behind whatever is already buffered.

        Buffered text is read before anything further from the reader.
        """
        added = self._buffer.buffer(*inputs)
        acc = get_tokenize_accumulator()
        if acc is not None:
            acc.record_fragments(added)

    def split(self, text: str) -> list[str | Token]:
        """Split text with this lexer's splitter, without buffering it."""
        return self._buffer.split(text)

    @property
    def exhausted(self) -> bool:
        """True once the buffer is empty and no reader is left to refill it."""
        return not self._buffer and self._reader is None

    def _requeue(self, item: str | Token) -> None:
        self._buffer.push_front(item)

    def _refill(self) -> bool:
        """Call the reader until the buffer has items or the stream ends.

        Returns:
            True if the buffer now has items.

        Raises:
            ReaderStallError: If the reader keeps returning empty batches
        """
        empty_batches = 0
        acc = get_tokenize_accumulator()
        while not self._buffer and self._reader is not None:
            batch = self._reader()
            if acc is not None:
                acc.record_reader_call()

            if batch is None:
                logger.debug("Reader signalled end of stream")
                self._reader = None
                break

            added = self._buffer.feed(batch)
            if acc is not None:
                acc.record_fragments(added)

            if not self._buffer:
                empty_batches += 1
                if empty_batches >= self._max_empty_batches:
                    logger.debug("Reader stalled after %d empty batches", empty_batches)
                    raise ReaderStallError(empty_batches)

        return bool(self._buffer)

    # =========================================================================
    # Token stream
    # =========================================================================

    def next_token(self, peek: bool = False) -> Token | None:
        """Classify and return the next token.

        Args:
            peek: Leave the token at the head of the buffer so the next
                call returns it again

        Returns:
            Next token, or None at end of stream. Once None is returned
            it keeps being returned until more input is buffered.
        """
        while True:
            if not self._buffer and not self._refill():
                return None

            item = self._buffer.popleft()

            # Empty artifacts are dropped, never emitted
            if item is None or item == "":
                continue

            if isinstance(item, Token):
                token = item
            else:
                token = self._classify_fragment(item)

            if peek:
                self._buffer.push_front(token)
            else:
                acc = get_tokenize_accumulator()
                if acc is not None:
                    acc.record_token()
            return token

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        return self.next_token(peek=True)

    def tokenize(self) -> Iterator[Token]:
        """Pull tokens until end of stream.

        Yields:
            Token objects one at a time

        Memory: O(1) beyond the buffer (tokens yielded, not accumulated)
        """
        while (token := self.next_token()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def _classify_fragment(self, fragment: str) -> Token:
        """Classify one non-empty raw fragment (may requeue leftovers)."""
        token = self._try_classify_space(fragment)
        if token is not None:
            return token

        token = self._try_split_leading_punct(fragment)
        if token is not None:
            return token

        fragment = self._strip_trailing_punct(fragment)

        token = self._try_classify_special(fragment)
        if token is not None:
            return token

        return Token(TokenType.WORD, fragment)
