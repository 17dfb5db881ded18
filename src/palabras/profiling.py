"""palabras TokenizeAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics while tokenizing:
- Tokens emitted
- Reader calls made to refill the buffer
- Raw fragments buffered

Zero overhead when disabled (get_tokenize_accumulator() returns None).

Example:
    from palabras import Tokenizer
    from palabras.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        Tokenizer("Hello, world.").tokens()

    print(metrics.summary())
    # {"total_ms": 0.1, "tokens": 5, "reader_calls": 0, "fragments": 3}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        tokens: Number of tokens emitted (peeks not counted).
        reader_calls: Number of times a reader was called.
        fragments: Number of items added to lexer buffers.

    """

    start_time: float = field(default_factory=perf_counter)
    tokens: int = 0
    reader_calls: int = 0
    fragments: int = 0

    def record_token(self) -> None:
        self.tokens += 1

    def record_reader_call(self) -> None:
        self.reader_calls += 1

    def record_fragments(self, count: int) -> None:
        self.fragments += count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, tokens, reader_calls, fragments.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokens": self.tokens,
            "reader_calls": self.reader_calls,
            "fragments": self.fragments,
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator populated by every lexer pulled inside the block.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
