"""Protocols for palabras.

Defines the contracts for the collaborators a tokenizer talks to:
documents that supply pre-tokenized input, readers that refill the
buffer, splitters that break raw text into fragments, and formatters
that render opaque tokens back to text.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from palabras.tokens import Token

# One unit of reader output: a raw string, a finished token, or several of them.
Batch: TypeAlias = "str | Token | Iterable[str | Token]"


@runtime_checkable
class Document(Protocol):
    """Protocol for document objects.

    A document is effectively a pre-tokenizer: its ``tokens()`` returns
    either a reader callable or an iterator of batches. Strings from it
    are split and classified; tokens from it pass through untouched.

    """

    def tokens(self) -> Any:
        """Return a Reader or an iterator of batches."""
        ...


class Reader(Protocol):
    """Pull source called whenever the buffer runs dry.

    Each call advances the external source. Returning None ends the
    stream; the tokenizer never calls the reader again after that.

    """

    def __call__(self) -> Batch | None: ...


class Splitter(Protocol):
    """Breaks raw text into fragments.

    Joining the string fragments back together must reproduce the input,
    except where the splitter deliberately emits tokens (formatting).

    """

    def __call__(self, text: str) -> list[str | Token]: ...


class Formatter(Protocol):
    """Renders a FORMAT or INDEX token back to text."""

    def __call__(self, token: Token) -> str: ...


__all__ = ["Batch", "Document", "Formatter", "Reader", "Splitter"]
