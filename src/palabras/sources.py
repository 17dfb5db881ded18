"""Input-kind dispatch for tokenizer construction.

A tokenizer can be built from nothing, a string, a document object, a
reader callable, or an iterator. Each kind is resolved once, here, into a
uniform :class:`Source`: some text to buffer up front and an optional
reader to call whenever the buffer runs dry. Anything else is rejected
at construction rather than deep inside iteration.

Example:
    >>> source = resolve_source("Hello world")
    >>> source.initial
    ('Hello world',)
    >>> source.reader is None
    True

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from palabras.errors import ConfigurationError
from palabras.tokens import Token
from palabras.utils.logger import get_logger

if TYPE_CHECKING:
    from palabras.protocols import Batch

logger = get_logger(__name__)

ReaderFunc = Callable[[], "Batch | None"]


@dataclass(frozen=True, slots=True)
class Source:
    """Resolved tokenizer input.

    Attributes:
        kind: Which input kind was recognized ("empty", "text",
            "document", "reader", "iterator")
        initial: Inputs to buffer immediately
        reader: Refill callable, or None for buffer-only mode

    """

    kind: str
    initial: tuple[str, ...] = ()
    reader: ReaderFunc | None = None


def iterator_reader(iterator: Iterator[Any]) -> ReaderFunc:
    """Wrap an iterator so each call returns its next batch.

    Returns None once the iterator is exhausted.
    """

    def read() -> Batch | None:
        return next(iterator, None)

    return read


def _reader_from_document(document: Any) -> ReaderFunc:
    """Call ``document.tokens()`` once and adapt its result to a reader."""
    produced = document.tokens()
    if callable(produced):
        return produced
    if isinstance(produced, (str, Token)):
        msg = "document.tokens() must return a reader or an iterator, not a single item"
        raise ConfigurationError(msg, kind=type(produced).__name__)
    if isinstance(produced, Iterable):
        return iterator_reader(iter(produced))
    msg = "document.tokens() must return a reader or an iterator"
    raise ConfigurationError(msg, kind=type(produced).__name__)


def _is_document(obj: Any) -> bool:
    return callable(getattr(obj, "tokens", None))


def resolve_source(source: Any) -> Source:
    """Resolve a constructor argument into a Source.

    Args:
        source: None, a string, an object with a ``tokens()`` method,
            a reader callable, or an iterator

    Returns:
        Source describing what to buffer and how to refill

    Raises:
        ConfigurationError: If the input kind is not one of the above

    """
    if source is None:
        resolved = Source(kind="empty")
    elif isinstance(source, str):
        resolved = Source(kind="text", initial=(source,))
    elif _is_document(source):
        resolved = Source(kind="document", reader=_reader_from_document(source))
    elif callable(source):
        resolved = Source(kind="reader", reader=source)
    elif isinstance(source, Iterator):
        resolved = Source(kind="iterator", reader=iterator_reader(source))
    else:
        raise ConfigurationError("Can't understand tokenizer input", kind=type(source).__name__)

    logger.debug("Resolved tokenizer input as %s", resolved.kind)
    return resolved


__all__ = ["ReaderFunc", "Source", "iterator_reader", "resolve_source"]
