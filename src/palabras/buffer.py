"""Pending-item queue for the lexer.

Holds raw fragments and finished tokens waiting to be classified. Items
are appended at the tail by buffering and pushed back at the head when
the classifier splits punctuation off a fragment or a token is peeked.

Thread Safety:
Not thread-safe. A TokenBuffer belongs to exactly one Lexer.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator

from palabras.splitters import vanilla_split
from palabras.tokens import Token


class TokenBuffer:
    """Double-ended queue of pending fragments and tokens.

    Usage:
        >>> buf = TokenBuffer()
        >>> buf.buffer("Hello world")
        >>> len(buf)
        3
        >>> buf.popleft()
        'Hello'

    """

    __slots__ = ("_items", "_splitter")

    def __init__(
        self,
        splitter: Callable[[str], list[str | Token]] = vanilla_split,
    ) -> None:
        """Initialize an empty buffer.

        Args:
            splitter: Splitter applied to every string that gets buffered
        """
        self._items: deque[str | Token] = deque()
        self._splitter = splitter

    def buffer(self, *inputs: str | Token | None) -> int:
        """Append inputs to the tail of the queue.

        Strings are split into fragments first and empty fragments are
        dropped; tokens are queued as-is; None is skipped.

        Returns:
            Number of items added to the queue

        Raises:
            TypeError: For anything that is not a string, Token or None
        """
        before = len(self._items)
        for incoming in inputs:
            if incoming is None:
                continue
            if isinstance(incoming, Token):
                self._items.append(incoming)
            elif isinstance(incoming, str):
                self._items.extend(f for f in self._splitter(incoming) if f)
            else:
                msg = f"Can't buffer input of type {type(incoming).__name__}"
                raise TypeError(msg)
        return len(self._items) - before

    def feed(self, batch: str | Token | Iterable[str | Token]) -> int:
        """Buffer one reader batch: a single item or an iterable of them."""
        if isinstance(batch, (str, Token)):
            return self.buffer(batch)
        return self.buffer(*batch)

    def split(self, text: str) -> list[str | Token]:
        """Run the configured splitter without buffering."""
        return self._splitter(text)

    def push_front(self, item: str | Token) -> None:
        """Put an item back at the head so it is read next."""
        self._items.appendleft(item)

    def popleft(self) -> str | Token:
        """Remove and return the head item.

        Raises:
            IndexError: If the buffer is empty
        """
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[str | Token]:
        return iter(self._items)
