"""Recognizer registry for priority-ordered classification.

The registry holds recognizers in the order they were registered; that
order is the priority order used by the lexer.

Thread Safety:
RecognizerRegistry is immutable after creation. Safe to share.
Use RecognizerRegistryBuilder for mutable construction.

Example:
    >>> builder = RecognizerRegistryBuilder()
    >>> builder.register(UrlRecognizer())
    >>> builder.register(NumberRecognizer())
    >>> registry = builder.build()
    >>> registry.recognize("42")
    Token(NUMBER, '42')

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from palabras.errors import RecognizerError

if TYPE_CHECKING:
    from palabras.recognizers.protocol import Recognizer
    from palabras.tokens import Token


class RecognizerRegistry:
    """Immutable, ordered registry of recognizers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_recognizers", "_by_name")

    def __init__(
        self,
        recognizers: tuple[Recognizer, ...],
        by_name: dict[str, Recognizer],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use RecognizerRegistryBuilder to create instances.
        """
        self._recognizers = recognizers
        self._by_name = by_name

    def recognize(self, fragment: str) -> Token | None:
        """Run recognizers in priority order; return the first match.

        Raises:
            RecognizerError: If a recognizer returns a token that does not
                read back as the fragment
        """
        for recognizer in self._recognizers:
            token = recognizer.recognize(fragment)
            if token is None:
                continue
            if token.text != fragment:
                msg = f"produced {token!r} which does not read back as {fragment!r}"
                raise RecognizerError(recognizer.name, msg)
            return token
        return None

    def get(self, name: str) -> Recognizer | None:
        """Get recognizer by name, or None if not registered."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names in priority order."""
        return tuple(r.name for r in self._recognizers)

    @property
    def recognizers(self) -> tuple[Recognizer, ...]:
        return self._recognizers

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        return len(self._recognizers)


class RecognizerRegistryBuilder:
    """Mutable builder for RecognizerRegistry.

    Register recognizers in priority order, then call build() to create
    an immutable registry.

    """

    __slots__ = ("_recognizers", "_by_name")

    def __init__(self) -> None:
        self._recognizers: list[Recognizer] = []
        self._by_name: dict[str, Recognizer] = {}

    def register(self, recognizer: Recognizer) -> RecognizerRegistryBuilder:
        """Register a recognizer at the lowest priority so far.

        Args:
            recognizer: Object implementing the Recognizer protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If required attributes are missing
            ValueError: If the name is already registered
        """
        if not hasattr(recognizer, "name"):
            msg = f"Recognizer {type(recognizer).__name__} missing 'name' attribute"
            raise TypeError(msg)

        if not hasattr(recognizer, "token_type"):
            msg = f"Recognizer {type(recognizer).__name__} missing 'token_type' attribute"
            raise TypeError(msg)

        if recognizer.name in self._by_name:
            existing = self._by_name[recognizer.name]
            msg = f"Recognizer '{recognizer.name}' already registered by {type(existing).__name__}"
            raise ValueError(msg)

        self._by_name[recognizer.name] = recognizer
        self._recognizers.append(recognizer)
        return self

    def register_all(self, recognizers: list[Recognizer]) -> RecognizerRegistryBuilder:
        for recognizer in recognizers:
            self.register(recognizer)
        return self

    def build(self) -> RecognizerRegistry:
        return RecognizerRegistry(
            recognizers=tuple(self._recognizers),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        return len(self._recognizers)


def create_default_registry() -> RecognizerRegistry:
    """Create registry with the built-in recognizers.

    Priority order: URL, number, number+unit, ID.

    """
    return create_registry_with_defaults().build()


def create_registry_with_defaults() -> RecognizerRegistryBuilder:
    """Create a builder pre-loaded with the built-in recognizers.

    Use this to add custom recognizers after the defaults:

    Example:
        >>> builder = create_registry_with_defaults()
        >>> builder.register(CashtagRecognizer())
        >>> tok = Tokenizer(text, recognizers=builder.build())

    """
    from palabras.recognizers.builtins import (
        IdRecognizer,
        NumberRecognizer,
        NumberUnitRecognizer,
        UrlRecognizer,
    )

    return RecognizerRegistryBuilder().register_all(
        [
            UrlRecognizer(),
            NumberRecognizer(),
            NumberUnitRecognizer(),
            IdRecognizer(),
        ]
    )


# Registry with nothing in it: every fragment falls through to a word
EMPTY_REGISTRY = RecognizerRegistry(recognizers=(), by_name={})
