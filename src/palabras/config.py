"""ContextVar-based tokenizer configuration for palabras.

Provides context-local defaults using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, at construction; explicit
constructor arguments override it.

Usage:
    # Direct
    from palabras.config import set_tokenizer_config, reset_tokenizer_config
    from palabras.config import TokenizerConfig

    set_tokenizer_config(TokenizerConfig(splitter="markup"))
    try:
        tok = Tokenizer("<b>bold</b> text")
    finally:
        reset_tokenizer_config()

    # Or use the context manager
    with tokenizer_config_context(TokenizerConfig(min_ngram=2)):
        tok = Tokenizer(text)

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        splitter: Built-in splitter name ("vanilla" or "markup")
        recognizers_enabled: Classify numbers, units, URLs and IDs.
            When False, every non-punctuation fragment is a plain word.
        min_ngram: Default minimum n-gram size (0 = no minimum)
        max_ngram: Default maximum n-gram size (0 = no maximum)
        stopwords: Stopwords registered on every new tokenizer
        max_empty_batches: Consecutive empty reader batches tolerated
            before ReaderStallError is raised

    """

    splitter: str = "vanilla"
    recognizers_enabled: bool = True
    min_ngram: int = 0
    max_ngram: int = 0
    stopwords: frozenset[str] = field(default_factory=frozenset)
    max_empty_batches: int = 1000

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> TokenizerConfig:
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown
        keys are silently ignored. Stopword collections are frozen.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TokenizerConfig attribute names.

        Returns:
            New TokenizerConfig instance with values from dict.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "splitter": "markup",
            ...     "stopwords": ["a", "of"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.splitter
            'markup'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "stopwords" in filtered:
            filtered["stopwords"] = frozenset(filtered["stopwords"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get the active tokenizer configuration for this context."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for the current context."""
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to the default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: TokenizerConfig to use within the context.

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(splitter="markup")):
        ...     tok = Tokenizer("<i>x</i>")

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenizer_config_context",
]
