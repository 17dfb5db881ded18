"""Tests for ContextVar-based tokenizer configuration.

Validates thread isolation, context manager behavior, and that a
Tokenizer reads the active config once at construction.
"""

from threading import Thread

import pytest

from palabras import (
    Tokenizer,
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from palabras.tokens import TokenType


class TestTokenizerConfigDataclass:
    """Test TokenizerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = TokenizerConfig()
        assert config.splitter == "vanilla"
        assert config.recognizers_enabled is True
        assert config.min_ngram == 0
        assert config.max_ngram == 0
        assert config.stopwords == frozenset()
        assert config.max_empty_batches == 1000

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = TokenizerConfig()
        with pytest.raises(AttributeError):
            config.splitter = "markup"  # type: ignore[misc]


class TestFromDict:
    def test_known_keys(self) -> None:
        config = TokenizerConfig.from_dict({"splitter": "markup", "max_ngram": 3})
        assert config.splitter == "markup"
        assert config.max_ngram == 3

    def test_unknown_keys_ignored(self) -> None:
        config = TokenizerConfig.from_dict({"unknown_key": True, "min_ngram": 2})
        assert config.min_ngram == 2
        assert not hasattr(config, "unknown_key")

    def test_stopwords_frozen(self) -> None:
        config = TokenizerConfig.from_dict({"stopwords": ["a", "of", "a"]})
        assert config.stopwords == frozenset({"a", "of"})

    def test_empty_dict_is_default(self) -> None:
        assert TokenizerConfig.from_dict({}) == TokenizerConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def setup_method(self) -> None:
        reset_tokenizer_config()

    def teardown_method(self) -> None:
        reset_tokenizer_config()

    def test_default(self) -> None:
        assert get_tokenizer_config() == TokenizerConfig()

    def test_set_and_get(self) -> None:
        config = TokenizerConfig(splitter="markup")
        set_tokenizer_config(config)
        assert get_tokenizer_config() is config

    def test_reset(self) -> None:
        set_tokenizer_config(TokenizerConfig(min_ngram=4))
        reset_tokenizer_config()
        assert get_tokenizer_config().min_ngram == 0

    def test_tokenizer_uses_active_config(self) -> None:
        set_tokenizer_config(TokenizerConfig(recognizers_enabled=False))
        assert Tokenizer("42").tokens()[0].type is TokenType.WORD

    def test_config_read_at_construction(self) -> None:
        tok = Tokenizer("42")
        set_tokenizer_config(TokenizerConfig(recognizers_enabled=False))
        assert tok.tokens()[0].type is TokenType.NUMBER


class TestContextManager:
    def test_applies_inside_block(self) -> None:
        with tokenizer_config_context(TokenizerConfig(splitter="markup")):
            tokens = Tokenizer("<b>x</b>").tokens()
        assert tokens[0].type is TokenType.FORMAT

    def test_restores_previous(self) -> None:
        before = get_tokenizer_config()
        with tokenizer_config_context(TokenizerConfig(max_ngram=2)):
            assert get_tokenizer_config().max_ngram == 2
        assert get_tokenizer_config() is before

    def test_restores_on_exception(self) -> None:
        before = get_tokenizer_config()
        with pytest.raises(RuntimeError), tokenizer_config_context(TokenizerConfig(min_ngram=1)):
            raise RuntimeError("boom")
        assert get_tokenizer_config() is before

    def test_nested(self) -> None:
        with tokenizer_config_context(TokenizerConfig(min_ngram=1)):
            with tokenizer_config_context(TokenizerConfig(min_ngram=2)):
                assert get_tokenizer_config().min_ngram == 2
            assert get_tokenizer_config().min_ngram == 1


class TestThreadIsolation:
    def test_threads_see_default(self) -> None:
        results: list[TokenizerConfig] = []

        def worker() -> None:
            results.append(get_tokenizer_config())

        with tokenizer_config_context(TokenizerConfig(splitter="markup")):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert results == [TokenizerConfig()]

    def test_concurrent_configs_independent(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str, splitter: str) -> None:
            with tokenizer_config_context(TokenizerConfig(splitter=splitter)):
                tokens = Tokenizer("<i>x</i>").tokens()
                results[name] = tokens[0].type.name

        threads = [
            Thread(target=worker, args=("vanilla", "vanilla")),
            Thread(target=worker, args=("markup", "markup")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"vanilla": "WORD", "markup": "FORMAT"}
