"""Error-path and odd input tests.

Tokenization itself never raises on strange text; the failures that do
exist are misconfiguration (caught at construction) and misbehaving
collaborators (readers that stall, recognizers that lose text).
"""

from typing import ClassVar

import pytest

from palabras import Tokenizer, TokenizerConfig, tokenize
from palabras.errors import (
    ConfigurationError,
    PalabrasError,
    ReaderStallError,
    RecognizerError,
)
from palabras.recognizers import RecognizerRegistryBuilder
from palabras.tokens import Token, TokenType

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestErrorFormatting:
    def test_configuration_error_with_kind(self) -> None:
        err = ConfigurationError("Can't understand tokenizer input", kind="int")
        assert str(err) == "Can't understand tokenizer input (got int)"
        assert err.message == "Can't understand tokenizer input"
        assert err.kind == "int"

    def test_configuration_error_without_kind(self) -> None:
        err = ConfigurationError("bad splitter")
        assert str(err) == "bad splitter"
        assert err.kind is None

    def test_reader_stall_error(self) -> None:
        err = ReaderStallError(12)
        assert err.attempts == 12
        assert "12 consecutive empty batches" in str(err)

    def test_recognizer_error(self) -> None:
        err = RecognizerError("units", "broke")
        assert str(err) == "Recognizer 'units': broke"

    @pytest.mark.parametrize("cls", [ConfigurationError, ReaderStallError, RecognizerError])
    def test_hierarchy(self, cls: type) -> None:
        assert issubclass(cls, PalabrasError)


# =========================================================================
# Construction-time failures
# =========================================================================


class TestConstructionFailures:
    @pytest.mark.parametrize("source", [42, 1.5, object(), ["a list"], b"bytes"])
    def test_unknown_source_fails_fast(self, source: object) -> None:
        with pytest.raises(ConfigurationError):
            Tokenizer(source)

    def test_document_without_usable_tokens(self) -> None:
        class Broken:
            def tokens(self) -> None:
                return None

        with pytest.raises(ConfigurationError, match="tokens"):
            Tokenizer(Broken())

    def test_unknown_splitter_in_config(self) -> None:
        with pytest.raises(ConfigurationError, match="Available: markup, vanilla"):
            Tokenizer("x", config=TokenizerConfig(splitter="html"))

    def test_non_callable_tokens_attribute(self) -> None:
        class NotADocument:
            tokens = ["a", "b"]

        with pytest.raises(ConfigurationError):
            Tokenizer(NotADocument())


# =========================================================================
# Collaborator failures during iteration
# =========================================================================


class TestCollaboratorFailures:
    def test_stalling_reader(self) -> None:
        tok = Tokenizer(lambda: [], config=TokenizerConfig(max_empty_batches=10))
        with pytest.raises(ReaderStallError):
            tok.tokens()

    def test_reader_exception_propagates(self) -> None:
        def reader() -> str:
            raise OSError("disk gone")

        tok = Tokenizer(reader)
        with pytest.raises(OSError, match="disk gone"):
            tok.token()

    def test_lossy_recognizer(self) -> None:
        class Upper:
            name: ClassVar[str] = "upper"
            token_type: ClassVar[TokenType] = TokenType.WORD

            def recognize(self, fragment: str) -> Token | None:
                return Token(TokenType.WORD, fragment.upper())

        registry = RecognizerRegistryBuilder().register(Upper()).build()
        with pytest.raises(RecognizerError, match="upper"):
            Tokenizer("quiet", recognizers=registry).tokens()

    def test_bad_batch_item(self) -> None:
        tok = Tokenizer(iter([["ok", 3]]))
        with pytest.raises(TypeError, match="int"):
            tok.tokens()


# =========================================================================
# Odd input: graceful degradation
# =========================================================================


class TestOddInput:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            " ",
            "\n\n\n",
            "!!!",
            "—",
            "​",
            "\x00",
            "a" * 10_000,
            "<unterminated",
            "&amp",
            "1,2,3,4",
            "http://",
            "°°°",
        ],
    )
    def test_never_raises_and_rebuilds(self, text: str) -> None:
        tokens = tokenize(text)
        assert "".join(t.text for t in tokens) == text

    def test_empty_string_has_no_tokens(self) -> None:
        assert tokenize("") == []

    def test_unterminated_markup_stays_text(self) -> None:
        tokens = tokenize("a <b", splitter="markup")
        assert all(t.type is not TokenType.FORMAT for t in tokens)
        assert "".join(t.text for t in tokens) == "a <b"

    def test_none_inputs_ignored(self) -> None:
        tok = Tokenizer()
        tok.buffer(None, "x", None)
        assert [t.value for t in tok.tokens()] == ["x"]
