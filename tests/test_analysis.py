"""Tests for phrase and n-gram extraction."""

from hypothesis import given, settings
from hypothesis import strategies as st

from palabras.analysis import iter_ngrams, iter_phrases, ngrams_of
from palabras.tokens import fmt, number, punct, space, word


def _never(_: str) -> bool:
    return False


class TestIterPhrases:
    def test_spaces_ignored(self) -> None:
        tokens = [word("a"), space(" "), word("b")]
        assert list(iter_phrases(tokens, _never)) == [["a", "b"]]

    def test_typed_tokens_break(self) -> None:
        tokens = [word("a"), punct(","), word("b"), fmt("<br>"), word("c"), number("1"), word("d")]
        assert list(iter_phrases(tokens, _never)) == [["a"], ["b"], ["c"], ["d"]]

    def test_stopword_predicate_breaks(self) -> None:
        tokens = [word("x"), word("and"), word("y")]
        assert list(iter_phrases(tokens, lambda w: w == "and")) == [["x"], ["y"]]

    def test_no_empty_phrases(self) -> None:
        tokens = [punct("("), punct(")"), word("the")]
        assert list(iter_phrases(tokens, lambda w: w == "the")) == []

    def test_lazy(self) -> None:
        def tokens():  # type: ignore[no-untyped-def]
            yield word("first")
            yield punct(".")
            raise AssertionError("consumed too far")

        phrases = iter_phrases(tokens(), _never)
        assert next(phrases) == ["first"]


class TestNgramsOf:
    def test_ordering(self) -> None:
        assert ngrams_of(["a", "b", "c"]) == ["a", "b", "c", "a b", "b c", "a b c"]

    def test_min(self) -> None:
        assert ngrams_of(["a", "b", "c"], min_n=2) == ["a b", "b c", "a b c"]

    def test_max(self) -> None:
        assert ngrams_of(["a", "b", "c"], max_n=2) == ["a", "b", "c", "a b", "b c"]

    def test_window_larger_than_phrase(self) -> None:
        assert ngrams_of(["a", "b"], min_n=3) == []

    def test_max_beyond_length(self) -> None:
        assert ngrams_of(["a"], max_n=5) == ["a"]

    def test_empty_phrase(self) -> None:
        assert ngrams_of([]) == []

    @given(st.lists(st.sampled_from(["x", "y", "z"]), min_size=1, max_size=12))
    @settings(max_examples=100)
    def test_count_is_triangular(self, phrase: list[str]) -> None:
        n = len(phrase)
        assert len(ngrams_of(phrase)) == n * (n + 1) // 2


class TestIterNgrams:
    def test_phrases_in_order(self) -> None:
        phrases = [["a", "b"], ["c"]]
        assert list(iter_ngrams(phrases)) == ["a", "b", "a b", "c"]

    def test_bounds_forwarded(self) -> None:
        phrases = [["a", "b"], ["c", "d", "e"]]
        assert list(iter_ngrams(phrases, 2, 2)) == ["a b", "c d", "d e"]
