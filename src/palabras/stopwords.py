"""Stopword storage for phrase delineation.

Stopwords are words that carry little content (in English: articles,
pronouns, prepositions and the like). Phrase segmentation breaks on them.
Lookups are case-insensitive; words are stored case-folded.

Example:
    >>> stops = StopwordSet(["A", "of"])
    >>> "a" in stops, "OF" in stops, "series" in stops
    (True, True, False)

Thread Safety:
Not thread-safe for concurrent registration. Concurrent lookups are safe.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

# Stock English stopwords: articles, pronouns, prepositions, conjunctions
# and common auxiliaries. Opt-in; a tokenizer starts with no stopwords.
ENGLISH_STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "as", "at", "be", "because", "been", "before",
        "being", "below", "between", "both", "but", "by", "can", "could", "did",
        "do", "does", "doing", "down", "during", "each", "few", "for", "from",
        "further", "had", "has", "have", "having", "he", "her", "here", "hers",
        "herself", "him", "himself", "his", "how", "i", "if", "in", "into",
        "is", "it", "its", "itself", "just", "me", "might", "more", "most",
        "must", "my", "myself", "no", "nor", "not", "of", "off", "on", "once",
        "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own",
        "same", "she", "should", "so", "some", "such", "than", "that", "the",
        "their", "theirs", "them", "themselves", "then", "there", "these",
        "they", "this", "those", "through", "to", "too", "under", "until", "up",
        "very", "was", "we", "were", "what", "when", "where", "which", "while",
        "who", "whom", "why", "will", "with", "would", "you", "your", "yours",
        "yourself", "yourselves",
    }
)  # fmt: skip


class StopwordSet:
    """Case-insensitive set of stopwords."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self.add(*words)

    def add(self, *words: str) -> None:
        """Register words (case-folded)."""
        for word in words:
            if word is None:
                continue
            self._words.add(word.casefold())

    def discard(self, *words: str) -> None:
        for word in words:
            self._words.discard(word.casefold())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.casefold() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def frozen(self) -> frozenset[str]:
        """Snapshot of the registered (case-folded) words."""
        return frozenset(self._words)

    def __repr__(self) -> str:
        return f"StopwordSet({len(self._words)} words)"


__all__ = ["ENGLISH_STOPWORDS", "StopwordSet"]
