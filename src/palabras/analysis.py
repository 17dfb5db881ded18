"""Lexical analysis over a token stream: phrases and n-grams.

Phrases are maximal runs of plain, non-stopword words. Any other
non-space token (punctuation, formatting, numbers, URLs, IDs) and any
stopword closes the current phrase. N-grams are the contiguous word
windows inside each phrase.

All functions are lazy: they consume their input iterables on demand.

Example:
    >>> from palabras import Tokenizer
    >>> tok = Tokenizer("A series of phrases.")
    >>> phrases = iter_phrases(tok.iter_tokens(), lambda w: w.lower() in {"a", "of"})
    >>> list(phrases)
    [['series'], ['phrases']]
    >>> ngrams_of(["many", "more", "words"], min_n=2)
    ['many more', 'more words', 'many more words']

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from palabras.tokens import Token, TokenType


def iter_phrases(
    tokens: Iterable[Token],
    is_stopword: Callable[[str], bool],
) -> Iterator[list[str]]:
    """Segment a token stream into phrases.

    Args:
        tokens: Token stream (SPACE tokens are ignored)
        is_stopword: Predicate deciding whether a word breaks the phrase

    Yields:
        Non-empty lists of word strings, in stream order
    """
    phrase: list[str] = []
    for token in tokens:
        if token.type is TokenType.SPACE:
            continue
        if token.type is not TokenType.WORD or is_stopword(token.value):
            if phrase:
                yield phrase
                phrase = []
        else:
            phrase.append(token.value)
    if phrase:
        yield phrase


def ngrams_of(phrase: list[str], min_n: int = 0, max_n: int = 0) -> list[str]:
    """All contiguous word windows of a phrase, space-joined.

    Window size is the outer loop (smallest first) and start offset the
    inner loop.

    Args:
        phrase: Words of one phrase
        min_n: Smallest window (0 means 1)
        max_n: Largest window (0 means the phrase length)

    Returns:
        N-gram strings
    """
    length = len(phrase)
    start_n = min_n if min_n > 0 else 1
    end_n = max_n if max_n > 0 else length
    return [
        " ".join(phrase[i : i + n])
        for n in range(start_n, end_n + 1)
        for i in range(length - n + 1)
    ]


def iter_ngrams(
    phrases: Iterable[list[str]],
    min_n: int = 0,
    max_n: int = 0,
) -> Iterator[str]:
    """Yield the n-grams of each phrase in turn."""
    for phrase in phrases:
        yield from ngrams_of(phrase, min_n, max_n)


__all__ = ["iter_ngrams", "iter_phrases", "ngrams_of"]
