"""ID-like string recognizer.

An ID is a run of uppercase ASCII letters and digits, optionally joined
by ``-`` or ``_``, that contains at least one letter and at least one
digit or joiner: ``ISO-9001``, ``COVID-19``, ``A4``, ``MP3``, ``MAX_SIZE``.

All-caps words without digits or joiners (``NASA``) are left as words;
they are acronyms a lexicon may know about. Anything with a lowercase
letter (``Wi-Fi``) is a word too.

Thread Safety:
Stateless. Safe for concurrent use.

"""

import re
from typing import ClassVar

from palabras.recognizers.protocol import PatternRecognizer
from palabras.tokens import TokenType

_ID_PATTERN = re.compile(
    r"""
    (?=.*[A-Z])           # at least one letter
    (?=.*[0-9_\-])        # at least one digit or joiner
    [A-Z0-9]+(?:[\-_][A-Z0-9]+)*
    """,
    re.VERBOSE,
)


class IdRecognizer(PatternRecognizer):
    """Classify ID-like fragments as ID tokens."""

    name: ClassVar[str] = "id"
    token_type: ClassVar[TokenType] = TokenType.ID
    pattern: ClassVar[re.Pattern[str]] = _ID_PATTERN
