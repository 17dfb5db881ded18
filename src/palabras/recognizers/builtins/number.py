"""Number and number+unit recognizers.

Numbers are digits with optional thousands separators and an optional
decimal part: ``42``, ``1,000``, ``3.14``, ``+7``. A leading ASCII hyphen
is punctuation and is split off before recognition, so ``-5`` arrives
here as ``5``.

Number+unit is a number immediately followed by an alphabetic unit,
optionally with a ``/unit`` denominator or a degree sign: ``10kg``,
``3.5GHz``, ``60km/h``, ``21°C``. English ordinals (``1st``, ``22nd``)
are not units and stay plain words.

Thread Safety:
Stateless. Safe for concurrent use.

"""

import re
from typing import ClassVar

from palabras.recognizers.protocol import PatternRecognizer
from palabras.tokens import Token, TokenType

# U+2212 MINUS SIGN is a math symbol, not punctuation, so it survives splitting
_NUMBER = r"[+−]?(?:\d{1,3}(?:,\d{3})+|\d+)(?:[.,]\d+)?"

_UNIT = r"[^\W\d_]+(?:/[^\W\d_]+)?|°[CFK]?"

_ORDINAL_SUFFIXES = frozenset({"st", "nd", "rd", "th"})


class NumberRecognizer(PatternRecognizer):
    """Classify plain numeric fragments as NUMBER tokens."""

    name: ClassVar[str] = "number"
    token_type: ClassVar[TokenType] = TokenType.NUMBER
    pattern: ClassVar[re.Pattern[str]] = re.compile(_NUMBER)


class NumberUnitRecognizer(PatternRecognizer):
    """Classify number-plus-unit fragments as NUMBER_UNIT tokens.

    The token value is the number and ``unit`` carries the suffix.

    """

    name: ClassVar[str] = "number_unit"
    token_type: ClassVar[TokenType] = TokenType.NUMBER_UNIT
    pattern: ClassVar[re.Pattern[str]] = re.compile(
        rf"(?P<number>{_NUMBER})(?P<unit>{_UNIT})"
    )

    def recognize(self, fragment: str) -> Token | None:
        match = self.pattern.fullmatch(fragment)
        if match is None:
            return None
        unit = match.group("unit")
        if unit.lower() in _ORDINAL_SUFFIXES:
            return None
        return Token(self.token_type, match.group("number"), unit)
