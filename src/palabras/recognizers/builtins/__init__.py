"""Built-in recognizers.

Provides the stock classifiers for word-like tokens, listed in the
priority order the default registry uses:
- url: URLs
- number: plain numbers
- number_unit: numbers with units
- id: ID-like strings

"""

from palabras.recognizers.builtins.ident import IdRecognizer
from palabras.recognizers.builtins.number import NumberRecognizer, NumberUnitRecognizer
from palabras.recognizers.builtins.url import UrlRecognizer

__all__ = [
    "UrlRecognizer",
    "NumberRecognizer",
    "NumberUnitRecognizer",
    "IdRecognizer",
]
