"""URL recognizer.

Recognizes:
- scheme://anything (http, https, ftp, git+ssh, ...)
- www.host.tld and deeper paths
- mailto:user@host.tld

Trailing punctuation has already been split off by the lexer, so a URL at
the end of a sentence loses its final period (and a trailing slash).

Thread Safety:
Stateless. Safe for concurrent use.

"""

import re
from typing import ClassVar

from palabras.recognizers.protocol import PatternRecognizer
from palabras.tokens import TokenType

_URL_PATTERN = re.compile(
    r"""
    [a-z][a-z0-9+.\-]*://\S+            # scheme://...
    | www\.[^\s.]+(?:\.[^\s.]+)+\S*     # www.example.com/...
    | mailto:[^\s@]+@[^\s@]+\.[^\s@]+   # mailto:user@example.com
    """,
    re.VERBOSE | re.IGNORECASE,
)


class UrlRecognizer(PatternRecognizer):
    """Classify URL-shaped fragments as URL tokens."""

    name: ClassVar[str] = "url"
    token_type: ClassVar[TokenType] = TokenType.URL
    pattern: ClassVar[re.Pattern[str]] = _URL_PATTERN
