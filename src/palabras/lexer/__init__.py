"""Incremental, pull-based lexer for palabras.

This package provides the buffer-driven token stream at the core of the
tokenizer. Every pull classifies one fragment; leftovers from punctuation
splitting go back to the head of the buffer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + refill + stream)
└── classifiers/         # Fragment classification mixins
    ├── whitespace.py    # SPACE runs
    ├── punctuation.py   # Leading/trailing punctuation splitting
    └── special.py       # Recognizer registry dispatch

Usage:
    >>> from palabras.lexer import Lexer
    >>> lexer = Lexer()
    >>> lexer.buffer("a  b")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(WORD, 'a')
Token(SPACE, '  ')
Token(WORD, 'b')

"""

from palabras.lexer.core import Lexer

__all__ = ["Lexer"]
