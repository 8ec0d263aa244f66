"""Line lexer for the chatmark parser.

Splits a message into lines and classifies each one. Classification is
per line: there is no list or quote grouping across lines.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, classify_line
├── core.py              # Lexer class (line splitting + dispatch)
└── classifiers.py       # Quote and list classification mixins

Usage:
    >>> from chatmark.lexer import Lexer
    >>> for token in Lexer("> hi\\n- item").tokenize():
    ...     print(token)
    LineToken(QUOTE, 'hi', line 1)
    LineToken(BULLET_ITEM, 'item', line 2)

"""

from chatmark.lexer.core import Lexer, classify_line

__all__ = ["Lexer", "classify_line"]
