"""Inline parsing for chatmark.

Provides the inline formatter that turns one line of text into spans, and
the character sets shared with the lexer.
"""

from chatmark.parsing.inline import InlineFormatter, parse_inline

__all__ = ["InlineFormatter", "parse_inline"]
