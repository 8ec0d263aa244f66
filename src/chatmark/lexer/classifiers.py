"""Block classifiers for the chatmark lexer.

Each classifier is a mixin providing one rule. A rule either returns a
LineToken for the line or None, and never mutates lexer state.
"""

import re

from chatmark.parsing.charsets import BULLET_MARKERS, QUOTE_PREFIX
from chatmark.tokens import LineKind, LineToken

# "-" or "*", at least one whitespace char, then at least one more char.
# The whitespace run backtracks so "-  " still yields a one-space item.
_BULLET_RE = re.compile(r"[*-]\s+(.+)")

# ASCII digits only; "١. item" is a plain line.
_NUMBERED_RE = re.compile(r"([0-9]+)\.\s+(.+)")


class QuoteClassifierMixin:
    """Mixin providing quote classification."""

    def _try_classify_quote(self, line: str, lineno: int) -> LineToken | None:
        """Classify ``> text`` lines.

        Only the exact two-character prefix counts: ">text" and " > text"
        are plain lines.
        """
        if not line.startswith(QUOTE_PREFIX):
            return None
        return LineToken(LineKind.QUOTE, line[len(QUOTE_PREFIX) :], lineno)


class ListClassifierMixin:
    """Mixin providing bullet and numbered item classification."""

    def _try_classify_bullet_item(self, line: str, lineno: int) -> LineToken | None:
        if not line or line[0] not in BULLET_MARKERS:
            return None
        match = _BULLET_RE.match(line)
        if match is None:
            return None
        return LineToken(LineKind.BULLET_ITEM, match.group(1), lineno)

    def _try_classify_numbered_item(self, line: str, lineno: int) -> LineToken | None:
        """Classify ``N. text`` lines, keeping N exactly as written."""
        if not line or not ("0" <= line[0] <= "9"):
            return None
        match = _NUMBERED_RE.match(line)
        if match is None:
            return None
        return LineToken(LineKind.NUMBERED_ITEM, match.group(2), lineno, number=match.group(1))
