"""Line lexer with fixed-order classification.

Splits the source on ``\\n`` and classifies every segment independently.
Rules are tried in a fixed order and the first match wins:

1. Quote          ``> text``
2. Bullet item    ``* text`` / ``- text``
3. Numbered item  ``1. text``
4. Plain          everything else

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from chatmark.lexer.classifiers import ListClassifierMixin, QuoteClassifierMixin
from chatmark.tokens import LineKind, LineToken


class Lexer(QuoteClassifierMixin, ListClassifierMixin):
    """Line lexer producing one LineToken per input line.

    Consecutive separators are not collapsed: "a\\n\\nb" yields three
    tokens, the middle one an empty PLAIN line. An empty source yields no
    tokens at all.

    Usage:
            >>> tokens = list(Lexer("1. first\\n2. second").tokenize())
            >>> [t.number for t in tokens]
            ['1', '2']

    """

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source = source

    def tokenize(self) -> Iterator[LineToken]:
        """Yield classified lines in source order."""
        if not self._source:
            return
        for lineno, line in enumerate(self._source.split("\n"), start=1):
            yield self._classify(line, lineno)

    def _classify(self, line: str, lineno: int) -> LineToken:
        token = self._try_classify_quote(line, lineno)
        if token is not None:
            return token
        token = self._try_classify_bullet_item(line, lineno)
        if token is not None:
            return token
        token = self._try_classify_numbered_item(line, lineno)
        if token is not None:
            return token
        return LineToken(LineKind.PLAIN, line, lineno)


def classify_line(line: str, lineno: int = 1) -> LineToken:
    """Classify a single line (which must not contain ``\\n``).

    Example:
        >>> classify_line("- milk").kind
        <LineKind.BULLET_ITEM: 2>
    """
    return Lexer(line)._classify(line, lineno)
