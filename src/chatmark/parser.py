"""Two-pass parser producing a typed document.

Pass 1 (Lexer) classifies every line; pass 2 (InlineFormatter) turns the
text left after removing the block prefix into spans. The passes never
interleave: inline markup cannot change how a line is classified, and a
block prefix is never seen by the inline formatter.

Thread Safety:
- Parser produces immutable nodes (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share documents across threads

"""

from __future__ import annotations

from chatmark.config import get_parse_config
from chatmark.lexer import Lexer
from chatmark.nodes import BulletItem, Line, NumberedItem, Plain, Quote
from chatmark.parsing.inline import InlineFormatter
from chatmark.tokens import LineKind, LineToken
from chatmark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Parser for chat markup.

    Usage:
            >>> Parser("> hello *world*").parse()
            (Quote(children=(Text(content='hello '), Bold(content='world'))),)

    Thread Safety:
        Parser instances are single-use. Create one per parse operation.
        Configuration is read from ContextVar when the parser is created.

    """

    __slots__ = ("_source", "_formatter")

    def __init__(self, source: str) -> None:
        self._source = source
        self._formatter = InlineFormatter(get_parse_config().text_transformer)

    def parse(self) -> tuple[Line, ...]:
        """Parse the source into one Line per input line."""
        lines = tuple(self._build_line(token) for token in Lexer(self._source).tokenize())
        logger.debug("Parsed %d chars into %d lines", len(self._source), len(lines))
        return lines

    def _build_line(self, token: LineToken) -> Line:
        children = self._formatter.format(token.value)
        match token.kind:
            case LineKind.QUOTE:
                return Quote(children=children)
            case LineKind.BULLET_ITEM:
                return BulletItem(children=children)
            case LineKind.NUMBERED_ITEM:
                return NumberedItem(children=children, number=token.number or "")
            case _:
                return Plain(children=children)


__all__ = ["Parser"]
