"""Inline formatter: one line of text to a tuple of spans.

A single left-to-right scan. At every position the span kinds are tried
in a fixed precedence, and the first kind that matches wins:

1. Code block      ```code```   (lazy: closes at the first ``` after one char)
2. Inline code     `code`
3. Bold            *text*
4. Italic          _text_
5. Strikethrough   ~text~

Code kinds come first so backtick content is never read as emphasis.
Emphasis content may not contain its own delimiter or a newline; inline
code content may not contain a backtick. Empty spans do not exist: "**"
is literal text.

An opener without a closer is literal text and scanning resumes at the
next character. Once a span is consumed, scanning resumes right after its
closing delimiter, so a delimiter belongs to at most one span.

Complexity:
O(n). When the search for a closer finds none to the right, that
delimiter kind is marked exhausted and never searched for again on the
same line.

Thread Safety:
InlineFormatter holds only immutable configuration. Per-call state lives
in local variables, so one instance can be shared across threads.

"""

from collections.abc import Callable

from chatmark.config import get_parse_config
from chatmark.nodes import Bold, CodeBlock, InlineCode, Italic, Span, Strikethrough, Text
from chatmark.parsing.charsets import (
    BOLD_DELIMITER,
    CODE_BLOCK_FENCE,
    CODE_DELIMITER,
    INLINE_SPECIAL,
    ITALIC_DELIMITER,
    STRIKETHROUGH_DELIMITER,
)

# Emphasis delimiter -> span type, in precedence order
_EMPHASIS_SPANS: dict[str, type[Bold | Italic | Strikethrough]] = {
    BOLD_DELIMITER: Bold,
    ITALIC_DELIMITER: Italic,
    STRIKETHROUGH_DELIMITER: Strikethrough,
}


class InlineFormatter:
    """Tokenize a line of chat markup into spans.

    Usage:
            >>> InlineFormatter().format("hello *world*")
            (Text(content='hello '), Bold(content='world'))

    """

    __slots__ = ("_text_transformer",)

    def __init__(self, text_transformer: Callable[[str], str] | None = None) -> None:
        """Initialize formatter.

        Args:
            text_transformer: Optional callback applied to the content of
                every Text span. Delimited spans are never transformed.
        """
        self._text_transformer = text_transformer

    def format(self, text: str) -> tuple[Span, ...]:
        """Split ``text`` into spans covering it exactly once.

        Returns ``()`` for empty text and ``(Text(text),)`` when the text
        holds no complete span.
        """
        if not text:
            return ()

        spans: list[Span] = []
        spans_append = spans.append
        text_len = len(text)
        exhausted: set[str] = set()
        literal_start = 0
        pos = 0

        while pos < text_len:
            if text[pos] not in INLINE_SPECIAL:
                pos += 1
                continue

            result = self._match_at(text, pos, exhausted)
            if result is None:
                pos += 1
                continue

            span, end = result
            if pos > literal_start:
                spans_append(self._literal(text[literal_start:pos]))
            spans_append(span)
            pos = literal_start = end

        if literal_start < text_len:
            spans_append(self._literal(text[literal_start:]))

        return tuple(spans)

    def _literal(self, content: str) -> Text:
        if self._text_transformer is not None:
            content = self._text_transformer(content)
        return Text(content=content)

    def _match_at(self, text: str, pos: int, exhausted: set[str]) -> tuple[Span, int] | None:
        """Try every span kind at ``pos`` in precedence order.

        Returns:
            (span, end) where end is the index after the closing delimiter,
            or None when no span starts at pos.
        """
        char = text[pos]

        if char == CODE_DELIMITER:
            if text.startswith(CODE_BLOCK_FENCE, pos) and CODE_BLOCK_FENCE not in exhausted:
                fence_len = len(CODE_BLOCK_FENCE)
                # Content is at least one character long
                close = text.find(CODE_BLOCK_FENCE, pos + fence_len + 1)
                if close == -1:
                    exhausted.add(CODE_BLOCK_FENCE)
                else:
                    return CodeBlock(code=text[pos + fence_len : close]), close + fence_len

            close = self._find_closer(text, pos, CODE_DELIMITER, exhausted, newline_ok=True)
            if close == -1:
                return None
            return InlineCode(code=text[pos + 1 : close]), close + 1

        close = self._find_closer(text, pos, char, exhausted, newline_ok=False)
        if close == -1:
            return None
        return _EMPHASIS_SPANS[char](content=text[pos + 1 : close]), close + 1

    @staticmethod
    def _find_closer(
        text: str,
        pos: int,
        delim: str,
        exhausted: set[str],
        *,
        newline_ok: bool,
    ) -> int:
        """Return the index of the delimiter closing the one at ``pos``, or -1."""
        if delim in exhausted:
            return -1
        close = text.find(delim, pos + 1)
        if close == -1:
            exhausted.add(delim)
            return -1
        if close == pos + 1:
            return -1
        if not newline_ok and text.find("\n", pos + 1, close) != -1:
            return -1
        return close


def parse_inline(text: str) -> tuple[Span, ...]:
    """Format one line of text using the active ParseConfig.

    Example:
        >>> parse_inline("`*not bold*`")
        (InlineCode(code='*not bold*'),)
    """
    return InlineFormatter(get_parse_config().text_transformer).format(text)


__all__ = ["InlineFormatter", "parse_inline"]
