"""HTML renderer using StringBuilder pattern.

Renders a chatmark document to an HTML fragment for a message bubble:

- Plain lines render their spans directly
- Quotes render as ``<span class="chat-quote">``
- List items render as a marker span followed by a content span; bullets
  use the configured glyph, numbered items their verbatim number plus "."
- A line break separates consecutive lines (never leading or trailing)

All text is HTML-escaped.

Thread Safety:
The renderer holds only immutable options and builds a fresh StringBuilder
per render() call. One instance can be shared across threads.
"""

import logging

from chatmark.errors import RenderError
from chatmark.nodes import (
    Bold,
    BulletItem,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    Line,
    NumberedItem,
    Plain,
    Quote,
    Span,
    Strikethrough,
    Text,
)
from chatmark.stringbuilder import StringBuilder
from chatmark.utils.text import escape_html

logger = logging.getLogger(__name__)

DEFAULT_BULLET = "•"
DEFAULT_LINE_BREAK = "<br />"


class HtmlRenderer:
    """Render a document to HTML.

    Usage:
        >>> from chatmark import parse
        >>> HtmlRenderer().render(parse("hi *there*\\n- one"))
        'hi <strong>there</strong><br /><span class="chat-list-item"><span class="chat-marker">•</span><span>one</span></span>'

    """

    __slots__ = ("_bullet", "_line_break")

    def __init__(
        self,
        *,
        bullet: str = DEFAULT_BULLET,
        line_break: str = DEFAULT_LINE_BREAK,
    ) -> None:
        """Initialize renderer.

        Args:
            bullet: Glyph shown before bullet items (escaped on output)
            line_break: Raw HTML inserted between consecutive lines
        """
        self._bullet = bullet
        self._line_break = line_break

    def render(self, node: Document) -> str:
        """Render document to HTML string.

        Raises:
            RenderError: If the document holds a node this renderer does
                not know.
        """
        sb = StringBuilder()
        for index, line in enumerate(node.children):
            if index:
                sb.append(self._line_break)
            self._render_line(line, sb)
        return sb.build()

    def _render_line(self, line: Line, sb: StringBuilder) -> None:
        match line:
            case Quote():
                sb.append('<span class="chat-quote">')
                self._render_spans(line.children, sb)
                sb.append("</span>")
            case BulletItem():
                self._render_item(escape_html(self._bullet), line, sb)
            case NumberedItem():
                self._render_item(f"{escape_html(line.number)}.", line, sb)
            case Plain():
                self._render_spans(line.children, sb)
            case _:
                logger.debug("Unknown line node %r", line)
                raise RenderError(line, type(self).__name__)

    def _render_item(self, marker: str, line: Line, sb: StringBuilder) -> None:
        sb.append('<span class="chat-list-item"><span class="chat-marker">')
        sb.append(marker)
        sb.append("</span><span>")
        self._render_spans(line.children, sb)
        sb.append("</span></span>")

    def _render_spans(self, spans: tuple[Span, ...], sb: StringBuilder) -> None:
        for span in spans:
            self._render_span(span, sb)

    def _render_span(self, span: Span, sb: StringBuilder) -> None:
        match span:
            case Text():
                sb.append(escape_html(span.content))
            case CodeBlock():
                sb.append('<pre class="chat-code-block">').append(escape_html(span.code))
                sb.append("</pre>")
            case InlineCode():
                sb.append("<code>").append(escape_html(span.code)).append("</code>")
            case Bold():
                sb.append("<strong>").append(escape_html(span.content)).append("</strong>")
            case Italic():
                sb.append("<em>").append(escape_html(span.content)).append("</em>")
            case Strikethrough():
                sb.append("<del>").append(escape_html(span.content)).append("</del>")
            case _:
                logger.debug("Unknown span node %r", span)
                raise RenderError(span, type(self).__name__)


__all__ = ["DEFAULT_BULLET", "DEFAULT_LINE_BREAK", "HtmlRenderer"]
