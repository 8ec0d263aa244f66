"""Plain-text renderer for message previews.

Used where markup cannot be shown (notification bodies, conversation list
snippets). Delimiters disappear; block kinds stay recognisable:

    > quoted      ->  > quoted
    - item        ->  • item
    1. item       ->  1. item

Example:
    >>> from chatmark import parse, render_plain
    >>> render_plain(parse("*Order* shipped\\n- box 1"))
    'Order shipped\\n• box 1'
"""

from chatmark.errors import RenderError
from chatmark.nodes import BulletItem, Document, Line, NumberedItem, Plain, Quote
from chatmark.text import extract_text


class PlainRenderer:
    """Render a document to plain text, one output line per line node."""

    __slots__ = ("_bullet", "_quote_prefix")

    def __init__(self, *, bullet: str = "•", quote_prefix: str = "> ") -> None:
        self._bullet = bullet
        self._quote_prefix = quote_prefix

    def render(self, node: Document) -> str:
        """Render document to plain text."""
        return "\n".join(self._render_line(line) for line in node.children)

    def _render_line(self, line: Line) -> str:
        text = extract_text(line)
        match line:
            case Quote():
                return f"{self._quote_prefix}{text}"
            case BulletItem():
                return f"{self._bullet} {text}"
            case NumberedItem():
                return f"{line.number}. {text}"
            case Plain():
                return text
            case _:
                raise RenderError(line, type(self).__name__)


def render_plain(doc: Document, *, bullet: str = "•") -> str:
    """Render document to plain preview text.

    Args:
        doc: Document to render.
        bullet: Glyph used for bullet items.

    Returns:
        Text with markup removed and lines joined by ``\\n``.
    """
    return PlainRenderer(bullet=bullet).render(doc)


__all__ = ["PlainRenderer", "render_plain"]
