"""DocumentRenderer protocol — stable interface for chatmark renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this
protocol. The built-in ``HtmlRenderer`` and ``PlainRenderer`` both do.

Example:
    from chatmark.renderers.protocol import DocumentRenderer

    def render_message(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from chatmark.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string. An empty document renders to ""."""
        ...
