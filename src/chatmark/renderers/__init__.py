"""chatmark renderers.

Renderers map each node kind to presentation. The parser only emits kinds
and captured text; glyphs, styling and line breaks are chosen here.

Available Renderers:
- HtmlRenderer: Renders a document to an HTML fragment
- PlainRenderer: Renders a document to preview text (notifications, lists)

Thread Safety:
Renderers keep only immutable options. Each render() call builds its own
StringBuilder, so instances can be shared across threads.

"""

from chatmark.renderers.html import HtmlRenderer
from chatmark.renderers.plain import PlainRenderer
from chatmark.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "HtmlRenderer", "PlainRenderer"]
