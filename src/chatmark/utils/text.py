"""Text helpers shared by the renderers."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters, including both quote kinds.

    Examples:
        >>> escape_html("<b>\\"a\\" & 'b'</b>")
        '&lt;b&gt;&quot;a&quot; &amp; &#x27;b&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
