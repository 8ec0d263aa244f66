"""Extract plain text from chatmark nodes.

The extracted text is the message with every block prefix and every
delimiter removed, and nothing else: lines are joined with ``\\n`` exactly
where the source was split.

Example:
    >>> from chatmark import parse, extract_text
    >>> extract_text(parse("> hello *world*\\n- ~old~"))
    'hello world\\nold'
"""

from chatmark.nodes import (
    Bold,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    Line,
    Node,
    Strikethrough,
    Text,
)


def extract_text(node: Node) -> str:
    """Extract plain text from any node.

    Args:
        node: A Document, Line or Span.

    Returns:
        Concatenated literal text of the node and its descendants.

    """
    match node:
        case Document():
            return "\n".join(extract_text(line) for line in node.children)
        case Line():
            return "".join(extract_text(span) for span in node.children)
        case Text() | Bold() | Italic() | Strikethrough():
            return node.content
        case CodeBlock() | InlineCode():
            return node.code
        case _:
            return ""


__all__ = ["extract_text"]
