"""Typed document nodes for chatmark.

All nodes are frozen dataclasses with slots for:
- Immutability: a parsed message can be cached and shared across threads
- Value equality: two parses of the same text compare equal
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Document
├── Line (one per input line)
│   ├── Quote
│   ├── BulletItem
│   ├── NumberedItem
│   └── Plain
└── Span (inline fragments of a line)
    ├── Text
    ├── CodeBlock
    ├── InlineCode
    ├── Bold
    ├── Italic
    └── Strikethrough

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""


# =============================================================================
# Spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class Span(Node):
    """Base class for inline fragments.

    Every span holds exactly one formatting kind. Captured text never
    includes the delimiters and is never parsed further.

    """


@dataclass(frozen=True, slots=True)
class Text(Span):
    """Literal text with no formatting."""

    content: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Span):
    """Code delimited by triple backticks.

    Markup: ```code```
    HTML: <pre>code</pre>

    """

    code: str


@dataclass(frozen=True, slots=True)
class InlineCode(Span):
    """Code delimited by single backticks.

    Markup: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class Bold(Span):
    """Markup: *text*  HTML: <strong>text</strong>"""

    content: str


@dataclass(frozen=True, slots=True)
class Italic(Span):
    """Markup: _text_  HTML: <em>text</em>"""

    content: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Span):
    """Markup: ~text~  HTML: <del>text</del>"""

    content: str


# =============================================================================
# Lines
# =============================================================================


@dataclass(frozen=True, slots=True)
class Line(Node):
    """Base class for classified lines.

    ``children`` is the inline content of the line after its block prefix
    (if any) has been removed.

    """

    children: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class Quote(Line):
    """Quoted line.

    Markup: > text

    """


@dataclass(frozen=True, slots=True)
class BulletItem(Line):
    """Bullet list item. The marker character is not preserved.

    Markup: * item  or  - item

    """


@dataclass(frozen=True, slots=True)
class NumberedItem(Line):
    """Numbered list item.

    Markup: 1. item

    The number is kept verbatim as written: never renumbered, never
    converted to int (so "007" stays "007").

    """

    number: str = ""


@dataclass(frozen=True, slots=True)
class Plain(Line):
    """Any line without a block marker, including empty lines."""


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the classified lines of one message, in input order.

    An empty message parses to a Document with no lines. Such a document
    is falsy and renders to the empty string.

    """

    children: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.children)


__all__ = [
    "Bold",
    "BulletItem",
    "CodeBlock",
    "Document",
    "InlineCode",
    "Italic",
    "Line",
    "Node",
    "NumberedItem",
    "Plain",
    "Quote",
    "Span",
    "Strikethrough",
    "Text",
]
