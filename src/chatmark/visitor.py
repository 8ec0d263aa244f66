"""Document visitor and transformer for chatmark.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen documents.

Example — collect everything a user marked as code:

    class CodeCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.snippets: list[str] = []

        def visit_inline_code(self, node: InlineCode) -> None:
            self.snippets.append(node.code)

        def visit_code_block(self, node: CodeBlock) -> None:
            self.snippets.append(node.code)

    collector = CodeCollector()
    collector.visit(doc)

Example — drop strikethrough text:

    new_doc = transform(doc, lambda n: None if isinstance(n, Strikethrough) else n)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from chatmark.nodes import (
    Bold,
    BulletItem,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    Line,
    Node,
    NumberedItem,
    Plain,
    Quote,
    Strikethrough,
    Text,
)


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` override."""
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    # -- Line visitors ---------------------------------------------------------

    def visit_quote(self, node: Quote) -> T:
        return self.visit_default(node)

    def visit_bullet_item(self, node: BulletItem) -> T:
        return self.visit_default(node)

    def visit_numbered_item(self, node: NumberedItem) -> T:
        return self.visit_default(node)

    def visit_plain(self, node: Plain) -> T:
        return self.visit_default(node)

    # -- Span visitors ---------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_inline_code(self, node: InlineCode) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Quote():
                return self.visit_quote(node)
            case BulletItem():
                return self.visit_bullet_item(node)
            case NumberedItem():
                return self.visit_numbered_item(node)
            case Plain():
                return self.visit_plain(node)
            case Text():
                return self.visit_text(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case InlineCode():
                return self.visit_inline_code(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children) | Line(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Spans are leaves


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply ``fn`` to every node bottom-up, returning a new document.

    Children are transformed first, then the parent with its new children.
    Return None from ``fn`` to remove a node. The root Document cannot be
    removed; returning anything but a Document for it raises TypeError.

    The original document is untouched.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    match node:
        case Document(children=children) | Line(children=children):
            new_children = tuple(
                result for child in children if (result := _transform_node(child, fn)) is not None
            )
            if new_children != children:
                node = dataclasses.replace(node, children=new_children)
        case _:
            pass
    return fn(node)


__all__ = ["BaseVisitor", "transform"]
