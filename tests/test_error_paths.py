"""Error-path and malformed input tests.

The parser never raises; errors only come from renderers handed foreign
nodes and from the deserializer.
"""

from dataclasses import dataclass

import pytest

from chatmark import parse, render, render_plain
from chatmark.errors import ChatmarkError, RenderError, SerializationError
from chatmark.nodes import Document, Line, Plain, Span
from chatmark.renderers.html import HtmlRenderer


@dataclass(frozen=True, slots=True)
class Mention(Span):
    """A span type the built-in renderers don't know."""

    user: str


@dataclass(frozen=True, slots=True)
class Heading(Line):
    """A line type the built-in renderers don't know."""


class TestParserIsTotal:
    """Malformed markup degrades to text."""

    @pytest.mark.parametrize(
        "source",
        ["*", "_", "~", "`", "```", "> ", "- ", "1.", "*_~`", "\n\n\n", "\x00", "\r\n", "🙂 *ok*"],
    )
    def test_never_raises(self, source: str) -> None:
        doc = parse(source)
        assert isinstance(doc, Document)
        render(doc)


class TestRenderError:
    """Renderers reject unknown node types."""

    def test_unknown_span(self) -> None:
        doc = Document(children=(Plain(children=(Mention(user="ana"),)),))
        with pytest.raises(RenderError, match="Mention"):
            HtmlRenderer().render(doc)

    def test_unknown_line_html(self) -> None:
        doc = Document(children=(Heading(children=()),))
        with pytest.raises(RenderError, match="HtmlRenderer cannot render Heading"):
            render(doc)

    def test_unknown_line_plain(self) -> None:
        doc = Document(children=(Heading(children=()),))
        with pytest.raises(RenderError, match="PlainRenderer"):
            render_plain(doc)

    def test_error_attributes(self) -> None:
        node = Mention(user="x")
        err = RenderError(node, "HtmlRenderer")
        assert err.node is node
        assert err.renderer == "HtmlRenderer"


class TestHierarchy:
    """All errors share a base class."""

    def test_render_error_is_chatmark_error(self) -> None:
        assert issubclass(RenderError, ChatmarkError)

    def test_serialization_error_is_value_error(self) -> None:
        assert issubclass(SerializationError, ChatmarkError)
        assert issubclass(SerializationError, ValueError)
