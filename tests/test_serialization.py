"""Tests for chatmark.serialization — JSON round-trip."""

import json

import pytest

from chatmark import parse
from chatmark.errors import SerializationError
from chatmark.nodes import (
    Bold,
    BulletItem,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    NumberedItem,
    Plain,
    Quote,
    Strikethrough,
    Text,
)
from chatmark.serialization import from_dict, from_json, to_dict, to_json


class TestRoundTrip:
    """Parsed documents survive serialization unchanged."""

    def test_every_node_kind(self) -> None:
        doc = Document(
            children=(
                Quote(children=(Text(content="q "), Bold(content="b"))),
                BulletItem(children=(Italic(content="i"),)),
                NumberedItem(children=(Strikethrough(content="s"),), number="09"),
                Plain(children=(InlineCode(code="c"), CodeBlock(code="cb"))),
                Plain(children=()),
            )
        )
        assert from_dict(to_dict(doc)) == doc
        assert from_json(to_json(doc)) == doc

    def test_parsed_message(self) -> None:
        doc = parse("> *hi*\n1. `x`\n\n- ~y~ _z_")
        assert from_json(to_json(doc, indent=2)) == doc

    def test_empty_document(self) -> None:
        assert from_json(to_json(Document())) == Document()


class TestFormat:
    """Shape of the serialized output."""

    def test_type_discriminator(self) -> None:
        assert to_dict(Bold(content="x")) == {"_type": "Bold", "content": "x"}

    def test_numbered_item_fields(self) -> None:
        data = to_dict(NumberedItem(children=(), number="3"))
        assert data == {"_type": "NumberedItem", "children": [], "number": "3"}

    def test_json_keys_sorted(self) -> None:
        raw = json.loads(to_json(parse("*a*")))
        assert list(raw) == sorted(raw)

    def test_non_ascii_kept(self) -> None:
        assert "olá" in to_json(parse("olá"))


class TestErrors:
    """Malformed input raises SerializationError (a ValueError)."""

    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown node type"):
            from_dict({"_type": "Heading"})

    def test_bad_fields(self) -> None:
        with pytest.raises(SerializationError, match="Invalid fields"):
            from_dict({"_type": "Bold"})

    def test_root_must_be_document(self) -> None:
        with pytest.raises(SerializationError, match="Expected Document"):
            from_json('{"_type": "Text", "content": "x"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError, match="Invalid JSON"):
            from_json("{not json")

    def test_non_dict(self) -> None:
        with pytest.raises(SerializationError):
            from_dict(["Bold"])  # type: ignore[arg-type]
