"""Document serialization — JSON round-trip for chatmark nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed messages outside the process
- Shipping parsed messages to a client that renders them itself
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from chatmark import parse
    from chatmark.serialization import to_json, from_json

    doc = parse("1. *first*")
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from chatmark.errors import SerializationError
from chatmark.nodes import (
    Bold,
    BulletItem,
    CodeBlock,
    Document,
    InlineCode,
    Italic,
    Node,
    NumberedItem,
    Plain,
    Quote,
    Strikethrough,
    Text,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Quote,
        BulletItem,
        NumberedItem,
        Plain,
        Text,
        CodeBlock,
        InlineCode,
        Bold,
        Italic,
        Strikethrough,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Example:
        >>> to_dict(Bold(content="hi"))
        {'_type': 'Bold', 'content': 'hi'}

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            result[f.name] = [to_dict(child) for child in value]
        else:
            result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict produced by to_dict.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a field
            does not fit the node class.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if isinstance(raw, list):
            kwargs[f.name] = tuple(from_dict(item) for item in raw)
        else:
            kwargs[f.name] = raw

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise SerializationError(msg) from e


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string (sorted keys).

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the JSON is invalid or doesn't represent a
            Document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
