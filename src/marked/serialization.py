"""AST serialization: JSON round-trip for Marked AST nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed notes next to their source
- The ``marked`` CLI's AST dump
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from marked import parse
    from marked.serialization import to_json, from_json

    doc = parse("Title\\n===\\n\\n- one\\n- two")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from marked.errors import SerializationError
from marked.location import SourceLocation
from marked.nodes import (
    Blockquote,
    CodeBlock,
    Document,
    Header,
    List,
    ListItem,
    ListStyle,
    Node,
    Paragraph,
    ThematicBreak,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Paragraph": Paragraph,
    "Header": Header,
    "ThematicBreak": ThematicBreak,
    "CodeBlock": CodeBlock,
    "Blockquote": Blockquote,
    "List": List,
    "ListItem": ListItem,
}

# Tuple-typed node fields, serialized as JSON arrays
_SEQUENCE_FIELDS = frozenset({"children", "items", "lines"})


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and SourceLocation objects.
    ``ListStyle`` values are stored by member name.

    Args:
        node: Any Marked AST node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "end_lineno": value.end_lineno,
            "source_file": value.source_file,
        }
    if isinstance(value, ListStyle):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Uses the ``_type`` discriminator to determine the node class.
    A missing ``location`` becomes ``SourceLocation.unknown()``.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed AST node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a field
            is missing or malformed.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized node, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {"location": SourceLocation.unknown()}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name in _SEQUENCE_FIELDS and not isinstance(value, list):
            msg = (
                f"Malformed {type_name} node: {f.name!r} must be a list, "
                f"got {type(value).__name__}"
            )
            raise SerializationError(msg)
        kwargs[f.name] = _deserialize_value(value, f.name)

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Malformed {type_name} node: {e}"
        raise SerializationError(msg) from e


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if field_name == "style":
        try:
            return ListStyle[value]
        except (KeyError, TypeError) as e:
            msg = f"Unknown list style: {value!r}"
            raise SerializationError(msg) from e
    if isinstance(value, dict):
        if value.get("_type") == "SourceLocation":
            return _deserialize_location(value)
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def _deserialize_location(value: dict[str, Any]) -> SourceLocation:
    try:
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            end_lineno=value.get("end_lineno"),
            source_file=value.get("source_file"),
        )
    except KeyError as e:
        msg = f"SourceLocation is missing {e}"
        raise SerializationError(msg) from e


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document AST to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document AST from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document AST node.

    Raises:
        SerializationError: If the text is not JSON or doesn't represent
            a Document.

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
