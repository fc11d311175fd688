"""Document serialization: JSON round-trip for Pliegue documents.

Converts document trees to/from JSON-compatible dicts. Useful for:
- Caching documents built from expensive ASTs
- Shipping a layout to another process to render at a different width
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from pliegue import group, text
    from pliegue.serialization import to_json, from_json

    doc = group(text("hello"))
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from pliegue.builders import break_with, group, nest, text
from pliegue.errors import DocumentError, SerializationError
from pliegue.nodes import NIL, Break, Cons, Doc, Group, Nest, Nil, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Nil": Nil,
    "Text": Text,
    "Break": Break,
    "Cons": Cons,
    "Nest": Nest,
    "Group": Group,
}


def to_dict(doc: Doc) -> dict[str, Any]:
    """Convert a document to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Child nodes are converted with an explicit stack, so depth is not
    limited by the interpreter's recursion limit.

    Args:
        doc: Any Pliegue document node.

    Returns:
        Dict with ``_type`` and all node fields.

    Raises:
        SerializationError: If the tree holds an object that is not a
            document node.

    """
    root: dict[str, Any] = {}
    stack: list[tuple[Doc, dict[str, Any]]] = [(doc, root)]

    while stack:
        node, out = stack.pop()
        out["_type"] = type(node).__name__
        match node:
            case Nil():
                pass
            case Text(content=content) | Break(content=content):
                out["content"] = content
            case Cons(children=children):
                slots: list[dict[str, Any]] = [{} for _ in children]
                out["children"] = slots
                stack.extend(zip(children, slots, strict=True))
            case Nest(child=child, indent=indent):
                nested: dict[str, Any] = {}
                out["child"] = nested
                out["indent"] = indent
                stack.append((child, nested))
            case Group(child=child):
                nested = {}
                out["child"] = nested
                stack.append((child, nested))
            case other:
                msg = f"Cannot serialize {type(other).__name__}: not a document node"
                raise SerializationError(msg)

    return root


def from_dict(data: dict[str, Any]) -> Doc:
    """Reconstruct a document from a dict.

    Uses the ``_type`` discriminator to determine the node class. Nodes
    are rebuilt through the builders, so a decoded tree satisfies the
    same invariants as one built in code (no newlines in text, integer
    indents).

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Document node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a field
            is missing or has the wrong type.

    """
    built: list[Doc] = []
    # (data, None) still has to be expanded; (data, type name) is ready to build
    stack: list[tuple[Any, str | None]] = [(data, None)]

    while stack:
        item, type_name = stack.pop()
        if type_name is not None:
            built.append(_build(type_name, item, built))
            continue
        type_name = _type_name(item)
        stack.append((item, type_name))
        stack.extend((child, None) for child in reversed(_child_data(type_name, item)))

    return built.pop()


def _type_name(item: Any) -> str:
    """Validate the ``_type`` discriminator of one serialized node."""
    if not isinstance(item, dict):
        msg = f"Expected a document object, got {type(item).__name__}"
        raise SerializationError(msg)
    type_name = item.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized document"
        raise SerializationError(msg)
    if not isinstance(type_name, str) or type_name not in _NODE_TYPES:
        msg = f"Unknown document type: {type_name!r}"
        raise SerializationError(msg)
    return type_name


def _field(type_name: str, item: dict[str, Any], name: str, kind: type) -> Any:
    if name not in item:
        msg = f"Invalid fields for {type_name}: missing {name!r}"
        raise SerializationError(msg)
    value = item[name]
    # bool is an int subclass but never a valid indent
    if not isinstance(value, kind) or isinstance(value, bool):
        msg = (
            f"Invalid fields for {type_name}: {name!r} must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
        raise SerializationError(msg)
    return value


def _child_data(type_name: str, item: dict[str, Any]) -> list[Any]:
    match type_name:
        case "Cons":
            return _field(type_name, item, "children", list)
        case "Nest" | "Group":
            return [_field(type_name, item, "child", dict)]
    return []


def _build(type_name: str, item: dict[str, Any], built: list[Doc]) -> Doc:
    """Build one node; its children are the last entries of ``built``."""
    try:
        match type_name:
            case "Nil":
                return NIL
            case "Text":
                return text(_field(type_name, item, "content", str))
            case "Break":
                if "content" not in item:
                    return Break()
                return break_with(_field(type_name, item, "content", str))
            case "Cons":
                start = len(built) - len(item["children"])
                children = tuple(built[start:])
                del built[start:]
                return Cons(children)
            case "Nest":
                indent = _field(type_name, item, "indent", int)
                return nest(built.pop(), indent)
            case _:
                return group(built.pop())
    except DocumentError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise SerializationError(msg) from e


def to_json(doc: Doc, *, indent: int | None = None) -> str:
    """Serialize a document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability and
    matches ``json.dumps(to_dict(doc), sort_keys=True, indent=indent)``.
    The object nesting is written with an explicit stack, so documents
    of any depth can be serialized.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return _encode(to_dict(doc), indent)


def _encode(data: Any, indent: int | None) -> str:
    """Write nested dicts and lists as JSON, scalars via ``json.dumps``."""
    item_separator = ", " if indent is None else ","
    parts: list[str] = []
    # str entries are emitted verbatim, tuples are values still to encode
    stack: list[str | tuple[Any, int]] = [(data, 0)]

    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            parts.append(entry)
            continue
        value, depth = entry
        if isinstance(value, dict):
            items = [(json.dumps(key) + ": ", v) for key, v in sorted(value.items())]
            opener, closer = "{", "}"
        elif isinstance(value, list):
            items = [("", v) for v in value]
            opener, closer = "[", "]"
        else:
            parts.append(json.dumps(value))
            continue

        if not items:
            parts.append(opener + closer)
            continue
        parts.append(opener)
        inner = _line_start(indent, depth + 1)
        stack.append(_line_start(indent, depth) + closer)
        for i in range(len(items) - 1, -1, -1):
            prefix, child = items[i]
            stack.append((child, depth + 1))
            stack.append((item_separator if i else "") + inner + prefix)

    return "".join(parts)


def _line_start(indent: int | None, depth: int) -> str:
    if indent is None:
        return ""
    return "\n" + " " * (indent * depth)


def from_json(data: str) -> Doc:
    """Deserialize a document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        SerializationError: If the JSON is invalid, nested deeper than the
            ``json`` decoder supports, or isn't a document object.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    except RecursionError as e:
        msg = "JSON document is nested too deeply to decode"
        raise SerializationError(msg) from e
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
