"""
Translate tool input schemas into self-contained JSON Schema documents.

Tool discovery clients get one flat document per tool: references into
``$defs``/``definitions`` are inlined and array properties always declare an
item type, since at least one consumer rejects arrays without ``items``.
"""

import copy
from typing import Any, Dict, Optional

from pydantic import BaseModel

DEFAULT_ARRAY_ITEMS = {"type": "string"}
DEFINITION_KEYS = ("$defs", "definitions")


def to_json_schema(input_schema: Any, tool_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert a tool input schema to a JSON Schema document

    Args:
        input_schema: A pydantic model class or a JSON Schema dict
        tool_name: Name used in error messages

    Returns:
        An object schema without references and with items on every array
    """
    if isinstance(input_schema, type) and issubclass(input_schema, BaseModel):
        schema = input_schema.model_json_schema()
    elif isinstance(input_schema, dict):
        schema = copy.deepcopy(input_schema)
    else:
        raise TypeError(
            f"Unsupported input schema for tool {tool_name or '<unnamed>'}: "
            f"{type(input_schema).__name__}"
        )

    definitions = {}
    for key in DEFINITION_KEYS:
        definitions.update(schema.pop(key, None) or {})

    schema = _inline_refs(schema, definitions, ())
    _ensure_array_items(schema)

    schema.setdefault("type", "object")
    if not isinstance(schema.get("properties"), dict):
        schema["properties"] = {}
    return schema


def _ref_name(ref: str) -> Optional[str]:
    for key in DEFINITION_KEYS:
        prefix = f"#/{key}/"
        if ref.startswith(prefix):
            return ref[len(prefix) :]
    return None


def _inline_refs(node: Any, definitions: Dict[str, Any], seen: tuple) -> Any:
    if isinstance(node, list):
        return [_inline_refs(item, definitions, seen) for item in node]
    if not isinstance(node, dict):
        return node

    if isinstance(node.get("$ref"), str):
        name = _ref_name(node["$ref"])
        if name is not None and name in definitions:
            siblings = {k: v for k, v in node.items() if k != "$ref"}
            if name in seen:
                # recursive model, cut the cycle
                resolved = {"type": "object"}
            else:
                resolved = _inline_refs(
                    copy.deepcopy(definitions[name]), definitions, seen + (name,)
                )
            resolved.update(_inline_refs(siblings, definitions, seen))
            return resolved

    return {
        key: _inline_refs(value, definitions, seen)
        for key, value in node.items()
        if key not in DEFINITION_KEYS
    }


def _is_array(node: Dict[str, Any]) -> bool:
    node_type = node.get("type")
    if isinstance(node_type, list):
        return "array" in node_type
    return node_type == "array"


def _ensure_array_items(node: Any) -> None:
    if isinstance(node, list):
        for item in node:
            _ensure_array_items(item)
        return
    if not isinstance(node, dict):
        return

    if _is_array(node) and not node.get("items"):
        node["items"] = dict(DEFAULT_ARRAY_ITEMS)

    for value in node.values():
        _ensure_array_items(value)
