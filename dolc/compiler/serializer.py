"""JSON encoding of DOL compile results.

Two forms are produced:

- the full form mirrors ``CompileResult.to_dict()``;
- the compact form drops the ``params`` and ``body`` placeholders of
  function nodes while they are empty and emits no whitespace. The HTTP
  service and ``dolc compile --json --compact`` use it.

Decoding accepts both forms and rejects payloads whose ``success`` flag
disagrees with their error list.
"""

from __future__ import annotations

import json
from typing import Any

from dolc.core.types import CompileResult

_COMPACT_SEPARATORS = (",", ":")


def serialize_to_dict(result: CompileResult, *, compact: bool = False) -> dict[str, Any]:
    """Convert a CompileResult to a plain dictionary."""
    data = result.to_dict()
    if compact:
        data["ast"] = [_compact_node(node) for node in data["ast"]]
    return data


def serialize_to_json(result: CompileResult, *, compact: bool = False) -> str:
    """Serialize a CompileResult to a JSON string."""
    data = serialize_to_dict(result, compact=compact)
    if compact:
        return json.dumps(data, separators=_COMPACT_SEPARATORS)
    return json.dumps(data, indent=2)


def deserialize_from_dict(data: dict[str, Any]) -> CompileResult:
    """Reconstruct a CompileResult from either dictionary form.

    Raises:
        ValueError: if ``success`` is present and contradicts ``errors``,
            or an AST node has an unknown type.
    """
    result = CompileResult.from_dict(data)
    if "success" in data and data["success"] != result.success:
        raise ValueError(
            f"Inconsistent result: success={data['success']!r} "
            f"with {len(result.errors)} error(s)"
        )
    return result


def deserialize_from_json(json_str: str) -> CompileResult:
    """Deserialize a CompileResult from a JSON string."""
    return deserialize_from_dict(json.loads(json_str))


def _compact_node(node: dict[str, Any]) -> dict[str, Any]:
    if node["type"] == "Spirit":
        return {**node, "body": [_compact_node(child) for child in node["body"]]}
    return {key: value for key, value in node.items() if value or key not in ("params", "body")}
