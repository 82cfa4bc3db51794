"""AST node definitions for the DOL language.

These dataclasses form the shallow tree produced by the parser:

    list[AstNode]
      -> SpiritNode
          -> FunctionNode, nested SpiritNode
      -> FunctionNode (top-level)

Function bodies are scoped by brace tracking but never parsed, so
``FunctionNode.params`` and ``FunctionNode.body`` are always empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FunctionNode:
    """An `fn name(...)` or `pub fn name(...)` declaration."""

    name: str
    params: list[str] = field(default_factory=list)
    body: str = ""
    line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Function",
            "name": self.name,
            "params": list(self.params),
            "body": self.body,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionNode:
        return cls(
            name=data["name"],
            params=data.get("params", []),
            body=data.get("body", ""),
            line=data.get("line", 0),
        )


@dataclass
class SpiritNode:
    """A `spirit Name { ... }` container declaration."""

    name: str
    body: list[AstNode] = field(default_factory=list)
    line: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Spirit",
            "name": self.name,
            "body": [child.to_dict() for child in self.body],
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpiritNode:
        return cls(
            name=data["name"],
            body=[node_from_dict(child) for child in data.get("body", [])],
            line=data.get("line", 0),
        )


AstNode = SpiritNode | FunctionNode


_NODE_TYPES: dict[str, type[SpiritNode] | type[FunctionNode]] = {
    "Spirit": SpiritNode,
    "Function": FunctionNode,
}


def node_from_dict(data: dict[str, Any]) -> AstNode:
    """Rebuild an AST node from its tagged dictionary form."""
    node_type = data.get("type")
    if node_type not in _NODE_TYPES:
        raise ValueError(f"Unknown AST node type: {node_type!r}")
    return _NODE_TYPES[node_type].from_dict(data)
