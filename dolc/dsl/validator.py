"""Structural warning checks for a parsed DOL tree.

Walks the finished AST and reports non-fatal issues:
- Duplicate spirit names among siblings
- Duplicate function names within one container
- Spirits with an empty body

Every diagnostic produced here is a Warning; none of them fail a compilation.
"""

from __future__ import annotations

from collections.abc import Sequence

from dolc.core.types import Diagnostic, DiagnosticCategory, SourcePosition
from dolc.dsl.ast_nodes import AstNode, FunctionNode, SpiritNode


def validate_ast(ast: Sequence[AstNode]) -> list[Diagnostic]:
    """Run all warning passes over a parsed tree.

    Returns a list of Warning diagnostics in source order (may be empty).
    """
    warnings: list[Diagnostic] = []
    _validate_container(ast, "top level", warnings)
    warnings.sort(key=lambda d: d.line)
    return warnings


def _validate_container(
    nodes: Sequence[AstNode], container: str, warnings: list[Diagnostic]
) -> None:
    """Check one container's children, then recurse into nested spirits."""
    seen_spirits: set[str] = set()
    seen_functions: set[str] = set()

    for node in nodes:
        if isinstance(node, SpiritNode):
            if node.name in seen_spirits:
                warnings.append(_warning(f"Duplicate spirit name: '{node.name}'", node.line))
            seen_spirits.add(node.name)

            if not node.body:
                warnings.append(_warning(f"Spirit '{node.name}' has no declarations", node.line))

            _validate_container(node.body, f"spirit '{node.name}'", warnings)

        elif isinstance(node, FunctionNode):
            if node.name in seen_functions:
                warnings.append(
                    _warning(f"Duplicate function name '{node.name}' in {container}", node.line)
                )
            seen_functions.add(node.name)


def _warning(message: str, line: int) -> Diagnostic:
    return Diagnostic(
        message=message,
        position=SourcePosition(line=line, column=1),
        category=DiagnosticCategory.WARNING,
    )
