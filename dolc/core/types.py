"""Core data types for the DOL compiler.

Shared dataclasses used across the analyzer, the serializer, the CLI, and
the serving layer. Every type is JSON-serializable via its to_dict/from_dict
methods.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dolc.dsl.ast_nodes import AstNode

COMPILER_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class DiagnosticCategory(str, Enum):
    """Category of a diagnostic. Only SYNTAX_ERROR fails a compilation."""

    SYNTAX_ERROR = "SyntaxError"
    WARNING = "Warning"


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourcePosition:
    """A 1-indexed line/column position in DOL source."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"L{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """A structural error or warning produced by the analyzer."""

    message: str
    position: SourcePosition = field(default_factory=SourcePosition)
    category: DiagnosticCategory = DiagnosticCategory.SYNTAX_ERROR

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def is_error(self) -> bool:
        return self.category is DiagnosticCategory.SYNTAX_ERROR

    def __str__(self) -> str:
        return f"[{self.category.value}] line {self.line}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "line": self.position.line,
            "column": self.position.column,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Diagnostic:
        return cls(
            message=data["message"],
            position=SourcePosition(line=data.get("line", 1), column=data.get("column", 1)),
            category=DiagnosticCategory(data.get("category", "SyntaxError")),
        )


# ---------------------------------------------------------------------------
# Compilation result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Metadata:
    """Summary counters for one compilation. Counts span the whole source."""

    compiler_version: str = COMPILER_VERSION
    spirit_count: int = 0
    function_count: int = 0
    source_line_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "compiler_version": self.compiler_version,
            "spirit_count": self.spirit_count,
            "function_count": self.function_count,
            "source_line_count": self.source_line_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Metadata:
        return cls(
            compiler_version=data.get("compiler_version", COMPILER_VERSION),
            spirit_count=data.get("spirit_count", 0),
            function_count=data.get("function_count", 0),
            source_line_count=data.get("source_line_count", 0),
        )


@dataclass
class CompileResult:
    """The output of analyzing one DOL source text.

    ``success`` is derived from ``errors`` rather than stored, so the two can
    never disagree.
    """

    ast: list[AstNode] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "ast": [node.to_dict() for node in self.ast],
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompileResult:
        # Deferred: dolc.dsl imports this module through its validator.
        from dolc.dsl.ast_nodes import node_from_dict

        return cls(
            ast=[node_from_dict(n) for n in data.get("ast", [])],
            errors=[Diagnostic.from_dict(e) for e in data.get("errors", [])],
            warnings=[Diagnostic.from_dict(w) for w in data.get("warnings", [])],
            metadata=Metadata.from_dict(data.get("metadata", {})),
        )
