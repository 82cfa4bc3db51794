"""DOL compiler: turns source text into a CompileResult.

Runs the single parsing pass, applies the end-of-pass structural checks
(brace balance, minimum content), gathers warnings, and assembles the
result with its metadata. Compilation never raises for malformed input;
every problem is reported as a Diagnostic.
"""

from __future__ import annotations

import logging

from dolc.core.types import (
    COMPILER_VERSION,
    CompileResult,
    Diagnostic,
    DiagnosticCategory,
    Metadata,
    SourcePosition,
)
from dolc.dsl.lexer import SourceLines
from dolc.dsl.parser import Parser, ScanState
from dolc.dsl.validator import validate_ast

logger = logging.getLogger(__name__)


class DolCompiler:
    """Compile DOL source text into CompileResult objects.

    Usage:
        compiler = DolCompiler()
        result = compiler.compile(source)

    A compiler holds no per-source state, so one instance can be shared
    across threads.
    """

    def __init__(self, version: str = COMPILER_VERSION) -> None:
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def compile(self, source: str) -> CompileResult:
        """Analyze one source text."""
        lines = SourceLines(source)
        state = Parser(lines).parse()
        line_count = lines.count

        errors = self._check_structure(state, line_count)
        warnings = self._collect_warnings(state)

        result = CompileResult(
            ast=state.top_level,
            errors=errors,
            warnings=warnings,
            metadata=Metadata(
                compiler_version=self._version,
                spirit_count=state.spirit_count,
                function_count=state.function_count,
                source_line_count=line_count,
            ),
        )

        logger.debug(
            "Compiled %d line(s): %d spirit(s), %d function(s), %d error(s), %d warning(s)",
            line_count,
            state.spirit_count,
            state.function_count,
            len(errors),
            len(warnings),
        )
        return result

    # ------------------------------------------------------------------
    # End-of-pass checks
    # ------------------------------------------------------------------

    @staticmethod
    def _check_structure(state: ScanState, line_count: int) -> list[Diagnostic]:
        errors: list[Diagnostic] = []

        # Brace balance; the sign tells excess '{' from excess '}'
        if state.brace_depth != 0:
            errors.append(
                Diagnostic(
                    message=f"Unclosed braces (depth: {state.brace_depth})",
                    position=SourcePosition(line=line_count, column=1),
                    category=DiagnosticCategory.SYNTAX_ERROR,
                )
            )

        # Minimum content
        if state.spirit_count == 0 and state.function_count == 0:
            errors.append(
                Diagnostic(
                    message="Expected spirit or function declaration",
                    position=SourcePosition(line=1, column=1),
                    category=DiagnosticCategory.SYNTAX_ERROR,
                )
            )

        # A spirit left open at depth 0 never opened a brace, so the brace
        # check above cannot see it and its body is missing from the tree
        if state.brace_depth == 0:
            errors.extend(
                Diagnostic(
                    message=f"Spirit '{open_spirit.node.name}' is never closed",
                    position=SourcePosition(line=open_spirit.node.line, column=1),
                    category=DiagnosticCategory.SYNTAX_ERROR,
                )
                for open_spirit in state.open_spirits
            )

        return errors

    @staticmethod
    def _collect_warnings(state: ScanState) -> list[Diagnostic]:
        warnings: list[Diagnostic] = [
            Diagnostic(
                message=f"Unexpected identifier '{stray.identifier}' at top level",
                position=SourcePosition(line=stray.line, column=1),
                category=DiagnosticCategory.WARNING,
            )
            for stray in state.stray_lines
        ]
        warnings.extend(
            Diagnostic(
                message=f"Spirit '{spirit.name}' has no opening brace",
                position=SourcePosition(line=spirit.line, column=1),
                category=DiagnosticCategory.WARNING,
            )
            for spirit in state.replaced_spirits
        )
        if state.brace_depth != 0:
            warnings.extend(
                Diagnostic(
                    message=f"Spirit '{open_spirit.node.name}' is never closed",
                    position=SourcePosition(line=open_spirit.node.line, column=1),
                    category=DiagnosticCategory.WARNING,
                )
                for open_spirit in state.open_spirits
            )
        warnings.extend(validate_ast(state.top_level))
        warnings.sort(key=lambda d: d.line)
        return warnings
