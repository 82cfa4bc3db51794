"""Public operations of the DOL compiler.

These are the entry points wrappers call into (CLI, HTTP service, editor
integrations). All of them are pure functions of their input except
``initialize``, which only affects logging.
"""

from __future__ import annotations

from dolc.compiler.compiler import DolCompiler
from dolc.core.types import COMPILER_VERSION, CompileResult
from dolc.runtime.lifecycle import initialize, is_initialized, shutdown

_compiler = DolCompiler()


def compile_source(source: str) -> CompileResult:
    """Analyze DOL source. Never raises; failures are in ``result.errors``."""
    return _compiler.compile(source)


def validate_source(source: str) -> bool:
    """Return True if the source compiles without errors."""
    return compile_source(source).success


def get_version() -> str:
    """Return the compiler version string."""
    return COMPILER_VERSION


def format_source(source: str) -> str:
    """Return the source unchanged; formatting is not implemented."""
    return source


__all__ = [
    "compile_source",
    "format_source",
    "get_version",
    "initialize",
    "is_initialized",
    "shutdown",
    "validate_source",
]
