"""dolc: structural analyzer for the DOL language.

Usage:
    import dolc

    dolc.initialize()
    result = dolc.compile_source(source)
    if not result.success:
        for error in result.errors:
            print(error)
"""

from dolc.api import (
    compile_source,
    format_source,
    get_version,
    initialize,
    is_initialized,
    shutdown,
    validate_source,
)
from dolc.core.types import COMPILER_VERSION, CompileResult, Diagnostic, DiagnosticCategory

__version__ = COMPILER_VERSION

__all__ = [
    "CompileResult",
    "Diagnostic",
    "DiagnosticCategory",
    "compile_source",
    "format_source",
    "get_version",
    "initialize",
    "is_initialized",
    "shutdown",
    "validate_source",
]
