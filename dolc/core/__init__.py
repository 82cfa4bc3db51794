"""dolc core: shared types, enums, and configuration.

Import the most commonly used types from here for convenience:

    from dolc.core import CompileResult, Diagnostic, DiagnosticCategory
"""

from dolc.core.config import DolConfig, get_config, set_config
from dolc.core.types import (
    COMPILER_VERSION,
    CompileResult,
    Diagnostic,
    DiagnosticCategory,
    Metadata,
    SourcePosition,
)

__all__ = [
    "COMPILER_VERSION",
    "CompileResult",
    "Diagnostic",
    "DiagnosticCategory",
    "DolConfig",
    "Metadata",
    "SourcePosition",
    "get_config",
    "set_config",
]
