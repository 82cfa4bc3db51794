"""dolc compiler: turns DOL source into an AST, diagnostics, and metadata.

Usage:
    from dolc.compiler import DolCompiler
    from dolc.compiler.serializer import serialize_to_json

    compiler = DolCompiler()
    result = compiler.compile(source)
    json_str = serialize_to_json(result)
"""

from dolc.compiler.compiler import DolCompiler
from dolc.compiler.serializer import (
    deserialize_from_dict,
    deserialize_from_json,
    serialize_to_dict,
    serialize_to_json,
)

__all__ = [
    "DolCompiler",
    "deserialize_from_dict",
    "deserialize_from_json",
    "serialize_to_dict",
    "serialize_to_json",
]
