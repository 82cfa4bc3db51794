"""DOL DSL: line normalizer, declaration parser, and validator for .dol sources.

Usage:
    from dolc.dsl import Parser, SourceLines, validate_ast

    state = Parser(SourceLines(source)).parse()
    warnings = validate_ast(state.top_level)
"""

from dolc.dsl.ast_nodes import AstNode, FunctionNode, SpiritNode
from dolc.dsl.lexer import SourceLine, SourceLines
from dolc.dsl.parser import Parser, ScanState
from dolc.dsl.shapes import Declaration, DeclarationKind, recognize
from dolc.dsl.validator import validate_ast

__all__ = [
    "AstNode",
    "Declaration",
    "DeclarationKind",
    "FunctionNode",
    "Parser",
    "ScanState",
    "SourceLine",
    "SourceLines",
    "SpiritNode",
    "recognize",
    "validate_ast",
]
