"""Single-pass declaration parser for the DOL language.

Consumes SourceLines from the line normalizer, recognizes spirit and
function declarations, and tracks brace depth to decide which container
owns each declaration. Function bodies are skipped, not parsed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dolc.dsl.ast_nodes import AstNode, FunctionNode, SpiritNode
from dolc.dsl.lexer import SourceLine, SourceLines
from dolc.dsl.shapes import DeclarationKind, leading_identifier, recognize

logger = logging.getLogger(__name__)


@dataclass
class OpenSpirit:
    """A spirit whose closing brace has not been seen yet."""

    node: SpiritNode
    base_depth: int
    entered: bool = False


@dataclass
class StrayLine:
    """An unrecognized top-level line that starts with an identifier."""

    line: int
    identifier: str


@dataclass
class ScanState:
    """Mutable state of one parsing pass.

    ``top_level`` only ever receives closed spirits and functions declared
    outside any spirit. Spirits still in ``open_spirits`` when the pass ends
    were never closed and are not part of the tree. ``replaced_spirits``
    holds spirits that never opened a brace before another spirit was
    declared at the same depth; they are dropped with their bodies.
    """

    brace_depth: int = 0
    open_spirits: list[OpenSpirit] = field(default_factory=list)
    top_level: list[AstNode] = field(default_factory=list)
    spirit_count: int = 0
    function_count: int = 0
    stray_lines: list[StrayLine] = field(default_factory=list)
    replaced_spirits: list[SpiritNode] = field(default_factory=list)

    @property
    def innermost(self) -> OpenSpirit | None:
        return self.open_spirits[-1] if self.open_spirits else None


class Parser:
    """Parse DOL source lines into a ScanState.

    Usage:
        parser = Parser(SourceLines(source))
        state = parser.parse()
    """

    def __init__(self, lines: SourceLines) -> None:
        self._lines = lines
        self._state = ScanState()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def parse(self) -> ScanState:
        """Run the pass over every line and return the final state."""
        for line in self._lines:
            self._parse_line(line)

        if self._state.open_spirits:
            logger.debug(
                "%d spirit(s) still open at end of input: %s",
                len(self._state.open_spirits),
                ", ".join(s.node.name for s in self._state.open_spirits),
            )
        return self._state

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _parse_line(self, line: SourceLine) -> None:
        state = self._state
        declaration = recognize(line.text)

        if declaration is None:
            if state.innermost is None and state.brace_depth == 0:
                identifier = leading_identifier(line.text)
                if identifier is not None:
                    state.stray_lines.append(StrayLine(line=line.number, identifier=identifier))
        elif declaration.kind is DeclarationKind.SPIRIT:
            state.spirit_count += 1
            self._replace_unopened_spirit()
            spirit = SpiritNode(name=declaration.name, line=line.number)
            state.open_spirits.append(OpenSpirit(node=spirit, base_depth=state.brace_depth))
        else:
            state.function_count += 1
            self._attach(FunctionNode(name=declaration.name, line=line.number))

        self._track_braces(line.text)

    # ------------------------------------------------------------------
    # Braces
    # ------------------------------------------------------------------

    def _track_braces(self, text: str) -> None:
        state = self._state
        for ch in text:
            if ch == "{":
                state.brace_depth += 1
                innermost = state.innermost
                if innermost is not None and state.brace_depth > innermost.base_depth:
                    innermost.entered = True
            elif ch == "}":
                state.brace_depth -= 1
                self._close_finished_spirits()

    def _close_finished_spirits(self) -> None:
        """Close spirits whose scope the last closing brace ended."""
        state = self._state
        while state.open_spirits:
            innermost = state.open_spirits[-1]
            at_base = innermost.entered and state.brace_depth == innermost.base_depth
            if not at_base and state.brace_depth >= innermost.base_depth:
                break
            state.open_spirits.pop()
            self._attach(innermost.node)

    def _replace_unopened_spirit(self) -> None:
        """Drop the innermost spirit if it never opened a brace at this depth.

        ``spirit A`` followed by ``spirit B {`` declares B in A's place
        rather than inside it.
        """
        state = self._state
        innermost = state.innermost
        if innermost is None or innermost.entered:
            return
        if innermost.base_depth != state.brace_depth:
            return
        state.open_spirits.pop()
        state.replaced_spirits.append(innermost.node)
        logger.debug(
            "Spirit %r at line %d replaced before its opening brace",
            innermost.node.name,
            innermost.node.line,
        )

    def _attach(self, node: AstNode) -> None:
        """Append a node to the innermost open spirit, or to the top level."""
        innermost = self._state.innermost
        if innermost is not None:
            innermost.node.body.append(node)
        else:
            self._state.top_level.append(node)
