"""Declaration shapes recognized by the DOL scanner.

Defines the two declaration kinds and the patterns that match them against
a single trimmed source line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class DeclarationKind(Enum):
    """All declaration shapes recognized on a line."""

    SPIRIT = auto()  # spirit Name {
    FUNCTION = auto()  # pub fn name(


# Identifiers are ASCII word characters only.
SPIRIT_PATTERN = re.compile(r"^spirit\s+([A-Za-z0-9_]+)\s*(\{)?")
FUNCTION_PATTERN = re.compile(r"(?:\bpub\s+)?\bfn\s+([A-Za-z0-9_]+)\s*\(")

# Leading identifier of an otherwise unrecognized line
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True)
class Declaration:
    """A declaration shape matched on one line."""

    kind: DeclarationKind
    name: str
    opens_brace: bool = False

    def __repr__(self) -> str:
        return f"Declaration({self.kind.name}, {self.name!r})"


def recognize(text: str) -> Declaration | None:
    """Match a trimmed line against the declaration shapes.

    Spirit is tried before function, and the first match wins. Returns None
    for lines that declare nothing.
    """
    if match := SPIRIT_PATTERN.match(text):
        return Declaration(
            kind=DeclarationKind.SPIRIT,
            name=match.group(1),
            opens_brace=match.group(2) is not None,
        )
    if match := FUNCTION_PATTERN.search(text):
        return Declaration(kind=DeclarationKind.FUNCTION, name=match.group(1))
    return None


def leading_identifier(text: str) -> str | None:
    """Return the identifier a line starts with, if any."""
    match = IDENTIFIER_PATTERN.match(text)
    return match.group(0) if match else None
