from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["Line", "Token", "classify"]


class Token(enum.Enum):
    FEATURE = "Feature"
    SCENARIO = "Scenario"
    SCENARIO_OUTLINE = "ScenarioOutline"
    EXAMPLES = "Examples"
    TABLE_ROW = "TableRow"
    TAG_OR_COMMENT = "TagOrComment"
    BLANK = "Blank"
    OTHER = "Other"


@dataclass(frozen=True)
class Line:
    """A classified line and its payload."""

    token: Token
    text: str = ""
    cells: Sequence[str] = field(default_factory=tuple)


# Order matters: "Scenario Outline:" must win over "Scenario:".
_KEYWORDS = (
    ("Feature:", Token.FEATURE),
    ("Scenario Outline:", Token.SCENARIO_OUTLINE),
    ("Scenario:", Token.SCENARIO),
    ("Examples:", Token.EXAMPLES),
)


def classify(line: str) -> Line:
    """Classify a single stripped line."""
    if not line:
        return Line(Token.BLANK)
    if line.startswith(("#", "@")):
        return Line(Token.TAG_OR_COMMENT, line)
    for keyword, token in _KEYWORDS:
        if line.startswith(keyword):
            return Line(token, line[len(keyword) :].strip())
    if line.startswith("|") and line.endswith("|"):
        cells = tuple(cell.strip() for cell in line.split("|")[1:-1])
        return Line(Token.TABLE_ROW, line, cells=cells)
    return Line(Token.OTHER, line)
