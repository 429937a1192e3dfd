"""
Count scenarios in a feature file.

A ``Scenario`` counts once. A ``Scenario Outline`` counts zero by itself; every data row of the
``Examples`` table that follows it counts once. The first row after ``Examples:`` is the column
header and is never counted.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from .classifier import Token, classify

logger = logging.getLogger(__name__)

__all__ = [
    "FeatureFileStats",
    "FileReadError",
    "ParseState",
    "TableRow",
    "parse_file",
    "parse_lines",
]


class ParseState(enum.Enum):
    DEFAULT = "Default"
    IN_SCENARIO_OUTLINE = "InScenarioOutline"
    IN_EXAMPLES_HEADER = "InExamplesHeader"
    IN_EXAMPLES_BODY = "InExamplesBody"


_EXAMPLES_STATES = frozenset([ParseState.IN_EXAMPLES_HEADER, ParseState.IN_EXAMPLES_BODY])


@dataclass(frozen=True)
class TableRow:
    """A ``|``-delimited row and where it was found."""

    line: int
    cells: Sequence[str]


@dataclass
class FeatureFileStats:
    """What the parser learned about one file."""

    path: Path
    feature_description: str | None = None
    scenario_names: list[str] = field(default_factory=list)
    scenario_count: int = 0
    table_rows: list[TableRow] = field(default_factory=list)


class FileReadError(Exception):
    """A feature file could not be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def parse_lines(path: Path, lines: Iterable[str]) -> FeatureFileStats:
    """Run the section state machine over the lines of a file."""
    stats = FeatureFileStats(path=path)
    state = ParseState.DEFAULT
    # An outline stays open across its Examples blocks until the next Scenario.
    outline_open = False
    for lineno, raw in enumerate(lines, start=1):
        line = classify(raw.strip())
        token = line.token
        if token is Token.TABLE_ROW:
            stats.table_rows.append(TableRow(line=lineno, cells=line.cells))

        if token is Token.FEATURE:
            if stats.feature_description is None:
                stats.feature_description = line.text
        elif token is Token.SCENARIO:
            stats.scenario_count += 1
            stats.scenario_names.append(line.text)
            state = ParseState.DEFAULT
            outline_open = False
        elif token is Token.SCENARIO_OUTLINE:
            stats.scenario_names.append(line.text)
            state = ParseState.IN_SCENARIO_OUTLINE
            outline_open = True
        elif token is Token.EXAMPLES:
            if outline_open:
                state = ParseState.IN_EXAMPLES_HEADER
        elif token is Token.TABLE_ROW:
            if state is ParseState.IN_EXAMPLES_HEADER:
                state = ParseState.IN_EXAMPLES_BODY
            elif state is ParseState.IN_EXAMPLES_BODY:
                stats.scenario_count += 1
        elif token in (Token.BLANK, Token.OTHER):
            if state in _EXAMPLES_STATES:
                logger.debug("%s:%d: end of examples table", path, lineno)
                state = ParseState.DEFAULT
    return stats


def parse_file(path: Path) -> FeatureFileStats:
    """
    Parse a feature file from disk.

    Malformed Gherkin never raises. Raises FileReadError if the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e
    # str.splitlines also breaks on form feeds and unicode separators.
    return parse_lines(path, text.split("\n"))
