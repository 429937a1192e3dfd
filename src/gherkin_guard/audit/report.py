from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["FileSummary", "ValidationReport", "Violation", "ViolationKind"]


class ViolationKind(enum.Enum):
    FILE_READ_ERROR = "FileReadError"
    SCENARIO_LIMIT_EXCEEDED = "ScenarioLimitExceeded"
    DUPLICATE_FEATURE = "DuplicateFeature"
    DUPLICATE_SCENARIO = "DuplicateScenario"
    EMPTY_TABLE_CELL = "EmptyTableCell"


@dataclass(frozen=True)
class Violation:
    """A single finding."""

    kind: ViolationKind
    files: Sequence[str]
    key: str | None = None
    line: int | None = None
    column: int | None = None
    detail: str | None = None

    @property
    def message(self) -> str:
        files = ", ".join(self.files)
        if self.kind is ViolationKind.FILE_READ_ERROR:
            return f"Could not read feature file {files}: {self.detail}"
        if self.kind is ViolationKind.SCENARIO_LIMIT_EXCEEDED:
            return f"Scenario count exceeded in file: {files} ({self.detail})"
        if self.kind is ViolationKind.DUPLICATE_FEATURE:
            return f"Duplicate feature description '{self.key}' in: {files}"
        if self.kind is ViolationKind.DUPLICATE_SCENARIO:
            return f"Duplicate scenario name '{self.key}' in: {files}"
        return f"Empty table cell at {files}:{self.line} (column {self.column})"


@dataclass(frozen=True)
class FileSummary:
    path: str
    scenario_count: int


@dataclass(frozen=True)
class ValidationReport:
    """
    The ordered findings of one validation run.

    An empty report means every file passed.
    """

    violations: Sequence[Violation] = field(default_factory=tuple)
    stats: Sequence[FileSummary] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.violations)

    def __iter__(self):
        yield from self.violations

    def __len__(self) -> int:
        return len(self.violations)

    def is_empty(self) -> bool:
        return not self.violations

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        return [violation for violation in self.violations if violation.kind is kind]

    def failed(self, fail_on_violations: bool = True) -> bool:
        """Whether the surrounding build should stop."""
        return fail_on_violations and bool(self.violations)

    def render(self) -> str:
        lines = [
            f"{summary.path} (Total Scenarios: {summary.scenario_count})" for summary in self.stats
        ]
        lines += [f"{violation.kind.value}: {violation.message}" for violation in self.violations]
        return "\n".join(lines)
