"""
Validate every feature file under a root directory.

Findings are accumulated into a single report, the run always completes, and deciding whether
the build fails is left to the caller.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from .config import AuditConfiguration
from .discovery import discover_feature_files
from .parser import FeatureFileStats, FileReadError, parse_file
from .report import FileSummary, ValidationReport, Violation, ViolationKind
from .tracker import Duplicate, DuplicateTracker

logger = logging.getLogger(__name__)

__all__ = ["validate"]

Discover = Callable[[Path], Iterable[Path]]


def validate(
    root: Path,
    config: AuditConfiguration | None = None,
    discover: Discover | None = None,
) -> ValidationReport:
    """Validate the feature files found under root and return the report."""
    config = config or AuditConfiguration()
    if discover is None:
        paths = discover_feature_files(root, include=config.include, exclude=config.exclude)
    else:
        paths = list(discover(root))

    tracker = DuplicateTracker(
        case_sensitive=config.case_sensitive, within_file=config.within_file_duplicates
    )
    file_violations: list[Violation] = []
    cell_violations: list[Violation] = []
    summaries: list[FileSummary] = []

    for path in sorted(paths):
        file_id = _file_id(root, path)
        try:
            stats = parse_file(path)
        except FileReadError as e:
            logger.debug("Skipping unreadable file %s: %s", path, e.reason)
            file_violations.append(
                Violation(ViolationKind.FILE_READ_ERROR, files=(file_id,), detail=e.reason)
            )
            continue
        logger.debug("%s has %d scenarios", file_id, stats.scenario_count)
        summaries.append(FileSummary(path=file_id, scenario_count=stats.scenario_count))
        if stats.scenario_count > config.max_scenarios:
            file_violations.append(
                Violation(
                    ViolationKind.SCENARIO_LIMIT_EXCEEDED,
                    files=(file_id,),
                    detail=f"Count: {stats.scenario_count}, Max allowed: {config.max_scenarios}",
                )
            )
        tracker.record(file_id, stats)
        if config.check_empty_cells:
            cell_violations += _empty_cells(file_id, stats)

    violations = file_violations
    violations += _duplicates(ViolationKind.DUPLICATE_FEATURE, tracker.duplicate_features())
    violations += _duplicates(ViolationKind.DUPLICATE_SCENARIO, tracker.duplicate_scenarios())
    violations += cell_violations
    return ValidationReport(violations=tuple(violations), stats=tuple(summaries))


def _file_id(root: Path, path: Path) -> str:
    if path == root:
        return path.name
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _duplicates(kind: ViolationKind, duplicates: Iterable[Duplicate]) -> list[Violation]:
    return [Violation(kind, files=duplicate.files, key=duplicate.key) for duplicate in duplicates]


def _empty_cells(file_id: str, stats: FeatureFileStats) -> list[Violation]:
    return [
        Violation(ViolationKind.EMPTY_TABLE_CELL, files=(file_id,), line=row.line, column=column)
        for row in stats.table_rows
        for column, cell in enumerate(row.cells, start=1)
        if not cell
    ]
