from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .parser import FeatureFileStats

__all__ = ["Duplicate", "DuplicateIndex", "DuplicateTracker"]


@dataclass(frozen=True)
class Duplicate:
    key: str
    files: tuple[str, ...]


@dataclass
class DuplicateIndex:
    """
    Map a name to every file that uses it.

    The first spelling seen is kept for reporting when keys are case-folded.
    """

    case_sensitive: bool = True
    within_file: bool = True
    _spelling: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _occurrences: dict[str, Counter[str]] = field(default_factory=dict, init=False, repr=False)

    def _normalize(self, key: str) -> str:
        return key if self.case_sensitive else key.casefold()

    def add(self, key: str, file_id: str) -> None:
        if not key.strip():
            return
        normalized = self._normalize(key)
        self._spelling.setdefault(normalized, key)
        self._occurrences.setdefault(normalized, Counter())[file_id] += 1

    def files(self, key: str) -> set[str]:
        return set(self._occurrences.get(self._normalize(key), ()))

    def _is_duplicate(self, files: Counter[str]) -> bool:
        if len(files) > 1:
            return True
        return self.within_file and sum(files.values()) > 1

    def __iter__(self) -> Iterator[Duplicate]:
        """Yield every duplicated key, sorted by key."""
        duplicates = [
            Duplicate(key=self._spelling[normalized], files=tuple(sorted(files)))
            for normalized, files in self._occurrences.items()
            if self._is_duplicate(files)
        ]
        yield from sorted(duplicates, key=lambda duplicate: duplicate.key)


@dataclass
class DuplicateTracker:
    """Feature description and scenario name indices for one validation run."""

    case_sensitive: bool = True
    within_file: bool = True
    features: DuplicateIndex = field(init=False)
    scenarios: DuplicateIndex = field(init=False)

    def __post_init__(self):
        # Only one description is recorded per file, so within-file repeats cannot occur.
        self.features = DuplicateIndex(case_sensitive=self.case_sensitive, within_file=False)
        self.scenarios = DuplicateIndex(
            case_sensitive=self.case_sensitive, within_file=self.within_file
        )

    def record(self, file_id: str, stats: FeatureFileStats) -> None:
        if stats.feature_description is not None:
            self.features.add(stats.feature_description, file_id)
        self.record_scenarios(file_id, stats.scenario_names)

    def record_scenarios(self, file_id: str, names: Iterable[str]) -> None:
        for name in names:
            self.scenarios.add(name, file_id)

    def duplicate_features(self) -> list[Duplicate]:
        return list(self.features)

    def duplicate_scenarios(self) -> list[Duplicate]:
        return list(self.scenarios)
