from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, ClassVar, Collection, Mapping, Pattern, Sequence

import toml

from .discovery import DEFAULT_EXCLUDE, DEFAULT_INCLUDE

logger = logging.getLogger(__name__)

__all__ = ["AuditConfiguration", "NoProjectFile"]


@dataclass(frozen=True)
class AuditConfiguration:
    """Configuration for validating feature files."""

    max_scenarios: int = 100
    fail_on_violations: bool = True
    case_sensitive: bool = True
    within_file_duplicates: bool = True
    check_empty_cells: bool = True
    include: Pattern[str] = DEFAULT_INCLUDE
    exclude: Collection[str] = field(default=DEFAULT_EXCLUDE)
    _config_file: ClassVar[Path] = Path("pyproject.toml")
    _section: ClassVar[str] = "gherkin-guard"

    @classmethod
    def get_config(cls, config_file: Path | None = None) -> AuditConfiguration:
        """
        Load the configuration from pyproject.toml.

        Without an explicit config_file the current directory and its parents are searched, and
        the defaults are used when nothing is found.
        """
        if config_file is None:
            try:
                config_file = cls.get_configfile()
            except NoProjectFile as e:
                logger.debug("No %s found, using defaults", e.proj_filename)
                return cls()
        elif not config_file.is_file():
            raise NoProjectFile(config_file, search_paths=[config_file.parent])
        logger.debug("Reading configuration from %s", config_file)
        audit_config: Mapping[str, Any] = (
            toml.load(config_file).get("tool", {}).get(cls._section, {})
        )
        return cls().update(audit_config)

    @classmethod
    def get_configfile(cls) -> Path:
        cwd = Path.cwd().absolute()
        paths = [cwd] + list(cwd.parents)
        for path in paths:
            pyproject = path / cls._config_file
            if pyproject.exists() and pyproject.is_file():
                break
        else:
            raise NoProjectFile(cls._config_file, search_paths=paths)
        return pyproject

    def update(self, config: Mapping[str, Any]) -> AuditConfiguration:
        """Return a copy with the given options replaced. Unset (None) options are skipped."""
        options = {
            key.replace("-", "_"): value for key, value in config.items() if value is not None
        }
        if isinstance(options.get("include"), str):
            options["include"] = re.compile(options["include"])
        if "exclude" in options:
            options["exclude"] = frozenset(options["exclude"])
        return replace(self, **options)


class NoProjectFile(Exception):
    """No project file could be found."""

    def __init__(self, proj_filename: Path, search_paths: Sequence[Path]):
        self.proj_filename = proj_filename.as_posix()
        self.search_paths = [path.as_posix() for path in search_paths]
