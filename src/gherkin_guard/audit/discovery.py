from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Collection, Pattern

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_EXCLUDE", "DEFAULT_INCLUDE", "discover_feature_files"]

DEFAULT_INCLUDE = re.compile(r"\.feature$")
DEFAULT_EXCLUDE = frozenset(
    [
        ".git",
        ".hg",
        ".svn",
        ".tox",
        ".venv",
        "__pycache__",
        "build",
        "dist",
        "node_modules",
        "target",
        "venv",
    ]
)


def discover_feature_files(
    root: Path,
    include: Pattern[str] = DEFAULT_INCLUDE,
    exclude: Collection[str] = DEFAULT_EXCLUDE,
) -> list[Path]:
    """
    Recursively find feature files under root.

    A missing root is not an error: there is simply nothing to validate.
    """
    if not root.exists():
        logger.debug("%s does not exist, no feature files to validate", root)
        return []
    excluded = frozenset(exclude)
    candidates = root.rglob("*") if root.is_dir() else [root]
    found_files = sorted(
        file_
        for file_ in candidates
        if include.search(file_.name)
        and not excluded.intersection(file_.relative_to(root).parts[:-1])
        and file_.is_file()
    )
    logger.debug("Found %d feature files under %s", len(found_files), root)
    return found_files
