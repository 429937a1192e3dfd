from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

WriteFeature = Callable[[str, str], Path]


@pytest.fixture
def write_feature(tmp_path: Path) -> WriteFeature:
    """Write a dedented feature file under tmp_path."""

    def _write(rel_path: str, text: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip(), encoding="utf8")
        return path

    return _write
