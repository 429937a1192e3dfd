"""Validate a corpus of Gherkin feature files."""
from __future__ import annotations

from .cli import main
from .config import AuditConfiguration
from .engine import validate
from .report import ValidationReport, Violation, ViolationKind

__all__ = [
    "AuditConfiguration",
    "ValidationReport",
    "Violation",
    "ViolationKind",
    "main",
    "validate",
]
