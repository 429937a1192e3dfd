"""Fixtures for the gherkin-guard acceptance tests."""
from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Iterable

from behave import fixture, use_fixture
from behave.model import Scenario

from features.steps.audit_env import AuditContext, AuditEnvironment


@fixture
def audit_environment(context: AuditContext) -> Iterable[AuditEnvironment]:
    with TemporaryDirectory() as tmp_dir:
        audit = AuditEnvironment(_path=Path(tmp_dir), verbose=False, project_files={})
        context.audit = audit
        yield audit


def before_scenario(context: AuditContext, scenario: Scenario):
    use_fixture(audit_environment, context)
    if "verbose" in scenario.tags:
        context.audit.verbose = True
