#!/usr/bin/env python
"""
Validate Gherkin feature files before a build proceeds.

* scenario count per file does not exceed a ceiling
* feature descriptions are unique
* scenario names are unique
* data tables have no empty cells
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .config import AuditConfiguration, NoProjectFile
from .engine import validate
from .report import ValidationReport

# --verbose applies to every module logger in the package.
logger = logging.getLogger("gherkin_guard")

__all__ = ["main"]


@click.command()
@click.option("--max-scenarios", type=click.IntRange(min=0), help="Maximum scenarios per file")
@click.option("--fail/--no-fail", "fail_on_violations", default=None, help="Exit 1 on violations")
@click.option(
    "--ignore-case/--match-case", "ignore_case", default=None, help="Case-insensitive names"
)
@click.option(
    "--within-file/--cross-file-only",
    "within_file_duplicates",
    default=None,
    help="Report names repeated inside one file",
)
@click.option("--no-empty-cells", is_flag=True, default=False, help="Skip the empty cell check")
@click.option("--config", "config_file", type=click.Path(path_type=Path), help="pyproject.toml")
@click.option("--report", "report_file", type=click.Path(path_type=Path), help="Write the report")
@click.option("--verbose", is_flag=True, default=False)
@click.argument("root", default=".", type=click.Path(path_type=Path))
@click.version_option(package_name="gherkin-guard")
def main(
    verbose: bool,
    max_scenarios: int | None,
    fail_on_violations: bool | None,
    ignore_case: bool | None,
    within_file_duplicates: bool | None,
    no_empty_cells: bool,
    config_file: Path | None,
    report_file: Path | None,
    root: Path,
):
    if verbose:
        logging.basicConfig()
        logger.setLevel(logging.DEBUG)

    try:
        config = AuditConfiguration.get_config(config_file)
    except NoProjectFile as e:
        click.echo(
            f'"{e.proj_filename}" could not be located in the search paths: {e.search_paths!s}'
        )
        sys.exit(1)

    config = config.update(
        {
            "max_scenarios": max_scenarios,
            "fail_on_violations": fail_on_violations,
            "case_sensitive": None if ignore_case is None else not ignore_case,
            "within_file_duplicates": within_file_duplicates,
            "check_empty_cells": False if no_empty_cells else None,
        }
    )
    report = validate(root, config)
    _echo_report(report)
    if report_file is not None:
        _write_report(report, report_file)

    if report.failed(config.fail_on_violations):
        click.echo("Feature file validation failed.")
        sys.exit(1)
    if report:
        click.echo(f"Feature file validation found {len(report)} violations, not failing.")
    else:
        click.echo("Feature file validation passed.")


def _echo_report(report: ValidationReport):
    if not report.stats and not report:
        click.echo("No feature files to validate.")
    for summary in report.stats:
        click.echo(f"- {summary.path} (Total Scenarios: {summary.scenario_count})")
    for violation in report:
        click.echo(f"{violation.kind.value}: {violation.message}")


def _write_report(report: ValidationReport, report_file: Path):
    report_file.parent.mkdir(parents=True, exist_ok=True)
    report_file.write_text(report.render() + "\n", encoding="utf8")
    logger.debug("Wrote report to %s", report_file)
