from pathlib import Path

from gherkin_guard.audit.config import AuditConfiguration
from gherkin_guard.audit.engine import validate
from gherkin_guard.audit.report import FileSummary, Violation, ViolationKind


def scenarios(count: int, prefix: str = "Case") -> str:
    return "\n".join(f"  Scenario: {prefix} {i}\n    Given step" for i in range(count))


def test_clean_corpus(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: A\n" + scenarios(3, "A"))
    write_feature("nested/b.feature", "Feature: B\n" + scenarios(2, "B"))
    report = validate(tmp_path)
    assert report.is_empty()
    assert not report
    assert report.stats == (FileSummary("a.feature", 3), FileSummary("nested/b.feature", 2))


def test_empty_root(tmp_path: Path):
    report = validate(tmp_path)
    assert report.is_empty()
    assert report.stats == ()


def test_missing_root(tmp_path: Path):
    assert validate(tmp_path / "missing").is_empty()


def test_scenario_limit_exceeded(tmp_path: Path, write_feature):
    write_feature("big.feature", "Feature: Big\n" + scenarios(3))
    write_feature("ok.feature", "Feature: Ok\n" + scenarios(2, "Ok"))
    report = validate(tmp_path, AuditConfiguration(max_scenarios=2))
    assert list(report) == [
        Violation(
            ViolationKind.SCENARIO_LIMIT_EXCEEDED,
            files=("big.feature",),
            detail="Count: 3, Max allowed: 2",
        )
    ]


def test_outline_rows_count_towards_limit(tmp_path: Path, write_feature):
    write_feature(
        "outline.feature",
        """
        Feature: Outline
          Scenario Outline: Rows
            Given <n>
            Examples:
              | n |
              | 1 |
              | 2 |
              | 3 |
        """,
    )
    assert validate(tmp_path, AuditConfiguration(max_scenarios=3)).is_empty()
    report = validate(tmp_path, AuditConfiguration(max_scenarios=2))
    assert [violation.kind for violation in report] == [ViolationKind.SCENARIO_LIMIT_EXCEEDED]


def test_duplicate_feature(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: Login flow\n  Scenario: One\n")
    write_feature("b.feature", "Feature: Login flow\n  Scenario: Two\n")
    report = validate(tmp_path)
    assert list(report) == [
        Violation(
            ViolationKind.DUPLICATE_FEATURE, files=("a.feature", "b.feature"), key="Login flow"
        )
    ]


def test_duplicate_scenario_across_three_files(tmp_path: Path, write_feature):
    for name in ["a", "b", "c"]:
        write_feature(f"{name}.feature", f"Feature: {name}\n  Scenario: Submit empty form\n")
    report = validate(tmp_path)
    assert len(report) == 1
    (violation,) = report.of_kind(ViolationKind.DUPLICATE_SCENARIO)
    assert violation.key == "Submit empty form"
    assert violation.files == ("a.feature", "b.feature", "c.feature")


def test_outline_names_collide_with_scenarios(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: A\n  Scenario: Shared\n")
    write_feature("b.feature", "Feature: B\n  Scenario Outline: Shared\n")
    report = validate(tmp_path)
    assert [violation.key for violation in report] == ["Shared"]


def test_ignore_case(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: Login flow\n  Scenario: One\n")
    write_feature("b.feature", "Feature: login FLOW\n  Scenario: Two\n")
    assert validate(tmp_path).is_empty()
    report = validate(tmp_path, AuditConfiguration(case_sensitive=False))
    assert [violation.kind for violation in report] == [ViolationKind.DUPLICATE_FEATURE]


def test_empty_table_cell(tmp_path: Path, write_feature):
    write_feature(
        "table.feature",
        """
        Feature: Table
          Scenario: Users
            Given the users
              | username | password |
              | username |          |
        """,
    )
    report = validate(tmp_path)
    assert list(report) == [
        Violation(ViolationKind.EMPTY_TABLE_CELL, files=("table.feature",), line=5, column=2)
    ]
    assert validate(tmp_path, AuditConfiguration(check_empty_cells=False)).is_empty()


def test_empty_cell_in_examples_header(tmp_path: Path, write_feature):
    write_feature(
        "outline.feature",
        """
        Feature: Outline
          Scenario Outline: Rows
            Examples:
              | a | |
              | 1 | 2 |
        """,
    )
    report = validate(tmp_path)
    assert [(v.kind, v.line, v.column) for v in report] == [
        (ViolationKind.EMPTY_TABLE_CELL, 4, 2)
    ]


def test_unreadable_file_does_not_stop_the_run(tmp_path: Path, write_feature):
    for i in range(9):
        write_feature(f"good{i}.feature", f"Feature: Good {i}\n  Scenario: Good {i}\n")
    write_feature("good0.feature", "Feature: Good 0\n  Scenario: Good 1\n")
    (tmp_path / "bad.feature").write_bytes(b"Feature: \xff\xfe\n")
    report = validate(tmp_path)
    assert len(report.stats) == 9
    kinds = [violation.kind for violation in report]
    assert kinds == [ViolationKind.FILE_READ_ERROR, ViolationKind.DUPLICATE_SCENARIO]
    assert report.violations[0].files == ("bad.feature",)
    assert report.violations[1].files == ("good0.feature", "good1.feature")


def test_injected_discovery(tmp_path: Path, write_feature):
    present = write_feature("present.feature", "Feature: Here\n  Scenario: Here\n")
    missing = tmp_path / "missing.feature"
    report = validate(tmp_path, discover=lambda root: [missing, present])
    assert report.stats == (FileSummary("present.feature", 1),)
    assert [(v.kind, v.files) for v in report] == [
        (ViolationKind.FILE_READ_ERROR, ("missing.feature",))
    ]


def test_excluded_directories_are_skipped(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: Login flow\n  Scenario: One\n")
    write_feature("build/a.feature", "Feature: Login flow\n  Scenario: One\n")
    assert validate(tmp_path).is_empty()


def test_within_file_duplicate(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: A\n  Scenario: Twice\n  Scenario: Twice\n")
    report = validate(tmp_path)
    assert [(v.kind, v.files) for v in report] == [
        (ViolationKind.DUPLICATE_SCENARIO, ("a.feature",))
    ]
    assert validate(tmp_path, AuditConfiguration(within_file_duplicates=False)).is_empty()


def test_violation_order(tmp_path: Path, write_feature):
    write_feature("b.feature", "Feature: Same\n  Scenario: Same\n  | |\n" + scenarios(2, "B"))
    write_feature("a.feature", "Feature: Same\n  Scenario: Same\n" + scenarios(2, "A"))
    report = validate(tmp_path, AuditConfiguration(max_scenarios=2))
    assert [(v.kind, v.files) for v in report] == [
        (ViolationKind.SCENARIO_LIMIT_EXCEEDED, ("a.feature",)),
        (ViolationKind.SCENARIO_LIMIT_EXCEEDED, ("b.feature",)),
        (ViolationKind.DUPLICATE_FEATURE, ("a.feature", "b.feature")),
        (ViolationKind.DUPLICATE_SCENARIO, ("a.feature", "b.feature")),
        (ViolationKind.EMPTY_TABLE_CELL, ("b.feature",)),
    ]


def test_render_is_repeatable(tmp_path: Path, write_feature):
    write_feature("a.feature", "Feature: Same\n  Scenario: One\n  | x | |\n")
    write_feature("b.feature", "Feature: Same\n  Scenario: One\n")
    first = validate(tmp_path).render()
    assert first == validate(tmp_path).render()
    assert first.splitlines() == [
        "a.feature (Total Scenarios: 1)",
        "b.feature (Total Scenarios: 1)",
        "DuplicateFeature: Duplicate feature description 'Same' in: a.feature, b.feature",
        "DuplicateScenario: Duplicate scenario name 'One' in: a.feature, b.feature",
        "EmptyTableCell: Empty table cell at a.feature:3 (column 2)",
    ]
