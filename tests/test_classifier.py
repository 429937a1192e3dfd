import pytest

from gherkin_guard.audit.classifier import Token, classify


@pytest.mark.parametrize(
    "line, token",
    [
        ("", Token.BLANK),
        ("# a comment", Token.TAG_OR_COMMENT),
        ("@smoke @slow", Token.TAG_OR_COMMENT),
        ("Feature: Login flow", Token.FEATURE),
        ("Scenario Outline: Add <a> and <b>", Token.SCENARIO_OUTLINE),
        ("Scenario: Submit empty form", Token.SCENARIO),
        ("Examples:", Token.EXAMPLES),
        ("| a | b |", Token.TABLE_ROW),
        ("Given a user", Token.OTHER),
        ("| not closed", Token.OTHER),
        ("Scenarios: plural is not a keyword", Token.OTHER),
    ],
)
def test_classify_token(line: str, token: Token):
    assert classify(line).token is token


def test_outline_is_not_a_scenario():
    line = classify("Scenario Outline: Eating cucumbers")
    assert line.token is Token.SCENARIO_OUTLINE
    assert line.text == "Eating cucumbers"


def test_keyword_payload_is_trimmed():
    assert classify("Feature:   Login flow  ").text == "Login flow"
    assert classify("Scenario:Submit").text == "Submit"


def test_empty_payload_is_legal():
    line = classify("Feature:")
    assert line.token is Token.FEATURE
    assert line.text == ""


def test_table_row_cells():
    assert classify("| username | password |").cells == ("username", "password")
    assert classify("| username | |").cells == ("username", "")
    assert classify("||").cells == ("",)
    assert classify("|").cells == ()


def test_tag_wins_over_keyword_text():
    assert classify("# Scenario: commented out").token is Token.TAG_OR_COMMENT
