from behave import given, then, when

from features.steps.audit_env import AuditContext


@given('the feature file "{rel_path}"')
def step_feature_file(context: AuditContext, rel_path: str):
    context.audit.add_file(rel_path, context.text)


@given('the feature file "{rel_path}" with {count:d} scenarios')
def step_feature_file_with_scenarios(context: AuditContext, rel_path: str, count: int):
    body = "".join(f"  Scenario: {rel_path} case {i}\n" for i in range(count))
    context.audit.add_file(rel_path, f"Feature: {rel_path}\n{body}")


@given('the unreadable feature file "{rel_path}"')
def step_unreadable_file(context: AuditContext, rel_path: str):
    context.audit.project_files[rel_path] = b"Feature: \xff\xfe\n"


@given("the project file")
def step_project_file(context: AuditContext):
    context.audit.add_file("pyproject.toml", context.text)


@when('I run gherkin-guard with "{args}"')
def step_run(context: AuditContext, args: str):
    context.result = context.audit.run(*args.split())


@when("I run gherkin-guard with no arguments")
def step_run_no_args(context: AuditContext):
    context.result = context.audit.run()


@then("the exit code is {exit_code}")
def step_exit_code(context: AuditContext, exit_code: str):
    assert context.result
    assert context.result.exit_code == int(exit_code), context.result.output


@then('the output contains "{message}"')
def step_output_contains_message(context: AuditContext, message: str):
    assert context.result
    assert message in context.result.output, context.result.output


@then('the output does not contain "{message}"')
def step_output_does_not_contain_message(context: AuditContext, message: str):
    assert context.result
    assert message not in context.result.output, context.result.output


@then("the output contains the text")
def step_output_contains_text(context: AuditContext):
    assert context.result
    assert context.text.strip() in context.result.output, context.result.output


@then('the file "{rel_path}" contains the text')
def step_file_contains_text(context: AuditContext, rel_path: str):
    assert context.text.strip() in context.audit.read(rel_path)
