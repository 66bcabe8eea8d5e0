"""Built-in rules for exercising the engine end to end."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from packagelint.domain.model.definitions import RuleDefinition, RulesetDefinition
from packagelint.domain.model.error_levels import ErrorLevel

if TYPE_CHECKING:
    from packagelint.application.validate.context import ValidationContext
    from packagelint.domain.model.definitions import ValidationFnReturn

_DOCS_URL = "https://github.com/spautz/packagelint"


def always_pass(options: dict[str, Any], context: ValidationContext) -> ValidationFnReturn:
    return None


def always_fail(options: dict[str, Any], context: ValidationContext) -> ValidationFnReturn:
    return context.create_error_to_return("always_fail")


def always_throw(options: dict[str, Any], context: ValidationContext) -> ValidationFnReturn:
    raise RuntimeError("This rule will always throw")


async def file_exists(options: dict[str, Any], context: ValidationContext) -> ValidationFnReturn:
    """Fail unless exactly one options["file_name"] is found upward from the cwd."""
    file_name = options.get("file_name")
    if not file_name:
        raise ValueError(f"{context.prepared_rule_name} requires a file_name option")

    file_paths = await context.find_file_up(file_name)
    context.set_error_data({"file_name": file_name, "file_paths": file_paths})
    if file_paths is None:
        return context.create_error_to_return("file_not_found")
    if len(file_paths) > 1:
        return context.create_error_to_return("multiple_files_found")
    return None


ALWAYS_PASS = RuleDefinition(
    name="always-pass",
    do_validation=always_pass,
    docs={"description": "This rule will always pass.", "url": _DOCS_URL},
    default_error_level=ErrorLevel.ERROR,
)

ALWAYS_FAIL = RuleDefinition(
    name="always-fail",
    do_validation=always_fail,
    docs={"description": "This rule will always fail.", "url": _DOCS_URL},
    default_error_level=ErrorLevel.ERROR,
    messages={"always_fail": "This rule will always fail"},
)

ALWAYS_THROW = RuleDefinition(
    name="always-throw",
    do_validation=always_throw,
    docs={"description": "This rule will always throw an exception.", "url": _DOCS_URL},
    default_error_level=ErrorLevel.ERROR,
)

FILE_EXISTS = RuleDefinition(
    name="file-exists",
    do_validation=file_exists,
    docs={
        "description": "Require a file in the project directory or one of its parents.",
        "url": _DOCS_URL,
    },
    default_options={"file_name": None},
    messages={
        "file_not_found": "Required file not found",
        "multiple_files_found": "Required file found in more than one directory",
    },
    is_abstract=True,
)

SMOKE_TEST = RulesetDefinition(
    name="smoke-test",
    rules=("packagelint.builtin:always-pass",),
    docs={"description": "Checks that packagelint itself can run."},
)
