"""End-to-end runs through the public entry points.

Uses the real built-in plugin, loaded by module path, plus an in-memory
plugin registered with deferred exports.
"""

from pathlib import Path
from typing import Any

import pytest

import packagelint
from packagelint import (
    Deferred,
    ErrorLevel,
    ExitCode,
    PluginRegistry,
    RuleDefinition,
    RulesetDefinition,
    UserConfig,
    prepare_config,
    run_packagelint,
    validate_prepared_config,
)
from packagelint.domain.exceptions import InvalidConfigError, RuleNameCollisionError
from packagelint.domain.model.exit_codes import exit_code_for_error
from packagelint.domain.model.results import NOT_RUN
from packagelint.infrastructure.module_loader import ImportlibModuleLoader
from tests.factories import RecordingReporter

pytestmark = pytest.mark.integration


def _max_length(options: dict[str, Any], context: Any) -> Any:
    context.set_error_data({"limit": options["limit"]})
    if len(options["value"]) > options["limit"]:
        return context.create_error_to_return("too_long")
    return None


def _load_my_rules() -> dict[str, Any]:
    max_length = RuleDefinition(
        name="max-length",
        do_validation=_max_length,
        default_error_level=ErrorLevel.WARNING,
        default_options={"limit": 3, "value": ""},
        messages={"too_long": "Value is too long"},
    )
    return {
        "max-length": max_length,
        "recommended": RulesetDefinition(
            name="recommended",
            rules=(
                ("my_plugin:max-length", {"value": "abc"}),
                "packagelint.builtin:smoke-test",
            ),
        ),
    }


def _loader() -> PluginRegistry:
    registry = PluginRegistry(fallback=ImportlibModuleLoader())
    registry.register_exports(
        "my_plugin",
        type(
            "MyPlugin",
            (),
            {
                "packagelint_rules": Deferred(_load_my_rules),
                "packagelint_reporters": {"recorder": RecordingReporter},
            },
        ),
    )
    return registry


class TestEndToEnd:
    """Full prepare + validate runs."""

    @pytest.mark.asyncio
    async def test_smoke_test_ruleset_passes(self) -> None:
        output = await run_packagelint(
            {"rules": ["packagelint.builtin:smoke-test"]},
            loader=ImportlibModuleLoader(),
        )
        assert output.exit_code is ExitCode.SUCCESS
        assert output.num_rules_passed == 1
        assert output.rules[0].prepared_rule_name == "packagelint.builtin:always-pass"

    @pytest.mark.asyncio
    async def test_mixed_run(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "LICENSE").write_text("MIT\n")
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)

        user_config = UserConfig(
            fail_on_error_level="error",
            rules=(
                "my_plugin:recommended",
                {
                    "name": "too-short-limit",
                    "extend_rule": "my_plugin:max-length",
                    "options": {"limit": 1},
                },
                ("packagelint.builtin:always-throw", False),
                ("packagelint.builtin:always-fail", "suggestion"),
                {
                    "name": "has-license",
                    "extend_rule": "packagelint.builtin:file-exists",
                    "options": {"file_name": "LICENSE"},
                },
                {
                    "name": "has-readme",
                    "extend_rule": "packagelint.builtin:file-exists",
                    "options": {"file_name": "README.md"},
                    "error_level": "warning",
                },
            ),
            reporters={"my_plugin:recorder": {}},
        )

        prepared = await prepare_config(user_config, loader=_loader())
        names = [rule.prepared_rule_name for rule in prepared.rules]
        assert names == [
            "my_plugin:max-length",
            "packagelint.builtin:always-pass",
            "too-short-limit",
            "packagelint.builtin:always-throw",
            "packagelint.builtin:always-fail",
            "has-license",
            "has-readme",
        ]

        output = await validate_prepared_config(prepared)
        results = dict(zip(names, output.all_results, strict=True))

        assert results["my_plugin:max-length"] is None
        assert results["packagelint.builtin:always-pass"] is None
        assert results["packagelint.builtin:always-throw"] is NOT_RUN
        assert results["too-short-limit"].error_name == "too_long"
        assert results["too-short-limit"].error_level is ErrorLevel.WARNING
        assert dict(results["too-short-limit"].error_data) == {"limit": 1}
        assert results["packagelint.builtin:always-fail"].error_level is ErrorLevel.SUGGESTION
        assert results["has-license"] is None
        assert results["has-readme"].message == "Required file not found"

        assert output.num_rules_disabled == 1
        assert output.num_rules_failed == 3
        assert output.highest_error_level is ErrorLevel.WARNING
        assert output.exit_code is ExitCode.SUCCESS

        (reporter,) = prepared.reporters
        assert reporter.events[0] == "on_validation_start"
        assert reporter.events[-1] == "on_validation_complete"
        assert reporter.events.count("on_rule_start") == 6
        assert reporter.events.count("on_rule_result") == 6

    @pytest.mark.asyncio
    async def test_warning_threshold_fails(self) -> None:
        output = await run_packagelint(
            UserConfig(
                fail_on_error_level="warning",
                rules=(("my_plugin:max-length", {"value": "abcdef"}),),
            ),
            loader=_loader(),
        )
        assert output.exit_code is ExitCode.FAILURE_VALIDATION

    @pytest.mark.asyncio
    async def test_collision_maps_to_invalid_config_exit_code(self) -> None:
        with pytest.raises(RuleNameCollisionError) as exc_info:
            await prepare_config(
                UserConfig(
                    rules=(
                        {"name": "custom", "extend_rule": "packagelint.builtin:always-pass"},
                        {"name": "custom", "extend_rule": "packagelint.builtin:always-fail"},
                    )
                ),
                loader=_loader(),
            )
        assert exit_code_for_error(exc_info.value) is ExitCode.FAILURE_INVALID_CONFIG

    @pytest.mark.asyncio
    async def test_bad_reporter_options_map_to_invalid_config_exit_code(self) -> None:
        with pytest.raises(InvalidConfigError, match="Unknown log level") as exc_info:
            await run_packagelint(
                {
                    "rules": [],
                    "reporters": {"packagelint.builtin:logging-reporter": {"level": "nope"}},
                },
                loader=ImportlibModuleLoader(),
            )
        assert exit_code_for_error(exc_info.value) is ExitCode.FAILURE_INVALID_CONFIG

    def test_version(self) -> None:
        assert packagelint.__version__ == "0.1.0"
