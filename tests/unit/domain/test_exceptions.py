"""Tests for domain/exceptions.py."""

import pytest

from packagelint.domain.exceptions import (
    AbstractRuleError,
    InternalConsistencyError,
    InvalidConfigError,
    InvalidErrorLevelError,
    InvalidExitCodeError,
    InvalidNameError,
    InvalidReporterOptionsError,
    InvalidRuleEntryError,
    InvalidRuleResultError,
    MissingConfigError,
    MissingPreparedConfigError,
    MissingValidatorError,
    ModuleLoadError,
    PackagelintError,
    PluginImportError,
    RuleNameCollisionError,
    RulesetCycleError,
)


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidErrorLevelError("fatal"),
            InvalidRuleEntryError(42, "bad shape"),
            RuleNameCollisionError("custom", "pkg:a", "pkg:b"),
            AbstractRuleError("pkg:abstract"),
            RulesetCycleError(["pkg:a", "pkg:b", "pkg:a"]),
            InvalidNameError("badname"),
            PluginImportError("pkg", "does not provide rule 'x'"),
            InvalidReporterOptionsError("pkg:recorder", "ValueError: bad level"),
        ],
    )
    def test_invalid_config_family(self, error: InvalidConfigError) -> None:
        assert isinstance(error, InvalidConfigError)
        assert isinstance(error, ValueError)
        assert isinstance(error, PackagelintError)

    @pytest.mark.parametrize(
        "error",
        [
            MissingPreparedConfigError("get_raw_results"),
            MissingValidatorError("Missing rule_validator in prepared_config"),
            InvalidExitCodeError(9),
        ],
    )
    def test_internal_consistency_family(self, error: InternalConsistencyError) -> None:
        assert isinstance(error, InternalConsistencyError)
        assert isinstance(error, RuntimeError)
        assert not isinstance(error, InvalidConfigError)

    def test_missing_config_is_not_invalid_config(self) -> None:
        assert not isinstance(MissingConfigError(), InvalidConfigError)

    def test_module_load_error_is_not_invalid_config(self) -> None:
        assert not isinstance(ModuleLoadError("pkg", "missing"), InvalidConfigError)

    def test_invalid_rule_result_is_type_error(self) -> None:
        assert isinstance(InvalidRuleResultError(int), TypeError)


class TestMessages:
    """Tests for messages and attributes."""

    def test_collision_names_both_origins(self) -> None:
        error = RuleNameCollisionError("custom", "pkg:a", "pkg:b")
        assert "'pkg:a'" in str(error)
        assert "'pkg:b'" in str(error)
        assert error.prepared_rule_name == "custom"

    def test_cycle_chain(self) -> None:
        error = RulesetCycleError(["pkg:a", "pkg:b", "pkg:a"])
        assert error.chain == ("pkg:a", "pkg:b", "pkg:a")
        assert "pkg:a -> pkg:b -> pkg:a" in str(error)

    def test_invalid_name(self) -> None:
        error = InvalidNameError("badname", "reporter")
        assert str(error) == "Reporter 'badname' is not a valid reporter name"

    def test_plugin_import_names_module(self) -> None:
        error = PluginImportError("pkg", "does not provide any packagelint rules")
        assert str(error) == "Package 'pkg' does not provide any packagelint rules"
        assert error.module_id == "pkg"

    def test_reporter_options_names_reporter(self) -> None:
        error = InvalidReporterOptionsError("pkg:recorder", "ValueError: bad level")
        assert str(error) == "Reporter 'pkg:recorder' rejected its options: ValueError: bad level"
        assert error.reporter_name == "pkg:recorder"

    def test_missing_prepared_config(self) -> None:
        error = MissingPreparedConfigError("get_raw_results")
        assert str(error) == (
            "Packagelint internal error: Cannot get_raw_results when no prepared_config is set"
        )

    def test_invalid_rule_result(self) -> None:
        assert "got int" in str(InvalidRuleResultError(int))

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            PluginImportError("pkg", "")

    def test_empty_chain_raises(self) -> None:
        with pytest.raises(ValueError, match="chain must not be empty"):
            RulesetCycleError([])
