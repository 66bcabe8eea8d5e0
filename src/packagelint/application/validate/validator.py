"""Validation engine: runs every prepared rule and aggregates the outcome.

Run states: idle -> validating -> complete.
Per rule: pending -> skipped | running -> passed | failed | excepted.

All enabled rules are launched together and awaited until every one settles.
A rule that raises becomes an exception-level result; it never propagates
out of the engine or stops other rules.

Known limitation: there is no timeout or cancellation. A rule or reporter
that never settles stalls the run.
"""

from __future__ import annotations

import asyncio
import copy
import inspect
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from packagelint.application.reporters.broadcast import broadcast_event
from packagelint.application.validate.context import make_validation_context
from packagelint.domain.exceptions import InvalidRuleResultError, MissingPreparedConfigError
from packagelint.domain.model.error_levels import (
    ErrorLevel,
    count_error_types,
    get_highest_error_level,
    is_error_less_severe_than,
)
from packagelint.domain.model.exit_codes import ExitCode
from packagelint.domain.model.results import NOT_RUN, RuleFailure, ValidationOutput
from packagelint.infrastructure.file_finder import FileFinder

if TYPE_CHECKING:
    from packagelint.application.reporters.broadcast import BroadcastOutcome
    from packagelint.application.validate.context import ValidationContext
    from packagelint.domain.model.prepared import PreparedConfig, PreparedRule
    from packagelint.domain.model.results import ValidationResult
    from packagelint.domain.ports.file_finder import FileFinderProtocol

logger = logging.getLogger(__name__)


class DefaultRuleValidator:
    """Stock RuleValidatorProtocol implementation.

    One instance serves one run at a time: run state lives on the instance
    between validate_prepared_config() entry and return.

    Example:
        validator = DefaultRuleValidator()
        output = await validator.validate_prepared_config(prepared_config)
        sys.exit(output.exit_code)
    """

    def __init__(self, file_finder: FileFinderProtocol | None = None) -> None:
        """Initialize with the finder offered to rules.

        Args:
            file_finder: Upward file lookup. None = search from the cwd.
        """
        self._file_finder = file_finder if file_finder is not None else FileFinder()
        self._prepared_config: PreparedConfig | None = None
        self._rule_list: tuple[PreparedRule, ...] = ()
        self._all_results: tuple[ValidationResult, ...] = ()

    async def validate_prepared_config(self, prepared_config: PreparedConfig) -> ValidationOutput:
        """Run every rule of prepared_config.

        Returns:
            Aggregated output. Rule and reporter failures are data in it.

        Raises:
            TypeError: If prepared_config is None.
        """
        if prepared_config is None:
            raise TypeError("validate_prepared_config() must be given a prepared_config")

        self._prepared_config = prepared_config
        self._rule_list = prepared_config.rules
        self._all_results = ()

        await broadcast_event(prepared_config, "on_validation_start", prepared_config)
        self._all_results = await self._validate_all_rules()

        output = self._get_validation_output()
        await broadcast_event(prepared_config, "on_validation_complete", output)

        logger.debug(
            "Validation complete: %d passed, %d failed, %d disabled, exit code %d",
            output.num_rules_passed,
            output.num_rules_failed,
            output.num_rules_disabled,
            output.exit_code,
        )
        return output

    # -------------------------------------------------------------------------
    # Per rule
    # -------------------------------------------------------------------------

    def _require_prepared_config(self, operation: str) -> PreparedConfig:
        if self._prepared_config is None:
            raise MissingPreparedConfigError(operation)
        return self._prepared_config

    def _make_validation_context(self, rule: PreparedRule) -> ValidationContext:
        self._require_prepared_config("make_validation_context")
        return make_validation_context(rule, self._file_finder)

    async def _validate_all_rules(self) -> tuple[ValidationResult, ...]:
        self._require_prepared_config("validate_all_rules")
        results = await asyncio.gather(*(self._validate_one_rule(rule) for rule in self._rule_list))
        return tuple(results)

    async def _validate_one_rule(self, rule: PreparedRule) -> ValidationResult:
        self._require_prepared_config("validate_one_rule")

        if not rule.enabled:
            return NOT_RUN

        await self._before_rule(rule)
        context = self._make_validation_context(rule)
        # Rules get their own copy: nothing they mutate leaks into the prepared config.
        options = copy.deepcopy(dict(rule.options))
        try:
            raw_result = rule.do_validation(options, context)
            if inspect.isawaitable(raw_result):
                raw_result = await raw_result
            result = self._process_rule_result(rule, raw_result)
        # Rule code may raise anything; isolate it from the run.
        except Exception as exc:
            logger.warning(
                "Rule %s raised %s: %s",
                rule.prepared_rule_name,
                type(exc).__name__,
                exc,
            )
            result = self._process_rule_exception(rule, exc)

        await self._after_rule(rule, result)
        return result

    async def _before_rule(self, rule: PreparedRule) -> list[BroadcastOutcome]:
        prepared_config = self._require_prepared_config("before_rule")
        return await broadcast_event(prepared_config, "on_rule_start", rule)

    def _process_rule_result(self, rule: PreparedRule, raw_result: Any) -> RuleFailure | None:
        self._require_prepared_config("process_rule_result")

        if raw_result is None:
            return None
        if not _is_error_pair(raw_result):
            raise InvalidRuleResultError(type(raw_result))

        error_name, error_data = raw_result
        return RuleFailure(
            prepared_rule_name=rule.prepared_rule_name,
            error_level=rule.error_level,
            error_name=error_name,
            error_data=MappingProxyType(dict(error_data or {})),
            message=rule.message_for(error_name),
        )

    def _process_rule_exception(self, rule: PreparedRule, exc: Exception) -> RuleFailure:
        self._require_prepared_config("process_rule_result")
        return RuleFailure(
            prepared_rule_name=rule.prepared_rule_name,
            error_level=ErrorLevel.EXCEPTION,
            error_name=None,
            error_data=None,
            message=str(exc) or type(exc).__name__,
        )

    async def _after_rule(
        self,
        rule: PreparedRule,
        result: ValidationResult,
    ) -> list[BroadcastOutcome]:
        prepared_config = self._require_prepared_config("after_rule")
        return await broadcast_event(prepared_config, "on_rule_result", rule, result)

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    def _get_raw_results(self) -> tuple[ValidationResult, ...]:
        self._require_prepared_config("get_raw_results")
        return self._all_results

    def _get_validation_output(self) -> ValidationOutput:
        prepared_config = self._require_prepared_config("get_validation_output")

        all_results = self._get_raw_results()
        enabled_results = [result for result in all_results if result is not NOT_RUN]
        error_results = tuple(result for result in enabled_results if result is not None)

        error_level_counts = count_error_types(error_results)
        highest_error_level = get_highest_error_level(error_level_counts)
        if is_error_less_severe_than(highest_error_level, prepared_config.fail_on_error_level):
            exit_code = ExitCode.SUCCESS
        else:
            exit_code = ExitCode.FAILURE_VALIDATION

        return ValidationOutput(
            num_rules_enabled=len(enabled_results),
            num_rules_disabled=len(all_results) - len(enabled_results),
            num_rules_passed=len(enabled_results) - len(error_results),
            num_rules_failed=len(error_results),
            exit_code=exit_code,
            highest_error_level=highest_error_level,
            error_level_counts=error_level_counts,
            rules=self._rule_list,
            all_results=all_results,
            error_results=error_results,
        )


def _is_error_pair(value: object) -> bool:
    """Check for an (error_name, error_data) pair."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
        return False
    error_name, error_data = value
    if not isinstance(error_name, str) or not error_name:
        return False
    return error_data is None or isinstance(error_data, Mapping)
