"""Domain model: error levels, exit codes, definitions, entries, prepared config, results."""

from packagelint.domain.model.definitions import (
    RuleDefinition,
    RulesetDefinition,
    is_rule_definition,
    is_ruleset_definition,
)
from packagelint.domain.model.entries import RuleConfig, normalize_rule_entry
from packagelint.domain.model.error_levels import (
    ALL_ERROR_LEVEL_VALUES,
    DEFAULT_ERROR_LEVEL,
    ERROR_LEVELS_IN_SEVERITY_ORDER,
    ErrorLevel,
    compare_error_levels,
    count_error_types,
    get_highest_error_level,
    is_error_less_severe_than,
    is_error_more_severe_than,
    is_valid_error_level,
    parse_error_level,
)
from packagelint.domain.model.exit_codes import (
    ALL_EXIT_CODE_VALUES,
    ExitCode,
    exit_code_for_error,
    is_failure_exit_code,
    is_success_exit_code,
    is_valid_exit_code,
)
from packagelint.domain.model.prepared import PreparedConfig, PreparedRule
from packagelint.domain.model.results import (
    NOT_RUN,
    RuleFailure,
    RuleStatus,
    ValidationOutput,
    rule_status,
)
from packagelint.domain.model.user_config import DEFAULT_USER_CONFIG, UserConfig

__all__ = [
    # Error levels
    "ALL_ERROR_LEVEL_VALUES",
    "DEFAULT_ERROR_LEVEL",
    "ERROR_LEVELS_IN_SEVERITY_ORDER",
    "ErrorLevel",
    "compare_error_levels",
    "count_error_types",
    "get_highest_error_level",
    "is_error_less_severe_than",
    "is_error_more_severe_than",
    "is_valid_error_level",
    "parse_error_level",
    # Exit codes
    "ALL_EXIT_CODE_VALUES",
    "ExitCode",
    "exit_code_for_error",
    "is_failure_exit_code",
    "is_success_exit_code",
    "is_valid_exit_code",
    # Definitions and entries
    "RuleDefinition",
    "RulesetDefinition",
    "is_rule_definition",
    "is_ruleset_definition",
    "RuleConfig",
    "normalize_rule_entry",
    # Config
    "DEFAULT_USER_CONFIG",
    "UserConfig",
    "PreparedConfig",
    "PreparedRule",
    # Results
    "NOT_RUN",
    "RuleFailure",
    "RuleStatus",
    "ValidationOutput",
    "rule_status",
]
