"""packagelint - pluggable rule-validation engine for project configuration."""

__version__ = "0.1.0"

from packagelint.application import (
    Deferred,
    DefaultRulePreparer,
    DefaultRuleValidator,
    ValidationContext,
    prepare_config,
    run_packagelint,
    validate_prepared_config,
)
from packagelint.domain.exceptions import (
    InternalConsistencyError,
    InvalidConfigError,
    MissingConfigError,
    PackagelintError,
    PluginImportError,
)
from packagelint.domain.model import (
    NOT_RUN,
    ErrorLevel,
    ExitCode,
    PreparedConfig,
    PreparedRule,
    RuleConfig,
    RuleDefinition,
    RuleFailure,
    RulesetDefinition,
    UserConfig,
    ValidationOutput,
)
from packagelint.infrastructure import PluginRegistry, configure_logging

__all__ = [
    "__version__",
    # Entry points
    "prepare_config",
    "run_packagelint",
    "validate_prepared_config",
    "configure_logging",
    # Strategies
    "DefaultRulePreparer",
    "DefaultRuleValidator",
    "PluginRegistry",
    # Plugin authoring
    "Deferred",
    "RuleDefinition",
    "RulesetDefinition",
    "ValidationContext",
    # Config and results
    "ErrorLevel",
    "ExitCode",
    "NOT_RUN",
    "PreparedConfig",
    "PreparedRule",
    "RuleConfig",
    "RuleFailure",
    "UserConfig",
    "ValidationOutput",
    # Errors
    "PackagelintError",
    "InvalidConfigError",
    "MissingConfigError",
    "PluginImportError",
    "InternalConsistencyError",
]
