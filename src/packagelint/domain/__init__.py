"""packagelint domain layer.

Pure domain logic with no I/O.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

from packagelint.domain.exceptions import (
    InternalConsistencyError,
    InvalidConfigError,
    PackagelintError,
)
from packagelint.domain.model import (
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

__all__ = [
    # Exceptions
    "PackagelintError",
    "InvalidConfigError",
    "InternalConsistencyError",
    # Model
    "ErrorLevel",
    "ExitCode",
    "RuleDefinition",
    "RulesetDefinition",
    "RuleConfig",
    "UserConfig",
    "PreparedRule",
    "PreparedConfig",
    "RuleFailure",
    "ValidationOutput",
]
