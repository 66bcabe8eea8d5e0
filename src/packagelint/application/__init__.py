"""packagelint application layer.

Orchestrates domain objects: name resolution, config preparation,
rule execution and reporter broadcasting.
"""

from packagelint.application.api import prepare_config, run_packagelint, validate_prepared_config
from packagelint.application.prepare import DefaultRulePreparer, RuleAccumulator, accumulate_rules
from packagelint.application.reporters import (
    BroadcastOutcome,
    broadcast_event,
    broadcast_event_using_reporters,
)
from packagelint.application.resolve import Deferred, NameResolver, resolve_deferred
from packagelint.application.validate import (
    DefaultRuleValidator,
    ValidationContext,
    make_validation_context,
)

__all__ = [
    # Entry points
    "prepare_config",
    "run_packagelint",
    "validate_prepared_config",
    # Preparation
    "DefaultRulePreparer",
    "RuleAccumulator",
    "accumulate_rules",
    # Resolution
    "Deferred",
    "NameResolver",
    "resolve_deferred",
    # Validation
    "DefaultRuleValidator",
    "ValidationContext",
    "make_validation_context",
    # Reporters
    "BroadcastOutcome",
    "broadcast_event",
    "broadcast_event_using_reporters",
]
