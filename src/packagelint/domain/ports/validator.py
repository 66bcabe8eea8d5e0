"""Rule validator protocol: executes a PreparedConfig."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from packagelint.domain.model.prepared import PreparedConfig
    from packagelint.domain.model.results import ValidationOutput


class RuleValidatorProtocol(Protocol):
    """Contract for validation strategies.

    DefaultRuleValidator is the stock implementation. Forks substitute their
    own through UserConfig.rule_validator; only validate_prepared_config is
    called from outside.
    """

    async def validate_prepared_config(self, prepared_config: PreparedConfig) -> ValidationOutput:
        """Run every prepared rule and aggregate the results.

        Rule exceptions and reporter failures are converted to data,
        never raised.
        """
        ...
