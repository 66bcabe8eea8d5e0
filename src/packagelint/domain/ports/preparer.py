"""Rule preparer protocol: turns a UserConfig into a PreparedConfig."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from packagelint.domain.model.prepared import PreparedConfig
    from packagelint.domain.model.user_config import UserConfig


class RulePreparerProtocol(Protocol):
    """Contract for config preparation strategies.

    DefaultRulePreparer is the stock implementation. Forks substitute their
    own through UserConfig.rule_preparer; only prepare_user_config is called
    from outside.
    """

    async def prepare_user_config(self, user_config: UserConfig) -> PreparedConfig:
        """Resolve, expand and merge a user config.

        Raises:
            InvalidConfigError: On any configuration or resolution failure.
                No partial PreparedConfig is produced.
        """
        ...
