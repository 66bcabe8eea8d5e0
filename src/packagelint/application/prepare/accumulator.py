"""Rule accumulation: entries and rulesets -> flat list of prepared rules.

Entries are processed depth-first, left to right. Each entry either:
- creates a prepared rule from a definition's defaults,
- refines the prepared rule of the same name accumulated earlier,
- creates a new rule from an existing one (extend_rule), or
- expands a ruleset, applying its enabled/error_level as defaults to
  everything inside it. Inner entries override those defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from packagelint.application.prepare.merge import deep_merge
from packagelint.application.resolve.resolver import is_qualified_name
from packagelint.domain.exceptions import (
    AbstractRuleError,
    InvalidRuleEntryError,
    PluginImportError,
    RuleNameCollisionError,
    RulesetCycleError,
)
from packagelint.domain.model.definitions import RuleDefinition, RulesetDefinition
from packagelint.domain.model.entries import normalize_rule_entry
from packagelint.domain.model.error_levels import DEFAULT_ERROR_LEVEL, ErrorLevel
from packagelint.domain.model.prepared import PreparedRule

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from packagelint.application.resolve.resolver import NameResolver
    from packagelint.domain.model.entries import RuleConfig, RuleEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _RulesetDefaults:
    """Overrides inherited from enclosing ruleset entries."""

    enabled: bool | None = None
    error_level: ErrorLevel | None = None

    def refined_by(self, config: RuleConfig) -> _RulesetDefaults:
        """Defaults for entries inside the ruleset named by config."""
        return _RulesetDefaults(
            enabled=config.enabled if config.enabled is not None else self.enabled,
            error_level=config.error_level if config.error_level is not None else self.error_level,
        )

    def enabled_for(self, config: RuleConfig) -> bool:
        if config.enabled is not None:
            return config.enabled
        if self.enabled is not None:
            return self.enabled
        return True

    def error_level_for(self, config: RuleConfig, fallback: ErrorLevel) -> ErrorLevel:
        if config.error_level is not None:
            return config.error_level
        if self.error_level is not None:
            return self.error_level
        return fallback


_NO_DEFAULTS = _RulesetDefaults()


def _merged_messages(base: Mapping[str, str], config: RuleConfig) -> Mapping[str, str]:
    return MappingProxyType({**base, **(config.messages or {})})


def _merged_options(base: Mapping[str, Any], config: RuleConfig) -> Mapping[str, Any]:
    return MappingProxyType(deep_merge(base, config.options or {}))


class RuleAccumulator:
    """Builds the ordered, uniquely-named list of prepared rules for one run.

    One accumulator per preparation: state is never shared between runs.

    Example:
        accumulator = RuleAccumulator(resolver)
        for entry in user_config.rules:
            await accumulator.add_entry(entry)
        rules = accumulator.prepared_rules
    """

    def __init__(self, resolver: NameResolver) -> None:
        """Initialize with a name resolver.

        Raises:
            TypeError: If resolver is None.
        """
        if resolver is None:
            raise TypeError("resolver must not be None")

        self._resolver = resolver
        # Insertion order is run order; refinements keep their original slot.
        self._prepared: dict[str, PreparedRule] = {}
        # prepared name -> base definition name the rule was built from
        self._origins: dict[str, str] = {}
        # prepared name -> underlying definition, for reset_options
        self._definitions: dict[str, RuleDefinition] = {}
        self._ruleset_stack: list[str] = []

    @property
    def prepared_rules(self) -> list[PreparedRule]:
        """Prepared rules accumulated so far, in run order."""
        return list(self._prepared.values())

    def get_prepared_rule(self, prepared_rule_name: str) -> PreparedRule | None:
        """Current prepared state of a rule, or None if not accumulated."""
        return self._prepared.get(prepared_rule_name)

    async def add_entries(self, entries: Iterable[RuleEntry]) -> list[PreparedRule]:
        """Process entries in order and return all prepared rules."""
        for entry in entries:
            await self.add_entry(entry)
        return self.prepared_rules

    async def add_entry(self, entry: RuleEntry) -> list[str]:
        """Process one entry.

        Returns:
            Prepared rule names created or updated by the entry.

        Raises:
            InvalidConfigError: Malformed entry, collision, abstract rule,
                ruleset cycle, or resolution failure.
        """
        return await self._process_entry(entry, _NO_DEFAULTS)

    async def _process_entry(self, entry: RuleEntry, defaults: _RulesetDefaults) -> list[str]:
        config = normalize_rule_entry(entry)

        if config.is_extension:
            return [await self._extend_rule(config, defaults)]

        existing = self._prepared.get(config.name)
        if existing is not None:
            return [self._refine_rule(existing, config, defaults)]

        definition = await self._resolver.resolve_rule(config.name)
        if isinstance(definition, RulesetDefinition):
            return await self._expand_ruleset(definition, config, defaults)
        return [self._create_rule(definition, config, defaults)]

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def _create_rule(
        self,
        definition: RuleDefinition,
        config: RuleConfig,
        defaults: _RulesetDefaults,
    ) -> str:
        if definition.is_abstract:
            raise AbstractRuleError(config.name)

        default_error_level = definition.default_error_level or DEFAULT_ERROR_LEVEL
        prepared = PreparedRule(
            prepared_rule_name=config.name,
            docs=definition.docs,
            enabled=defaults.enabled_for(config),
            extended_from=None,
            default_error_level=default_error_level,
            error_level=defaults.error_level_for(config, default_error_level),
            default_options=definition.default_options,
            options=_merged_options(definition.default_options, config),
            messages=_merged_messages(definition.messages, config),
            do_validation=definition.do_validation,
        )
        self._store(prepared, origin=config.name, definition=definition)
        return config.name

    def _refine_rule(
        self,
        existing: PreparedRule,
        config: RuleConfig,
        defaults: _RulesetDefaults,
    ) -> str:
        prepared = replace(
            existing,
            enabled=defaults.enabled_for(config),
            error_level=defaults.error_level_for(config, existing.error_level),
            options=_merged_options(existing.options, config),
            messages=_merged_messages(existing.messages, config),
        )
        self._prepared[config.name] = prepared
        logger.debug("Refined rule %s", config.name)
        return config.name

    async def _extend_rule(self, config: RuleConfig, defaults: _RulesetDefaults) -> str:
        base_name = config.extend_rule
        if base_name == config.name:
            raise InvalidRuleEntryError(config.name, "a rule cannot extend itself")

        base = self._prepared.get(base_name)
        if base is not None:
            definition = self._definitions[base_name]
            origin = self._origins[base_name]
            start_options = definition.default_options if config.reset_options else base.options
            start_messages = base.messages
            start_error_level = base.error_level
        else:
            resolved = await self._resolver.resolve_rule(base_name)
            if isinstance(resolved, RulesetDefinition):
                raise InvalidRuleEntryError(config.name, f"cannot extend ruleset {base_name!r}")
            definition = resolved
            origin = base_name
            start_options = definition.default_options
            start_messages = definition.messages
            start_error_level = definition.default_error_level or DEFAULT_ERROR_LEVEL

        await self._check_claim(config.name, origin)

        prepared = PreparedRule(
            prepared_rule_name=config.name,
            docs=definition.docs,
            enabled=defaults.enabled_for(config),
            extended_from=base_name,
            default_error_level=definition.default_error_level or DEFAULT_ERROR_LEVEL,
            error_level=defaults.error_level_for(config, start_error_level),
            default_options=definition.default_options,
            options=_merged_options(start_options, config),
            messages=_merged_messages(start_messages, config),
            do_validation=definition.do_validation,
        )
        self._store(prepared, origin=origin, definition=definition)
        return config.name

    async def _check_claim(self, prepared_rule_name: str, origin: str) -> None:
        """Reject a new rule name already owned by a different base."""
        existing_origin = self._origins.get(prepared_rule_name)
        if existing_origin is not None:
            if existing_origin != origin:
                raise RuleNameCollisionError(prepared_rule_name, existing_origin, origin)
            return

        # A new name must not shadow a real definition that could be listed later.
        if is_qualified_name(prepared_rule_name) and await self._is_resolvable(prepared_rule_name):
            raise RuleNameCollisionError(prepared_rule_name, prepared_rule_name, origin)

    async def _is_resolvable(self, name: str) -> bool:
        try:
            await self._resolver.resolve_rule(name)
        except PluginImportError:
            return False
        return True

    def _store(self, prepared: PreparedRule, *, origin: str, definition: RuleDefinition) -> None:
        name = prepared.prepared_rule_name
        self._prepared[name] = prepared
        self._origins[name] = origin
        self._definitions[name] = definition
        logger.debug(
            "Prepared rule %s (origin=%s, enabled=%s, error_level=%s)",
            name,
            origin,
            prepared.enabled,
            prepared.error_level.value,
        )

    # -------------------------------------------------------------------------
    # Rulesets
    # -------------------------------------------------------------------------

    async def _expand_ruleset(
        self,
        definition: RulesetDefinition,
        config: RuleConfig,
        defaults: _RulesetDefaults,
    ) -> list[str]:
        if config.options is not None or config.messages is not None or config.reset_options:
            raise InvalidRuleEntryError(
                config.name, "rulesets accept only enabled and error_level overrides"
            )
        if config.name in self._ruleset_stack:
            raise RulesetCycleError([*self._ruleset_stack, config.name])

        inner_defaults = defaults.refined_by(config)
        touched: list[str] = []
        self._ruleset_stack.append(config.name)
        try:
            for inner_entry in definition.rules:
                for name in await self._process_entry(inner_entry, inner_defaults):
                    if name not in touched:
                        touched.append(name)
        finally:
            self._ruleset_stack.pop()

        logger.debug("Expanded ruleset %s into %d rule(s)", config.name, len(touched))
        return touched


async def accumulate_rules(
    entries: Iterable[RuleEntry],
    resolver: NameResolver,
) -> list[PreparedRule]:
    """Expand entries into prepared rules with a fresh accumulator."""
    return await RuleAccumulator(resolver).add_entries(entries)
