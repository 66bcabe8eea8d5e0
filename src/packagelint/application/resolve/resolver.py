"""Name resolution: "<module>:<entity>" -> definition or reporter constructor."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from packagelint.application.resolve.deferred import resolve_deferred
from packagelint.domain.exceptions import InvalidNameError, ModuleLoadError, PluginImportError
from packagelint.domain.model.definitions import RuleDefinition, RulesetDefinition

if TYPE_CHECKING:
    from collections.abc import Callable

    from packagelint.domain.ports.module_loader import ModuleLoaderProtocol
    from packagelint.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

RULES_EXPORT_NAME = "packagelint_rules"
REPORTERS_EXPORT_NAME = "packagelint_reporters"

NAME_SEPARATOR = ":"


def split_qualified_name(name: str, kind: str = "rule") -> tuple[str, str]:
    """Split "<module>:<entity>" into its two parts.

    Raises:
        InvalidNameError: Unless there are exactly two non-empty parts.
    """
    if not isinstance(name, str):
        raise InvalidNameError(repr(name), kind)
    parts = name.split(NAME_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise InvalidNameError(name, kind)
    return parts[0], parts[1]


def is_qualified_name(name: str) -> bool:
    """Check whether name has the "<module>:<entity>" shape."""
    parts = name.split(NAME_SEPARATOR)
    return len(parts) == 2 and all(parts)


class NameResolver:
    """Resolves qualified names through a module loader.

    Rules and rulesets are read from the module's `packagelint_rules` export,
    reporters from `packagelint_reporters`. Both the export and each entry
    may be deferred.
    """

    def __init__(self, loader: ModuleLoaderProtocol) -> None:
        """Initialize with a module loader.

        Raises:
            TypeError: If loader is None.
        """
        if loader is None:
            raise TypeError("loader must not be None")
        self._loader = loader

    async def resolve_rule(self, name: str) -> RuleDefinition | RulesetDefinition:
        """Resolve a rule or ruleset definition.

        Raises:
            InvalidNameError: If name is malformed. Raised before any loading.
            PluginImportError: If the module, export or entry is missing, or
                the entry is not a definition.
        """
        module_id, entity_name = split_qualified_name(name, "rule")
        value = await self._resolve_export(module_id, entity_name, RULES_EXPORT_NAME, "rule")
        if not isinstance(value, (RuleDefinition, RulesetDefinition)):
            raise PluginImportError(
                module_id,
                f"provides {entity_name!r} but it is not a rule or ruleset definition "
                f"(got {type(value).__name__})",
            )
        return value

    async def resolve_reporter(self, name: str) -> Callable[..., ReporterProtocol]:
        """Resolve a reporter constructor (a class or factory function).

        Raises:
            InvalidNameError: If name is malformed. Raised before any loading.
            PluginImportError: If the module, export or entry is missing, or
                the entry is not callable.
        """
        module_id, entity_name = split_qualified_name(name, "reporter")
        value = await self._resolve_export(
            module_id, entity_name, REPORTERS_EXPORT_NAME, "reporter"
        )
        if not callable(value):
            raise PluginImportError(
                module_id,
                f"provides reporter {entity_name!r} but it is not callable "
                f"(got {type(value).__name__})",
            )
        return value

    async def _resolve_export(
        self,
        module_id: str,
        entity_name: str,
        export_name: str,
        kind: str,
    ) -> object:
        try:
            exports = await self._loader.load(module_id)
        except ModuleLoadError as exc:
            raise PluginImportError(module_id, f"cannot be loaded: {exc.reason}") from exc

        registry = await _resolve_lazy(module_id, getattr(exports, export_name, None), export_name)
        if registry is None:
            raise PluginImportError(module_id, f"does not provide any packagelint {kind}s")
        if not isinstance(registry, Mapping):
            raise PluginImportError(module_id, f"does not provide any valid packagelint {kind}s")
        if entity_name not in registry:
            raise PluginImportError(module_id, f"does not provide {kind} {entity_name!r}")

        logger.debug("Resolved %s %s:%s", kind, module_id, entity_name)
        return await _resolve_lazy(module_id, registry[entity_name], f"{kind} {entity_name!r}")


async def _resolve_lazy(module_id: str, value: object, what: str) -> object:
    try:
        return await resolve_deferred(value)
    # Deferred factories run plugin code, which may raise anything.
    except Exception as exc:
        raise PluginImportError(
            module_id, f"failed to load {what}: {type(exc).__name__}: {exc}"
        ) from exc
