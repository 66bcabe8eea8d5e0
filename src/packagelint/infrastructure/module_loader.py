"""Plugin module loading.

Plugins are resolved from an explicit registry mapping module identifiers to
providers. The registry is populated at startup from the
"packagelint.plugins" entry-point group and falls back to importlib for
identifiers nobody registered.
"""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from packagelint.domain.exceptions import ModuleLoadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from packagelint.domain.ports.module_loader import ModuleLoaderProtocol

logger = logging.getLogger(__name__)

PLUGIN_ENTRY_POINT_GROUP = "packagelint.plugins"


class ImportlibModuleLoader:
    """Loads a dotted module path with importlib.import_module."""

    async def load(self, module_id: str) -> object:
        """Import module_id.

        Raises:
            ModuleLoadError: If the import fails for any reason.
        """
        try:
            return importlib.import_module(module_id)
        # Module code may raise anything while executing.
        except Exception as exc:
            raise ModuleLoadError(module_id, f"{type(exc).__name__}: {exc}") from exc


class PluginRegistry:
    """Registry of plugin providers keyed by module identifier.

    A provider is a zero-argument callable returning the module's export
    surface. It is invoked once, on first load.

    Example:
        registry = PluginRegistry()
        registry.register_exports("my_rules", my_rules_module)
        exports = await registry.load("my_rules")
    """

    def __init__(self, fallback: ModuleLoaderProtocol | None = None) -> None:
        """Initialize an empty registry.

        Args:
            fallback: Loader used for identifiers that are not registered.
                None = unregistered identifiers fail to load.
        """
        self._providers: dict[str, Callable[[], object]] = {}
        self._loaded: dict[str, object] = {}
        self._fallback = fallback

    @classmethod
    def from_entry_points(
        cls,
        fallback: ModuleLoaderProtocol | None = None,
        group: str = PLUGIN_ENTRY_POINT_GROUP,
    ) -> PluginRegistry:
        """Create a registry from installed entry points.

        Each entry point's name is the module identifier; its target is
        loaded lazily. Duplicate names keep the first registration.
        """
        registry = cls(fallback=fallback)
        for entry_point in entry_points(group=group):
            if entry_point.name in registry:
                logger.warning(
                    "Ignoring duplicate packagelint plugin %r (%s)",
                    entry_point.name,
                    entry_point.value,
                )
                continue
            registry.register(entry_point.name, entry_point.load)
        return registry

    def register(self, module_id: str, provider: Callable[[], object]) -> None:
        """Register a provider.

        Raises:
            ValueError: If module_id is empty or already registered.
            TypeError: If provider is not callable.
        """
        if not module_id:
            raise ValueError("module_id must not be empty")
        if not callable(provider):
            raise TypeError(f"provider must be callable, got {type(provider).__name__}")
        if module_id in self._providers:
            raise ValueError(f"Duplicate plugin module registered: {module_id}")
        self._providers[module_id] = provider

    def register_exports(self, module_id: str, exports: object) -> None:
        """Register an already-built export surface."""
        self.register(module_id, lambda: exports)

    def unregister(self, module_id: str) -> None:
        """Remove a provider and any cached export surface."""
        self._providers.pop(module_id, None)
        self._loaded.pop(module_id, None)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._providers

    def module_ids(self) -> tuple[str, ...]:
        """Registered identifiers, in registration order."""
        return tuple(self._providers)

    async def load(self, module_id: str) -> object:
        """Load a registered module, or delegate to the fallback loader.

        Raises:
            ModuleLoadError: If the provider fails, or module_id is unknown
                and there is no fallback.
        """
        if module_id in self._loaded:
            return self._loaded[module_id]

        provider = self._providers.get(module_id)
        if provider is None:
            if self._fallback is None:
                raise ModuleLoadError(module_id, "no plugin registered under this name")
            return await self._fallback.load(module_id)

        try:
            exports = provider()
        except Exception as exc:
            raise ModuleLoadError(module_id, f"{type(exc).__name__}: {exc}") from exc

        logger.debug("Loaded packagelint plugin %r", module_id)
        self._loaded[module_id] = exports
        return exports


def default_module_loader() -> PluginRegistry:
    """Registry from installed entry points, falling back to importlib."""
    return PluginRegistry.from_entry_points(fallback=ImportlibModuleLoader())
