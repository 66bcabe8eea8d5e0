"""Module loader port: finds the export surface of a plugin module."""

from __future__ import annotations

from typing import Protocol


class ModuleLoaderProtocol(Protocol):
    """Contract for plugin module loading.

    The export surface is any object; NameResolver reads the well-known
    export names from it as attributes.
    """

    async def load(self, module_id: str) -> object:
        """Load a module by identifier.

        Raises:
            ModuleLoadError: If the module cannot be loaded.
        """
        ...
