"""Infrastructure: plugin loading, filesystem lookup, logging setup."""

from packagelint.infrastructure.file_finder import FileFinder, find_file_up
from packagelint.infrastructure.log_setup import configure_logging
from packagelint.infrastructure.module_loader import (
    PLUGIN_ENTRY_POINT_GROUP,
    ImportlibModuleLoader,
    PluginRegistry,
    default_module_loader,
)

__all__ = [
    "FileFinder",
    "find_file_up",
    "configure_logging",
    "PLUGIN_ENTRY_POINT_GROUP",
    "ImportlibModuleLoader",
    "PluginRegistry",
    "default_module_loader",
]
