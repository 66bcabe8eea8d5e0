"""Reporter preparation: names in the user config -> reporter instances."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from packagelint.domain.exceptions import InvalidReporterOptionsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from packagelint.application.resolve.resolver import NameResolver
    from packagelint.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


async def prepare_reporters(
    reporters: Mapping[str, Mapping[str, Any] | None],
    resolver: NameResolver,
) -> list[ReporterProtocol]:
    """Resolve and construct every named reporter, in config order.

    Each constructor (class or factory function) receives its options mapping.

    Raises:
        InvalidNameError: If a reporter name is malformed.
        PluginImportError: If a reporter cannot be resolved.
        InvalidReporterOptionsError: If a constructor rejects its options.
    """
    instances: list[ReporterProtocol] = []
    for reporter_name, options in reporters.items():
        constructor = await resolver.resolve_reporter(reporter_name)
        try:
            reporter = constructor(MappingProxyType(dict(options or {})))
        # Reporter constructors are plugin code and may raise anything.
        except Exception as exc:
            raise InvalidReporterOptionsError(
                reporter_name, f"{type(exc).__name__}: {exc}"
            ) from exc
        instances.append(reporter)
        logger.debug("Prepared reporter %s", reporter_name)
    return instances
