"""Name resolution for rules, rulesets and reporters."""

from packagelint.application.resolve.deferred import Deferred, resolve_deferred
from packagelint.application.resolve.resolver import (
    REPORTERS_EXPORT_NAME,
    RULES_EXPORT_NAME,
    NameResolver,
    is_qualified_name,
    split_qualified_name,
)

__all__ = [
    "Deferred",
    "resolve_deferred",
    "NameResolver",
    "RULES_EXPORT_NAME",
    "REPORTERS_EXPORT_NAME",
    "is_qualified_name",
    "split_qualified_name",
]
