"""Validation engine and per-rule context."""

from packagelint.application.validate.context import ValidationContext, make_validation_context
from packagelint.application.validate.validator import DefaultRuleValidator

__all__ = [
    "DefaultRuleValidator",
    "ValidationContext",
    "make_validation_context",
]
