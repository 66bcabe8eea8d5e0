"""Error levels: the fixed severity order used by every comparison.

exception > error > warning > suggestion > ignore
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from packagelint.domain.exceptions import InvalidErrorLevelError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from packagelint.domain.model.results import RuleFailure


class ErrorLevel(Enum):
    """Severity of a rule failure."""

    EXCEPTION = "exception"  # rule implementation failed unexpectedly
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"
    IGNORE = "ignore"  # never fails


# Most severe first. Single source of truth for ordering.
ERROR_LEVELS_IN_SEVERITY_ORDER: tuple[ErrorLevel, ...] = (
    ErrorLevel.EXCEPTION,
    ErrorLevel.ERROR,
    ErrorLevel.WARNING,
    ErrorLevel.SUGGESTION,
    ErrorLevel.IGNORE,
)

ALL_ERROR_LEVEL_VALUES: frozenset[str] = frozenset(level.value for level in ErrorLevel)

DEFAULT_ERROR_LEVEL = ErrorLevel.ERROR

_RANK: Mapping[ErrorLevel, int] = MappingProxyType(
    {
        level: len(ERROR_LEVELS_IN_SEVERITY_ORDER) - index
        for index, level in enumerate(ERROR_LEVELS_IN_SEVERITY_ORDER)
    }
)


def is_valid_error_level(value: object) -> bool:
    """Check whether value is an ErrorLevel or the string value of one."""
    if isinstance(value, ErrorLevel):
        return True
    return isinstance(value, str) and value in ALL_ERROR_LEVEL_VALUES


def parse_error_level(value: object) -> ErrorLevel:
    """Convert an ErrorLevel or its string value to ErrorLevel.

    Raises:
        InvalidErrorLevelError: If value is not a known level.
    """
    if isinstance(value, ErrorLevel):
        return value
    if not is_valid_error_level(value):
        raise InvalidErrorLevelError(value)
    return ErrorLevel(value)


def compare_error_levels(a: ErrorLevel, b: ErrorLevel) -> int:
    """Compare two levels by severity.

    Returns:
        Positive if a is more severe than b, negative if less, 0 if equal.
    """
    return _RANK[a] - _RANK[b]


def is_error_more_severe_than(a: ErrorLevel | None, b: ErrorLevel) -> bool:
    """Strict comparison. None (nothing failed) is never more severe."""
    if a is None:
        return False
    return compare_error_levels(a, b) > 0


def is_error_less_severe_than(a: ErrorLevel | None, b: ErrorLevel) -> bool:
    """Strict comparison. None (nothing failed) is less severe than every level."""
    if a is None:
        return True
    return compare_error_levels(a, b) < 0


def count_error_types(results: Iterable[RuleFailure]) -> dict[ErrorLevel, int]:
    """Count failures per level. Every level is present, zero-filled."""
    counts = dict.fromkeys(ERROR_LEVELS_IN_SEVERITY_ORDER, 0)
    for result in results:
        counts[result.error_level] += 1
    return counts


def get_highest_error_level(counts: Mapping[ErrorLevel, int]) -> ErrorLevel | None:
    """Most severe level with a nonzero count, or None.

    Walks the fixed severity order, so iteration order of counts is irrelevant.
    """
    for level in ERROR_LEVELS_IN_SEVERITY_ORDER:
        if counts.get(level, 0) > 0:
            return level
    return None
