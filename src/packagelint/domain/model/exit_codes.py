"""Process-level result codes."""

from __future__ import annotations

from enum import IntEnum

from packagelint.domain.exceptions import (
    InvalidConfigError,
    InvalidExitCodeError,
    MissingConfigError,
)


class ExitCode(IntEnum):
    """Outcome of a packagelint run, as a process exit status."""

    SUCCESS = 0
    FAILURE_VALIDATION = 1
    FAILURE_INVALID_CONFIG = 2
    FAILURE_NO_CONFIG = 3
    FAILURE_UNKNOWN = 4


ALL_EXIT_CODE_VALUES: frozenset[int] = frozenset(code.value for code in ExitCode)


def is_valid_exit_code(value: object) -> bool:
    """Check whether value is one of the known exit codes."""
    # bool is an int subclass, but True/False are never exit codes
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in ALL_EXIT_CODE_VALUES


def _require_valid(value: object) -> ExitCode:
    if not is_valid_exit_code(value):
        raise InvalidExitCodeError(value)
    return ExitCode(value)


def is_success_exit_code(value: object) -> bool:
    """True for SUCCESS.

    Raises:
        InvalidExitCodeError: If value is not a known exit code.
    """
    return _require_valid(value) is ExitCode.SUCCESS


def is_failure_exit_code(value: object) -> bool:
    """True for every FAILURE_* code.

    Raises:
        InvalidExitCodeError: If value is not a known exit code.
    """
    return _require_valid(value) is not ExitCode.SUCCESS


def exit_code_for_error(error: BaseException) -> ExitCode:
    """Map a configuration-time exception to the exit code a host should use."""
    if isinstance(error, InvalidConfigError):
        return ExitCode.FAILURE_INVALID_CONFIG
    if isinstance(error, MissingConfigError):
        return ExitCode.FAILURE_NO_CONFIG
    return ExitCode.FAILURE_UNKNOWN
