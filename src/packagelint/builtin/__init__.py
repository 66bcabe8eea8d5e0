"""Built-in packagelint plugin.

Registered under the "packagelint.builtin" identifier, so its rules are
named like "packagelint.builtin:always-pass".
"""

from packagelint.builtin.reporters import LoggingReporter
from packagelint.builtin.rules import (
    ALWAYS_FAIL,
    ALWAYS_PASS,
    ALWAYS_THROW,
    FILE_EXISTS,
    SMOKE_TEST,
)

packagelint_rules = {
    "always-pass": ALWAYS_PASS,
    "always-fail": ALWAYS_FAIL,
    "always-throw": ALWAYS_THROW,
    "file-exists": FILE_EXISTS,
    "smoke-test": SMOKE_TEST,
}

packagelint_reporters = {
    "logging-reporter": LoggingReporter,
}

__all__ = [
    "LoggingReporter",
    "packagelint_reporters",
    "packagelint_rules",
]
