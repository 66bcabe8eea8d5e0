"""Config preparation: rule accumulation, option merging, reporter construction."""

from packagelint.application.prepare.accumulator import RuleAccumulator, accumulate_rules
from packagelint.application.prepare.merge import deep_merge
from packagelint.application.prepare.preparer import DefaultRulePreparer
from packagelint.application.prepare.reporters import prepare_reporters

__all__ = [
    "DefaultRulePreparer",
    "RuleAccumulator",
    "accumulate_rules",
    "deep_merge",
    "prepare_reporters",
]
