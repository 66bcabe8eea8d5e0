"""Domain ports (interfaces/protocols)."""

from packagelint.domain.ports.file_finder import FileFinderProtocol
from packagelint.domain.ports.module_loader import ModuleLoaderProtocol
from packagelint.domain.ports.preparer import RulePreparerProtocol
from packagelint.domain.ports.reporter import LIFECYCLE_EVENTS, ReporterProtocol
from packagelint.domain.ports.validator import RuleValidatorProtocol

__all__ = [
    "FileFinderProtocol",
    "LIFECYCLE_EVENTS",
    "ModuleLoaderProtocol",
    "ReporterProtocol",
    "RulePreparerProtocol",
    "RuleValidatorProtocol",
]
