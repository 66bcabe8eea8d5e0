"""Per-invocation context handed to a rule's validation function."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from packagelint.domain.model.definitions import ErrorData
    from packagelint.domain.model.prepared import PreparedRule
    from packagelint.domain.ports.file_finder import FileFinderProtocol


class ValidationContext:
    """Helpers and private error-data accumulator for one rule invocation.

    A fresh context is built for every invocation; nothing recorded here is
    visible to any other rule or run.

    Example:
        async def do_validation(options, context):
            file_name = options["file_name"]
            if await context.find_file_up(file_name) is None:
                return context.create_error_to_return("missing", {"file_name": file_name})
            return None
    """

    __slots__ = ("_error_data", "_file_finder", "_prepared_rule_name")

    def __init__(self, prepared_rule_name: str, file_finder: FileFinderProtocol) -> None:
        """Initialize for one rule invocation.

        Raises:
            ValueError: If prepared_rule_name is empty.
            TypeError: If file_finder is not callable.
        """
        if not prepared_rule_name:
            raise ValueError("prepared_rule_name must not be empty")
        if not callable(file_finder):
            raise TypeError("file_finder must be callable")

        self._prepared_rule_name = prepared_rule_name
        self._file_finder = file_finder
        self._error_data: ErrorData = {}

    @property
    def prepared_rule_name(self) -> str:
        """Identifier of the rule being run."""
        return self._prepared_rule_name

    @property
    def error_data(self) -> ErrorData:
        """Copy of the data accumulated so far."""
        return dict(self._error_data)

    async def find_file_up(self, file_glob: str) -> list[str] | None:
        """Search upward for file_glob. None if nothing matched."""
        return await self._file_finder(file_glob)

    def set_error_data(self, partial: Mapping[str, Any]) -> None:
        """Merge fields into the accumulated error data.

        Raises:
            TypeError: If partial is not a mapping.
        """
        if not isinstance(partial, Mapping):
            raise TypeError(f"error data must be a mapping, got {type(partial).__name__}")
        self._error_data.update(partial)

    def create_error_to_return(
        self,
        error_name: str,
        extra_data: Mapping[str, Any] | None = None,
    ) -> tuple[str, ErrorData]:
        """Build the failure signal a rule returns.

        Args:
            error_name: Key into the rule's messages.
            extra_data: Merged into the accumulated data first.

        Returns:
            (error_name, accumulated error data)

        Raises:
            ValueError: If error_name is empty.
        """
        if not error_name:
            raise ValueError("error_name must not be empty")
        if extra_data is not None:
            self.set_error_data(extra_data)
        return error_name, self.error_data


def make_validation_context(
    rule: PreparedRule,
    file_finder: FileFinderProtocol,
) -> ValidationContext:
    """Build a fresh context for one invocation of rule."""
    return ValidationContext(rule.prepared_rule_name, file_finder)
