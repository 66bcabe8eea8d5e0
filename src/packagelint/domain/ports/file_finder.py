"""File finder port: upward filesystem lookup offered to rules."""

from __future__ import annotations

from typing import Protocol


class FileFinderProtocol(Protocol):
    """Contract for find_file_up helpers.

    Searches the starting directory and each ancestor for file_glob.
    """

    async def __call__(self, file_glob: str) -> list[str] | None:
        """Find matches, nearest directory first.

        Returns:
            None if nothing matched, else a non-empty list of absolute paths.
        """
        ...
