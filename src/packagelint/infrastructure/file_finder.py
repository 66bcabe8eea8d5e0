"""Upward filesystem lookup for rules that need to locate project files."""

from __future__ import annotations

import asyncio
from pathlib import Path


def _find_file_up_sync(file_glob: str, start_dir: Path) -> list[str]:
    matches: list[str] = []
    directory = start_dir.resolve()
    for current in (directory, *directory.parents):
        matches.extend(str(path) for path in sorted(current.glob(file_glob)) if path.is_file())
    return matches


async def find_file_up(file_glob: str, start_dir: Path | str | None = None) -> list[str] | None:
    """Search start_dir and each ancestor directory for file_glob.

    Args:
        file_glob: File name or glob pattern, relative to each directory.
        start_dir: Directory to start from. None = current working directory.

    Returns:
        None if nothing matched, else absolute paths, nearest directory first
        and sorted within a directory.

    Raises:
        ValueError: If file_glob is empty.
    """
    if not file_glob:
        raise ValueError("file_glob must not be empty")

    start = Path(start_dir) if start_dir is not None else Path.cwd()
    matches = await asyncio.to_thread(_find_file_up_sync, file_glob, start)
    return matches or None


class FileFinder:
    """find_file_up bound to a fixed starting directory.

    Satisfies FileFinderProtocol. The validator hands one to every rule context.
    """

    __slots__ = ("_start_dir",)

    def __init__(self, start_dir: Path | str | None = None) -> None:
        """Initialize with starting directory. None = cwd at lookup time."""
        self._start_dir = Path(start_dir) if start_dir is not None else None

    async def __call__(self, file_glob: str) -> list[str] | None:
        """Search upward from the configured directory."""
        return await find_file_up(file_glob, self._start_dir)
