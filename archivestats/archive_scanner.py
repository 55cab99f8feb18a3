"""Archive scanning utilities for content files laid out as YYYY/MM/DD."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import DEFAULT_DENY_LIST
from .errors import ArchiveNotFoundError, ArchiveScanError
from .logging import get_logger

ARCHIVE_PATH_PATTERN = re.compile(r"/[0-9]{4}/[0-9]{2}/[0-9]{2}/")


def _raise_walk_error(error: OSError) -> None:
    raise error


def _is_denied(path: str, deny_list: Sequence[str]) -> bool:
    return any(item in path for item in deny_list)


class ArchiveScanner:
    """Walks an archive tree and returns the eligible content files."""

    def __init__(
        self,
        *,
        content_extension: str = ".md",
        deny_list: Sequence[str] = DEFAULT_DENY_LIST,
    ) -> None:
        self.content_extension = content_extension
        self.deny_list = tuple(deny_list)
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> List[str]:
        """Return admitted content paths sorted by full path."""
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise ArchiveNotFoundError(f"Archive path not found: {root}")
        if not root_path.is_dir():
            raise ArchiveScanError(f"Archive path is not a directory: {root}")

        try:
            files = sorted(self._iter_files(root_path))
        except OSError as exc:
            raise ArchiveScanError(f"Failed to traverse archive {root}: {exc}") from exc

        self.logger.debug("Discovered %d content files under %s", len(files), root_path)
        return files

    def admits(self, path: str) -> bool:
        """Return True when ``path`` is an archived content file."""
        if Path(path).suffix != self.content_extension:
            return False
        if _is_denied(path, self.deny_list):
            return False
        return ARCHIVE_PATH_PATTERN.search(path) is not None

    def _iter_files(self, root: Path) -> Iterator[str]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            current_dir = Path(dirpath)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if not _is_denied((current_dir / name).as_posix(), self.deny_list)
            )
            for filename in sorted(filenames):
                candidate = (current_dir / filename).as_posix()
                if self.admits(candidate):
                    yield candidate


__all__ = ["ARCHIVE_PATH_PATTERN", "ArchiveScanner"]
