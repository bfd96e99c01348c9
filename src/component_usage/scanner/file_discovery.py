"""File discovery for JavaScript and TypeScript source trees."""

import logging
import stat
from pathlib import Path
from typing import Iterator

from component_usage.config import get_config

logger = logging.getLogger(__name__)


class FileDiscovery:
    """Discovers source files under a root directory."""

    def __init__(
        self,
        project_root: Path,
        extensions: list[str] | None = None,
        ignore_patterns: list[str] | None = None,
    ) -> None:
        """Initialize file discovery.

        Args:
            project_root: Root directory to walk, kept as given
            extensions: File suffixes to include (e.g., ".tsx")
            ignore_patterns: Substrings that exclude any path containing them
        """
        self.project_root = Path(project_root)

        if extensions is None or ignore_patterns is None:
            config = get_config()
            if extensions is None:
                extensions = config.extensions
            if ignore_patterns is None:
                ignore_patterns = config.ignore_patterns

        self.extensions = set(extensions)
        self.ignore_patterns = list(ignore_patterns)
        self.directories_failed = 0
        self.entries_failed = 0

    def find_source_files(self) -> list[Path]:
        """Find all matching source files.

        Returns:
            List of file paths in walk order
        """
        return list(self.iter_source_files())

    def iter_source_files(self) -> Iterator[Path]:
        """Walk the tree depth-first, yielding matching files.

        Entries are visited in name order. Unreadable directories and entries
        are logged and skipped; the walk continues with their siblings.
        """
        self.directories_failed = 0
        self.entries_failed = 0
        yield from self._walk(self.project_root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            logger.error(f"Error walking directory {directory}: {e}")
            self.directories_failed += 1
            return

        for entry in entries:
            if self._should_exclude(entry):
                continue

            try:
                mode = entry.stat().st_mode
            except OSError as e:
                logger.error(f"Error processing file {entry}: {e}")
                self.entries_failed += 1
                continue

            if stat.S_ISDIR(mode):
                yield from self._walk(entry)
            elif stat.S_ISREG(mode) and entry.suffix in self.extensions:
                yield entry

    def _should_exclude(self, path: Path) -> bool:
        """Check if a path contains any ignore pattern.

        This is a plain substring test on the accumulated path, so
        "build" also excludes "rebuild.ts" and "builder/".

        Args:
            path: Path built from the root as given

        Returns:
            True if path should be excluded
        """
        path_str = str(path)
        return any(pattern in path_str for pattern in self.ignore_patterns)
