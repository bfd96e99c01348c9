"""Usage mapper: one traversal session over a source tree."""

import logging
import os
from pathlib import Path

from component_usage.config import Config, get_config
from component_usage.models import ScanResult
from component_usage.scanner.file_discovery import FileDiscovery
from component_usage.scanner.import_extractor import ImportExtractor
from component_usage.scanner.usage_extractor import UsageExtractor

logger = logging.getLogger(__name__)


class UsageMapper:
    """Maps imports and usages of one module across a source tree."""

    def __init__(
        self,
        project_root: Path,
        config: Config | None = None,
        target_module: str | None = None,
    ) -> None:
        """Initialize usage mapper.

        Args:
            project_root: Root directory of the tree to scan
            config: Configuration (defaults to the global config)
            target_module: Overrides the configured target module
        """
        self.project_root = Path(project_root)
        self.config = config or get_config()
        self.target_module = target_module or self.config.target_module

        self.file_discovery = FileDiscovery(
            self.project_root,
            extensions=self.config.extensions,
            ignore_patterns=self.config.ignore_patterns,
        )
        self.import_extractor = ImportExtractor(self.target_module)
        self.usage_extractor = UsageExtractor()

    def scan(self) -> ScanResult:
        """Walk the tree and collect imports and usages.

        Files are processed one at a time in walk order. Usages are searched
        with the symbol table as it stands when the file is reached, so a
        file visited before any import of a symbol is not searched for it.

        Returns:
            Populated scan result
        """
        result = ScanResult()

        for file_path in self.file_discovery.iter_source_files():
            self.process_file(file_path, result)

        result.directories_failed = self.file_discovery.directories_failed
        result.files_failed += self.file_discovery.entries_failed

        logger.debug(
            f"Scanned {result.files_scanned} file(s), "
            f"{len(result.imports)} imported symbol(s), "
            f"{result.total_instances} instance(s)"
        )

        return result

    def process_file(self, file_path: Path, result: ScanResult) -> None:
        """Read a file once and run both extractors over it.

        Args:
            file_path: File to process
            result: Scan state to update
        """
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Error processing file {file_path}: {e}")
            result.files_failed += 1
            return

        relative_path = self._display_path(file_path)
        result.files_scanned += 1

        self.import_extractor.process(content, relative_path, result)

        if result.imports:
            self.usage_extractor.process(content, relative_path, result)

    @staticmethod
    def _display_path(file_path: Path) -> str:
        """Path relative to the working directory, with forward slashes."""
        return Path(os.path.relpath(file_path, Path.cwd())).as_posix()
