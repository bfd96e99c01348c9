"""Import statement recognition for a single target module."""

import logging

from component_usage.models import ScanResult
from component_usage.scanner.patterns import (
    default_import_pattern,
    default_require_pattern,
    destructured_require_pattern,
    named_import_pattern,
    namespace_import_pattern,
    namespace_key,
    scan,
    split_bindings,
)

logger = logging.getLogger(__name__)


class ImportExtractor:
    """Finds the symbols a file imports from the target module.

    Five idioms are recognized:

    - ``import { A, B as C } from "module"``
    - ``import X from "module"``
    - ``import * as NS from "module"``
    - ``const { A, B: C } = require("module")``
    - ``const X = require("module")``

    Renamed bindings contribute their local name only. Namespace imports are
    recorded under a tagged key so they cannot collide with plain names.
    """

    def __init__(self, target_module: str) -> None:
        """Initialize import extractor.

        Args:
            target_module: Module specifier to look for (e.g., "@acme/ui")
        """
        self.target_module = target_module
        self._named = named_import_pattern(target_module)
        self._default = default_import_pattern(target_module)
        self._namespace = namespace_import_pattern(target_module)
        self._destructured_require = destructured_require_pattern(target_module)
        self._default_require = default_require_pattern(target_module)

    def extract_symbols(self, content: str) -> list[str]:
        """Extract symbol table keys imported by a file.

        Args:
            content: Raw file text

        Returns:
            Symbol keys in discovery order (may contain repeats when the
            module is imported more than once)
        """
        symbols: list[str] = []

        for match in scan(content, self._named):
            symbols.extend(split_bindings(match.group(1)))

        for match in scan(content, self._default):
            name = match.group(1).strip()
            # "import pkg from 'pkg'" is a degenerate self match
            if name != self.target_module:
                symbols.append(name)

        for match in scan(content, self._namespace):
            symbols.append(namespace_key(match.group(1).strip()))

        for match in scan(content, self._destructured_require):
            symbols.extend(split_bindings(match.group(1)))

        for match in scan(content, self._default_require):
            symbols.append(match.group(1).strip())

        return symbols

    def process(self, content: str, file_path: str, result: ScanResult) -> list[str]:
        """Record every import of the target module found in a file.

        Args:
            content: Raw file text
            file_path: Path recorded in the symbol table
            result: Scan state to update

        Returns:
            Symbol keys found in the file
        """
        symbols = self.extract_symbols(content)

        for symbol in symbols:
            result.add_import(symbol, file_path)

        if symbols:
            logger.debug(f"{file_path} imports {len(set(symbols))} symbol(s) from {self.target_module}")

        return symbols
