"""Usage site recognition: markup elements versus plain calls."""

import logging
from typing import Iterable

from component_usage.models import ScanResult, UsageKind, UsageSite
from component_usage.scanner.patterns import (
    call_pattern,
    is_namespace_key,
    markup_pattern,
    namespace_alias,
    namespace_call_pattern,
    namespace_markup_pattern,
    scan,
)

logger = logging.getLogger(__name__)


class UsageExtractor:
    """Classifies usage sites of imported symbols inside one file.

    A site shaped like ``<Symbol ...>`` is markup-style, ``Symbol(`` is
    call-style. Markup wins: once a symbol appears as markup in a file, its
    call-style matches in that file are not counted.
    """

    def find_usages(self, content: str, symbols: Iterable[str]) -> list[UsageSite]:
        """Find usage sites of the given symbols in a file.

        Args:
            content: Raw file text
            symbols: Symbol table keys to search for

        Returns:
            One usage site per occurrence, grouped by symbol
        """
        sites: list[UsageSite] = []

        for symbol in symbols:
            if is_namespace_key(symbol):
                sites.extend(self._find_namespace_usages(content, namespace_alias(symbol)))
            else:
                sites.extend(self._find_symbol_usages(content, symbol))

        return sites

    def _find_namespace_usages(self, content: str, alias: str) -> list[UsageSite]:
        """Find ``<NS.Member>`` and ``NS.Member(`` sites for a namespace alias."""
        sites: list[UsageSite] = []
        markup_keys: set[str] = set()

        for match in scan(content, namespace_markup_pattern(alias)):
            key = f"{alias}.{match.group(1)}"
            markup_keys.add(key)
            sites.append(UsageSite(key, UsageKind.MARKUP))

        for match in scan(content, namespace_call_pattern(alias)):
            key = f"{alias}.{match.group(1)}"
            if key in markup_keys:
                continue
            sites.append(UsageSite(key, UsageKind.CALL))

        return sites

    def _find_symbol_usages(self, content: str, symbol: str) -> list[UsageSite]:
        """Find ``<Symbol>`` and ``Symbol(`` sites for a plain symbol."""
        sites = [
            UsageSite(symbol, UsageKind.MARKUP)
            for _ in scan(content, markup_pattern(symbol))
        ]

        # File-level suppression: any markup use hides all calls in this file
        if sites:
            return sites

        return [
            UsageSite(symbol, UsageKind.CALL)
            for _ in scan(content, call_pattern(symbol))
        ]

    def process(self, content: str, file_path: str, result: ScanResult) -> list[UsageSite]:
        """Record usages of every currently known symbol in a file.

        Args:
            content: Raw file text
            file_path: Path recorded in the instance tables
            result: Scan state to read symbols from and update

        Returns:
            Usage sites found in the file
        """
        sites = self.find_usages(content, list(result.imports))

        for site in sites:
            result.record_usage(site, file_path)

        if sites:
            logger.debug(f"{file_path}: {len(sites)} usage site(s)")

        return sites
