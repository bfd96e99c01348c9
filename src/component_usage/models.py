"""Core data models for the Component Usage Scanner."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

NAMESPACE_PREFIX = "*"


def namespace_key(alias: str) -> str:
    """Symbol table key for a namespace import bound to ``alias``."""
    return f"{NAMESPACE_PREFIX}{alias}"


def is_namespace_key(key: str) -> bool:
    return key.startswith(NAMESPACE_PREFIX)


def namespace_alias(key: str) -> str:
    return key[len(NAMESPACE_PREFIX):]


class UsageKind(Enum):
    """How a symbol is used at a site."""

    MARKUP = "markup"
    CALL = "call"


@dataclass(frozen=True)
class UsageSite:
    """A single usage occurrence inside one file."""

    key: str  # e.g., "Button" or "UI.Card"
    kind: UsageKind


@dataclass
class ScanResult:
    """State accumulated by one traversal of a source tree.

    ``imports`` maps each imported symbol (namespace imports tagged with a
    ``*`` prefix) to the files importing it. The two instance tables map a
    usage key to one file path per occurrence.
    """

    imports: dict[str, set[str]] = field(default_factory=dict)
    markup_instances: dict[str, list[str]] = field(default_factory=dict)
    call_instances: dict[str, list[str]] = field(default_factory=dict)
    files_scanned: int = 0
    files_failed: int = 0
    directories_failed: int = 0

    def add_import(self, symbol: str, file_path: str) -> None:
        """Register that ``file_path`` imports ``symbol``."""
        self.imports.setdefault(symbol, set()).add(file_path)

    def record_usage(self, site: UsageSite, file_path: str) -> None:
        """Append one occurrence of ``site`` in ``file_path``."""
        table = self.markup_instances if site.kind is UsageKind.MARKUP else self.call_instances
        table.setdefault(site.key, []).append(file_path)

    @property
    def total_markup(self) -> int:
        """Total number of markup-style occurrences."""
        return sum(len(files) for files in self.markup_instances.values())

    @property
    def total_calls(self) -> int:
        """Total number of call-style occurrences."""
        return sum(len(files) for files in self.call_instances.values())

    @property
    def total_instances(self) -> int:
        """Total number of occurrences of any kind."""
        return self.total_markup + self.total_calls

    def used_symbols(self) -> set[str]:
        """Keys with at least one recorded occurrence."""
        return set(self.markup_instances) | set(self.call_instances)

    def unused_symbols(self) -> list[str]:
        """Imported plain symbols that were never found in use, sorted."""
        used = self.used_symbols()
        return sorted(
            symbol for symbol in self.imports
            if symbol not in used and not is_namespace_key(symbol)
        )

    def merged_instances(self) -> dict[str, list[str]]:
        """Combine both instance tables into one key -> occurrences mapping."""
        merged: dict[str, list[str]] = {}
        for table in (self.markup_instances, self.call_instances):
            for key, files in table.items():
                merged.setdefault(key, []).extend(files)
        return merged

    @staticmethod
    def file_counts(instances: list[str]) -> dict[str, int]:
        """Group an occurrence list into per-file counts, sorted by file."""
        counts = Counter(instances)
        return {file_path: counts[file_path] for file_path in sorted(counts)}
