"""Source tree usage scanner package."""

from component_usage.scanner.file_discovery import FileDiscovery
from component_usage.scanner.import_extractor import ImportExtractor
from component_usage.scanner.usage_extractor import UsageExtractor
from component_usage.scanner.usage_mapper import UsageMapper

__all__ = [
    "FileDiscovery",
    "ImportExtractor",
    "UsageExtractor",
    "UsageMapper",
]
