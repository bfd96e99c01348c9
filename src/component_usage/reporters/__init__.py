"""Reporters package."""

from component_usage.reporters.terminal import TerminalReporter
from component_usage.reporters.text import TextReporter

__all__ = [
    "TerminalReporter",
    "TextReporter",
]
