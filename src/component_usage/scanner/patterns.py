"""Regular expression builders shared by the import and usage extractors."""

import re
from functools import lru_cache
from typing import Iterator

from component_usage.models import (
    NAMESPACE_PREFIX,
    is_namespace_key,
    namespace_alias,
    namespace_key,
)

__all__ = [
    "NAMESPACE_PREFIX",
    "namespace_key",
    "is_namespace_key",
    "namespace_alias",
    "scan",
    "local_binding",
    "split_bindings",
    "named_import_pattern",
    "default_import_pattern",
    "namespace_import_pattern",
    "destructured_require_pattern",
    "default_require_pattern",
    "markup_pattern",
    "call_pattern",
    "namespace_markup_pattern",
    "namespace_call_pattern",
]

# Matches the rename separator in "orig as local" and "orig: local"
_RENAME_RE = re.compile(r"\s+as\s+|\s*:\s*")

# Quoted module specifier, either quote style
_QUOTE_OPEN = r"['\"]"
_QUOTE_CLOSE = r"['\"]"

# Member names after a namespace alias
_MEMBER = r"([A-Za-z0-9_]+)"

# Tag body up to the nearest close, which also covers "/>"
_TAG_REST = r"(?![\w$-])[^>]*?(?:>|/>)"


def scan(text: str, pattern: re.Pattern[str]) -> Iterator[re.Match[str]]:
    """Iterate over all non-overlapping matches of ``pattern`` in ``text``.

    Every call starts a fresh scan from the beginning of ``text``.
    """
    return pattern.finditer(text)


def local_binding(specifier: str) -> str:
    """Resolve an import specifier to the name it binds locally.

    ``"Button as Btn"`` and ``"Button: Btn"`` both give ``"Btn"``.
    """
    return _RENAME_RE.split(specifier.strip())[-1].strip()


def split_bindings(binding_list: str) -> list[str]:
    """Split the inside of ``{ ... }`` into local binding names."""
    names: list[str] = []
    for specifier in binding_list.split(","):
        name = local_binding(specifier)
        if name:
            names.append(name)
    return names


def _from_module(module_name: str) -> str:
    return r"\s+from\s+" + _QUOTE_OPEN + re.escape(module_name) + _QUOTE_CLOSE


def _require_module(module_name: str) -> str:
    return (
        r"\s+=\s+require\s*\(\s*"
        + _QUOTE_OPEN + re.escape(module_name) + _QUOTE_CLOSE
        + r"\s*\)"
    )


@lru_cache(maxsize=None)
def named_import_pattern(module_name: str) -> re.Pattern[str]:
    """``import { A, B as C } from "module"``"""
    return re.compile(r"import\s+\{([^}]*)\}" + _from_module(module_name))


@lru_cache(maxsize=None)
def default_import_pattern(module_name: str) -> re.Pattern[str]:
    """``import X from "module"``"""
    return re.compile(r"import\s+([^{\s]+)" + _from_module(module_name))


@lru_cache(maxsize=None)
def namespace_import_pattern(module_name: str) -> re.Pattern[str]:
    """``import * as NS from "module"``"""
    return re.compile(r"import\s+\*\s+as\s+([^\s]+)" + _from_module(module_name))


@lru_cache(maxsize=None)
def destructured_require_pattern(module_name: str) -> re.Pattern[str]:
    """``const { A, B: C } = require("module")``"""
    return re.compile(r"(?:const|let|var)\s+\{([^}]*)\}" + _require_module(module_name))


@lru_cache(maxsize=None)
def default_require_pattern(module_name: str) -> re.Pattern[str]:
    """``const X = require("module")``"""
    return re.compile(r"(?:const|let|var)\s+([^{\s]+)" + _require_module(module_name))


@lru_cache(maxsize=None)
def markup_pattern(symbol: str) -> re.Pattern[str]:
    """Opening or self-closing tag ``<Symbol ...>``; never ``</Symbol>``."""
    return re.compile("<" + re.escape(symbol) + _TAG_REST)


@lru_cache(maxsize=None)
def call_pattern(symbol: str) -> re.Pattern[str]:
    """Bare call ``Symbol(``, not preceded by ``.``, ``<`` or a name character."""
    return re.compile(r"(?<![\w$.<])" + re.escape(symbol) + r"\(")


@lru_cache(maxsize=None)
def namespace_markup_pattern(alias: str) -> re.Pattern[str]:
    """``<NS.Member ...>``; group 1 is the member name."""
    return re.compile("<" + re.escape(alias) + r"\." + _MEMBER + _TAG_REST)


@lru_cache(maxsize=None)
def namespace_call_pattern(alias: str) -> re.Pattern[str]:
    """``NS.Member(``; group 1 is the member name."""
    return re.compile(re.escape(alias) + r"\." + _MEMBER + r"\(")
