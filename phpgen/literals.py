"""
Export of Python values as PHP literals.
"""

from __future__ import annotations

import math
from typing import Any, Callable, List, Optional, Set

from .errors import CircularReferenceError, UnsupportedValueError
from .php_strings import quote_single, string_literal

# Fallback exporter for values the core does not know how to represent.
# Must return PHP code or raise UnsupportedValueError.
Fallback = Callable[[Any], str]


class LiteralExporter:
    """
    Converts Python values into PHP literal text.

    Lists, tuples and dicts keyed exactly 0..n-1 become `[a, b]`;
    other dicts become `[k => v]`. In multiline mode every top-level entry
    sits on its own tab-indented line with a trailing comma.
    """

    def __init__(self, fallback: Optional[Fallback] = None):
        self.fallback = fallback

    def export(self, value: Any, multiline: bool = False) -> str:
        return self._export(value, "$value", set(), multiline)

    __call__ = export

    def _export(self, value: Any, path: str, active: Set[int], multiline: bool = False) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _export_float(value)
        if isinstance(value, str):
            return string_literal(value)
        if isinstance(value, (list, tuple, dict)):
            return self._export_container(value, path, active, multiline)

        if self.fallback is not None:
            return self.fallback(value)
        raise UnsupportedValueError(path, type(value).__name__)

    def _export_container(self, value, path: str, active: Set[int], multiline: bool) -> str:
        marker = id(value)
        if marker in active:
            raise CircularReferenceError(path)

        active.add(marker)
        try:
            if isinstance(value, dict):
                items = list(value.items())
                for key, _ in items:
                    if isinstance(key, bool) or not isinstance(key, (int, str)):
                        raise UnsupportedValueError(f"{path} key {key!r}", type(key).__name__)
                indexed = [k for k, _ in items] == list(range(len(items)))
            else:
                items = list(enumerate(value))
                indexed = True

            entries: List[str] = []
            for key, item in items:
                item_path = f"{path}[{_path_key(key)}]"
                rendered = self._export(item, item_path, active)
                if not indexed:
                    rendered = f"{self._export(key, item_path, active)} => {rendered}"
                entries.append(rendered)
        finally:
            active.discard(marker)

        if not entries:
            return "[]"
        if multiline:
            return "[\n" + "".join(f"\t{entry},\n" for entry in entries) + "]"
        return "[" + ", ".join(entries) + "]"


def _path_key(key: Any) -> str:
    return quote_single(key) if isinstance(key, str) else str(key)


def _export_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"

    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        power = int(exponent)
        return f"{mantissa}E{'+' if power >= 0 else '-'}{abs(power)}"
    if "." not in text:
        text += ".0"
    return text


def export(value: Any, multiline: bool = False) -> str:
    """Export with a default exporter (no fallback)."""
    return LiteralExporter().export(value, multiline)


__all__ = ["LiteralExporter", "Fallback", "export"]
