"""
Range-based text editing for code rewrites.
Edits are collected against the original text and applied back to front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class TextRange:
    """Represents a range in text by character positions."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")


@dataclass
class Edit:
    """Single replacement over a character range."""
    range: TextRange
    replacement: str
    type: Optional[str]  # key for statistics


class RangeEditor:
    """
    Unicode-safe range editor working with character positions.
    Callers add non-overlapping edits only.
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_replacement(self, start_char: int, end_char: int, replacement: str, edit_type: Optional[str]) -> None:
        self.edits.append(Edit(TextRange(start_char, end_char), replacement, edit_type))

    def apply_edits(self) -> Tuple[str, Dict[str, Any]]:
        """
        Apply all edits.

        Returns:
            Tuple of (modified_text, statistics)
        """
        stats: Dict[str, Any] = {"edits_applied": len(self.edits), "chars_removed": 0, "chars_added": 0}

        result_text = self.original_text
        for edit in sorted(self.edits, key=lambda e: e.range.start_char, reverse=True):
            start, end = edit.range.start_char, edit.range.end_char
            stats["chars_removed"] += end - start
            stats["chars_added"] += len(edit.replacement)
            if edit.type:
                stats[edit.type] = stats.get(edit.type, 0) + 1
            result_text = result_text[:start] + edit.replacement + result_text[end:]

        return result_text, stats


__all__ = ["TextRange", "Edit", "RangeEditor"]
