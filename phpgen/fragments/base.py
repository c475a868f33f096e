"""
Base fragment of a class body and shared building blocks.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Sequence, Union

from ..literals import LiteralExporter
from ..names import require_identifier


class Visibility(enum.Enum):
    """Member visibility."""

    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"

    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def coerce(cls, value: Union[Visibility, str]) -> Visibility:
        if isinstance(value, Visibility):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown visibility: {value!r}") from None


class Unassigned(enum.Enum):
    """Marker for a property declared without a default value."""
    TOKEN = "unassigned"

    def __repr__(self) -> str:
        return "UNASSIGNED"


UNASSIGNED = Unassigned.TOKEN

TypeSpec = Union[str, Sequence[str], None]


def type_expression(spec: TypeSpec) -> Optional[str]:
    """Single type or union list → PHP type expression."""
    if spec is None:
        return None
    if isinstance(spec, str):
        return spec.strip() or None
    parts = [p.strip() for p in spec if p and p.strip()]
    return "|".join(parts) or None


def docblock(comment: Optional[str]) -> List[str]:
    """PHPDoc lines for a comment, or nothing."""
    if not comment or not comment.strip():
        return []
    lines = ["/**"]
    for line in comment.strip().splitlines():
        lines.append(f" * {line.rstrip()}".rstrip())
    lines.append(" */")
    return lines


def indent_lines(text: str, tab: str = "\t") -> str:
    return "\n".join(tab + line if line.strip() else "" for line in text.split("\n"))


class Fragment(ABC):
    """
    A unit of a class body.

    `name` is fixed at construction. Setting `printable` to False keeps the
    fragment in the model but drops it from the rendered body.
    """

    KIND: ClassVar[str] = "fragment"

    def __init__(
        self,
        name: str,
        *,
        comment: Optional[str] = None,
        exporter: Optional[LiteralExporter] = None,
    ):
        self._name = require_identifier(name, f"{self.KIND} name")
        self.comment = comment
        self.printable = True
        self.exporter = exporter or LiteralExporter()

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def build(self) -> str:
        """Render the canonical text of the fragment."""
        pass

    def resolve(self) -> Optional[str]:
        return self.build() if self.printable else None

    def indented(self, tab: str = "\t") -> Optional[str]:
        """resolve() shifted one level right for placement inside a class body."""
        text = self.resolve()
        return None if text is None else indent_lines(text, tab)

    def dump(self, value, multiline: bool = False) -> str:
        return self.exporter.export(value, multiline)

    def _with_doc(self, *lines: str) -> str:
        return "\n".join([*docblock(self.comment), *lines])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


__all__ = [
    "Visibility",
    "Fragment",
    "Unassigned",
    "UNASSIGNED",
    "TypeSpec",
    "type_expression",
    "docblock",
    "indent_lines",
]
