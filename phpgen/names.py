"""
Qualified PHP names and ordered name sets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .errors import InvalidModelError

NS_SEPARATOR = "\\"

_SEPARATORS = re.compile(r"[\\/.]")
_IDENTIFIER = re.compile(r"[A-Za-z_\u0080-\uffff][A-Za-z0-9_\u0080-\uffff]*")


def is_identifier(name: str) -> bool:
    """Check that name is a valid PHP label."""
    return bool(_IDENTIFIER.fullmatch(name))


def require_identifier(name: str, subject: str) -> str:
    if not isinstance(name, str) or not is_identifier(name):
        raise InvalidModelError(subject, f"'{name}' is not a valid PHP identifier")
    return name


@dataclass(frozen=True)
class QualifiedName:
    """
    Fully qualified PHP name split into namespace and short name.

    Accepts `\\`, `/` and `.` as separators; renders with `\\`.
    A leading `\\` marks a name resolved from the global namespace.
    """
    short_name: str
    namespace: Optional[str] = None
    absolute: bool = False

    @classmethod
    def parse(cls, value: str | QualifiedName) -> QualifiedName:
        if isinstance(value, QualifiedName):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Expected name string, got {type(value).__name__}")

        raw = value.strip()
        segments = _SEPARATORS.split(raw.strip("\\/."))
        if not segments[-1]:
            raise InvalidModelError(f"name '{value}'", "short name is empty")

        for segment in segments:
            if not is_identifier(segment):
                raise InvalidModelError(
                    f"name '{value}'",
                    f"segment '{segment}' is not a valid PHP identifier",
                )

        namespace = NS_SEPARATOR.join(segments[:-1]) or None
        return cls(short_name=segments[-1], namespace=namespace, absolute=raw.startswith(NS_SEPARATOR))

    @property
    def fqn(self) -> str:
        if self.namespace:
            return f"{self.namespace}{NS_SEPARATOR}{self.short_name}"
        return self.short_name

    @property
    def reference(self) -> str:
        """Name as written in code, keeping the global-namespace prefix."""
        return NS_SEPARATOR + self.fqn if self.absolute else self.fqn

    def __str__(self) -> str:
        return self.fqn


class NameSet:
    """
    Insertion-ordered set of qualified names.

    Duplicates collapse silently; the first insertion keeps its position.
    """

    def __init__(self, names: Iterable[str | QualifiedName] = ()):
        self._items: dict[str, QualifiedName] = {}
        self.add(*names)

    def add(self, *names: str | QualifiedName) -> None:
        for name in names:
            qn = QualifiedName.parse(name)
            self._items.setdefault(qn.fqn, qn)

    def discard(self, name: str | QualifiedName) -> None:
        self._items.pop(QualifiedName.parse(name).fqn, None)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (str, QualifiedName)):
            return QualifiedName.parse(name).fqn in self._items
        return False

    def __iter__(self) -> Iterator[QualifiedName]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def references(self) -> List[str]:
        """Names as written, in insertion order."""
        return [qn.reference for qn in self._items.values()]

    def sorted(self) -> List[str]:
        """Names in lexical order (case-insensitive, then case-sensitive)."""
        return sorted(self._items, key=lambda n: (n.lower(), n))


__all__ = ["QualifiedName", "NameSet", "is_identifier", "require_identifier", "NS_SEPARATOR"]
