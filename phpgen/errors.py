"""
Exceptions raised by the PHP source generator.

All expected errors that describe a problem in the caller's model or input
inherit from GeneratorError. Programming errors (wrong argument types,
unknown hash algorithms) propagate as built-in exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class GeneratorError(Exception):
    """Base class for all user-facing errors in phpgen."""
    pass


@dataclass
class UnsupportedValueError(GeneratorError):
    """Value cannot be represented as a PHP literal."""
    path: str
    type_name: str

    def __str__(self) -> str:
        return f"Cannot export value of type '{self.type_name}' at {self.path}"


@dataclass
class CircularReferenceError(GeneratorError):
    """Container references itself during export."""
    path: str

    def __str__(self) -> str:
        return f"Circular reference detected at {self.path}"


@dataclass
class SourceSyntaxError(GeneratorError):
    """Code block could not be parsed by the optimizer."""
    line: int
    column: int
    snippet: str = ""

    def __str__(self) -> str:
        msg = f"Syntax error at line {self.line}, column {self.column}"
        if self.snippet:
            msg += f": {self.snippet!r}"
        return msg


@dataclass
class InvalidModelError(GeneratorError):
    """Structural model is inconsistent."""
    subject: str
    reason: str
    hint: Optional[str] = None

    def __str__(self) -> str:
        msg = f"Invalid model for {self.subject}: {self.reason}"
        if self.hint:
            msg += f". {self.hint}"
        return msg


__all__ = [
    "GeneratorError",
    "UnsupportedValueError",
    "CircularReferenceError",
    "SourceSyntaxError",
    "InvalidModelError",
]
