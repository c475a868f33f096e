from __future__ import annotations

from typing import Any, Optional, Union

from ..literals import LiteralExporter
from .base import Fragment, Visibility


def infer_php_type(value: Any) -> str:
    """PHP type name of a Python value, as used in declarations."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple, dict)):
        return "array"
    return "mixed"


class Constant(Fragment):
    """Typed class constant."""

    KIND = "constant"

    def __init__(
        self,
        name: str,
        value: Any,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        comment: Optional[str] = None,
        type: Optional[str] = None,
        *,
        exporter: Optional[LiteralExporter] = None,
    ):
        super().__init__(name, comment=comment, exporter=exporter)
        self.value = value
        self.visibility = Visibility.coerce(visibility)
        self._type = type

    @property
    def type(self) -> str:
        # inferred once, then kept
        if self._type is None:
            self._type = infer_php_type(self.value)
        return self._type

    def build(self) -> str:
        literal = self.dump(self.value)
        return self._with_doc(
            f"{self.visibility.label()} const {self.type} {self.name} = {literal};"
        )


__all__ = ["Constant", "infer_php_type"]
