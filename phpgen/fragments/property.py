from __future__ import annotations

from typing import Any, Optional, Union

from ..errors import InvalidModelError
from ..literals import LiteralExporter
from .base import UNASSIGNED, Fragment, TypeSpec, Visibility, type_expression


class Property(Fragment):
    """Class property with optional type, default and readonly flag."""

    KIND = "property"

    def __init__(
        self,
        name: str,
        type: TypeSpec = None,
        default: Any = UNASSIGNED,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        readonly: bool = False,
        comment: Optional[str] = None,
        *,
        exporter: Optional[LiteralExporter] = None,
    ):
        super().__init__(name, comment=comment, exporter=exporter)
        self.type = type_expression(type)
        self.default = default
        self.visibility = Visibility.coerce(visibility)
        self.readonly = bool(readonly)

        if self.readonly and self.has_default:
            raise InvalidModelError(
                f"property '${name}'",
                "readonly properties cannot declare a default value",
            )
        if self.readonly and self.type is None:
            raise InvalidModelError(f"property '${name}'", "readonly properties must be typed")

    @property
    def has_default(self) -> bool:
        return self.default is not UNASSIGNED

    def build(self) -> str:
        parts = [self.visibility.label()]
        if self.readonly:
            parts.append("readonly")
        if self.type:
            parts.append(self.type)
        parts.append(f"${self.name}")

        declaration = " ".join(parts)
        if self.has_default:
            declaration += f" = {self.dump(self.default)}"
        return self._with_doc(declaration + ";")


__all__ = ["Property"]
