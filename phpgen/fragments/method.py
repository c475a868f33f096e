from __future__ import annotations

from typing import Optional, Sequence, Union

from ..literals import LiteralExporter
from .base import Fragment, TypeSpec, Visibility, docblock, indent_lines, type_expression


class Method(Fragment):
    """
    Class method.

    The body is inserted verbatim between the braces; its indentation is the
    caller's business, also inside a class body where only the docblock,
    signature and braces are shifted.
    """

    KIND = "method"

    def __init__(
        self,
        name: str,
        body: str = "",
        arguments: Union[str, Sequence[str]] = "",
        returns: TypeSpec = "void",
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        final: bool = False,
        comment: Optional[str] = None,
        *,
        exporter: Optional[LiteralExporter] = None,
    ):
        super().__init__(name, comment=comment, exporter=exporter)
        self.body = str(body)
        self.arguments = arguments if isinstance(arguments, str) else ", ".join(arguments)
        self.returns = type_expression(returns)
        self.visibility = Visibility.coerce(visibility)
        self.final = bool(final)

    def signature(self) -> str:
        head = f"{self.visibility.label()} function {self.name}({self.arguments.strip()})"
        if self.final:
            head = "final " + head
        if self.returns:
            head += f" : {self.returns}"
        return head

    def build(self) -> str:
        lines = [self.signature(), "{"]
        if self.body.strip():
            lines.append(self.body.strip("\r\n"))
        lines.append("}")
        return self._with_doc(*lines)

    def indented(self, tab: str = "\t") -> Optional[str]:
        if not self.printable:
            return None
        head = indent_lines("\n".join([*docblock(self.comment), self.signature(), "{"]), tab)
        parts = [head]
        if self.body.strip():
            parts.append(self.body.strip("\r\n"))
        parts.append(tab + "}")
        return "\n".join(parts)


__all__ = ["Method"]
