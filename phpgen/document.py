"""
PHP source documents.

SourceDocument renders a plain PHP file (open tag, strict declaration,
namespace, imports, raw code). TypeDocument adds a class declaration assembled
from constants, properties and methods.

Documents are built through fluent mutators and rendered lazily. The rendered
text is memoized until `invalidate()` or `render(force_regenerate=True)`.
A document is not synchronized: mutating and rendering one instance from
several threads at once is the caller's responsibility to avoid.
"""

from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import IO, Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .artifact import OPEN_TAG, ArtifactBuilder, RenderedArtifact
from .config import GeneratorCfg
from .errors import InvalidModelError
from .fragments import (
    KIND_ORDER,
    UNASSIGNED,
    Constant,
    Fragment,
    Method,
    Property,
    TypeSpec,
    Visibility,
    docblock,
)
from .literals import LiteralExporter
from .names import NameSet, QualifiedName
from .providers import Clock, ContentHasher

logger = logging.getLogger(__name__)

NameLike = Union[str, QualifiedName]


class SourceDocument:
    """Generated PHP file without a class body."""

    def __init__(
        self,
        name: str,
        namespace: Optional[str] = None,
        uses: Union[NameLike, Iterable[NameLike]] = (),
        generator: Optional[str] = None,
        strict: Optional[bool] = None,
        *,
        cfg: Optional[GeneratorCfg] = None,
        clock: Optional[Clock] = None,
        hasher: Optional[ContentHasher] = None,
        exporter: Optional[LiteralExporter] = None,
    ):
        self.cfg = cfg or GeneratorCfg()
        self.name = name
        self.namespace = QualifiedName.parse(namespace).fqn if namespace else None
        self.generator = generator or self.cfg.generator or f"{type(self).__module__}.{type(self).__qualname__}"
        self.strict = self.cfg.strict_types if strict is None else bool(strict)
        self.comment: Optional[str] = None

        self.uses = NameSet()
        self.add_import(*([uses] if isinstance(uses, (str, QualifiedName)) else uses))

        self.exporter = exporter or LiteralExporter()
        self._clock = clock
        self._hasher = hasher
        self._optimizer = None
        self._raw: Optional[str] = None

        self._cache: Optional[str] = None
        self._dirty = False

    # ---------------------------- mutators ---------------------------- #

    def add_import(self, *names: NameLike) -> SourceDocument:
        self.uses.add(*names)
        return self

    def set_comment(self, comment: Optional[str]) -> SourceDocument:
        self.comment = comment
        return self

    def raw(self, *lines: str, optimize: Optional[bool] = None) -> SourceDocument:
        """Hand-written code placed after the imports."""
        code = "\n".join(lines)
        if optimize is None:
            optimize = self.cfg.optimize_raw
        if optimize and code.strip():
            code = self.optimizer.optimize(code)
        self._raw = code if code.strip() else None
        return self

    def invalidate(self) -> SourceDocument:
        """Force the next render() to rebuild from the current model."""
        self._dirty = True
        return self

    # ---------------------------- rendering ---------------------------- #

    @property
    def optimizer(self):
        if self._optimizer is None:
            from .optimizer import SourceOptimizer
            self._optimizer = SourceOptimizer()
        return self._optimizer

    def render(self, force_regenerate: bool = False) -> str:
        """
        Rendered source, memoized.

        A failed build raises and keeps the previously cached text.
        """
        if self._cache is not None and not self._dirty and not force_regenerate:
            return self._cache

        text = self._build()
        self._cache = text
        self._dirty = False
        logger.debug(f"Rendered {type(self).__name__} '{self.name}' ({len(text)} chars)")
        return text

    def _head_blocks(self) -> List[str]:
        blocks = [OPEN_TAG]
        if self.strict:
            blocks.append("declare(strict_types=1);")
        if self.namespace:
            blocks.append(f"namespace {self.namespace};")
        if self.uses:
            blocks.append("\n".join(f"use {use};" for use in self.uses.sorted()))
        if self._raw:
            blocks.append(self._raw.strip("\r\n"))
        return blocks

    def _build(self) -> str:
        return "\n\n".join(self._head_blocks()) + "\n"

    # ---------------------------- output ---------------------------- #

    def artifact_builder(self) -> ArtifactBuilder:
        return ArtifactBuilder(
            clock=self._clock or self.cfg.make_clock(),
            hasher=self._hasher or self.cfg.make_hasher(),
            indent=self.cfg.indent,
        )

    def artifact(self) -> RenderedArtifact:
        """Banner-wrapped, canonicalized output."""
        return self.artifact_builder().wrap(self.render(), name=self.name, generator=self.generator)

    def content_hash(self) -> str:
        return self.artifact_builder().content_hash(self.render())

    def to_string(self) -> str:
        return self.artifact().text

    def __str__(self) -> str:
        return self.to_string()

    def print(self, file: Optional[IO[str]] = None) -> None:
        (file or sys.stdout).write(self.to_string())


class TypeDocument(SourceDocument):
    """
    PHP class assembled from a structural model.

    Fragments are keyed by name within their kind: adding an existing name
    replaces the fragment in place. The body renders constants, then
    properties, then methods, each kind in declaration order.
    """

    def __init__(
        self,
        name: NameLike,
        uses: Union[NameLike, Iterable[NameLike]] = (),
        namespace: Optional[str] = None,
        generator: Optional[str] = None,
        strict: Optional[bool] = None,
        final: bool = False,
        abstract: bool = False,
        **kwargs: Any,
    ):
        qn = QualifiedName.parse(name)
        if final and abstract:
            raise InvalidModelError(f"class '{qn.fqn}'", "cannot be both final and abstract")

        super().__init__(
            qn.fqn,
            namespace=namespace or qn.namespace,
            uses=uses,
            generator=generator,
            strict=strict,
            **kwargs,
        )
        self.class_name = qn.short_name
        self.final = bool(final)
        self.abstract = bool(abstract)

        self.superclasses = NameSet()
        self.interfaces = NameSet()
        self.traits = NameSet()
        self._fragments: Dict[str, Dict[str, Fragment]] = {kind: {} for kind in KIND_ORDER}

    # ---------------------------- modifiers ---------------------------- #

    def mark_final(self, flag: bool = True) -> TypeDocument:
        self.final = bool(flag)
        if self.final:
            self.abstract = False
        return self

    def mark_abstract(self, flag: bool = True) -> TypeDocument:
        self.abstract = bool(flag)
        if self.abstract:
            self.final = False
        return self

    def add_superclass(self, name: NameLike) -> TypeDocument:
        self.superclasses.add(name)
        return self

    def add_interface(self, name: NameLike) -> TypeDocument:
        self.interfaces.add(name)
        return self

    def add_trait(self, name: NameLike) -> TypeDocument:
        self.traits.add(name)
        return self

    # ---------------------------- fragments ---------------------------- #

    def _store(self, fragment: Fragment, replace: bool) -> TypeDocument:
        bucket = self._fragments[fragment.KIND]
        if not replace and fragment.name in bucket:
            raise InvalidModelError(
                f"{fragment.KIND} '{fragment.name}' in class '{self.class_name}'",
                "already declared",
                hint="Pass replace=True to update it",
            )
        bucket[fragment.name] = fragment
        return self

    def add_constant(
        self,
        name: str,
        value: Any,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        comment: Optional[str] = None,
        type: Optional[str] = None,
        replace: bool = True,
    ) -> TypeDocument:
        fragment = Constant(name, value, visibility, comment, type, exporter=self.exporter)
        return self._store(fragment, replace)

    def add_property(
        self,
        name: str,
        type: TypeSpec = None,
        default: Any = UNASSIGNED,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        readonly: bool = False,
        comment: Optional[str] = None,
        replace: bool = True,
    ) -> TypeDocument:
        fragment = Property(name, type, default, visibility, readonly, comment, exporter=self.exporter)
        return self._store(fragment, replace)

    def add_method(
        self,
        name: str,
        body: Any = "",
        arguments: Union[str, Sequence[str]] = "",
        returns: TypeSpec = "void",
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        final: bool = False,
        comment: Optional[str] = None,
        replace: bool = True,
        optimize: bool = False,
    ) -> TypeDocument:
        code = str(body)
        if optimize and code.strip():
            code = self.optimizer.optimize(code)
        fragment = Method(name, code, arguments, returns, visibility, final, comment, exporter=self.exporter)
        return self._store(fragment, replace)

    @property
    def constants(self) -> Mapping[str, Fragment]:
        return MappingProxyType(self._fragments[Constant.KIND])

    @property
    def properties(self) -> Mapping[str, Fragment]:
        return MappingProxyType(self._fragments[Property.KIND])

    @property
    def methods(self) -> Mapping[str, Fragment]:
        return MappingProxyType(self._fragments[Method.KIND])

    def get_fragment(self, kind: str, name: str) -> Fragment:
        if kind not in self._fragments:
            raise ValueError(f"Unknown fragment kind: {kind!r}")
        try:
            return self._fragments[kind][name]
        except KeyError:
            raise KeyError(f"No {kind} named '{name}' in class '{self.class_name}'") from None

    def fragments(self) -> Iterator[Fragment]:
        """All fragments in rendering order."""
        for kind in KIND_ORDER:
            yield from self._fragments[kind].values()

    # ---------------------------- rendering ---------------------------- #

    def _signature(self) -> str:
        if self.final and self.abstract:
            raise InvalidModelError(f"class '{self.class_name}'", "cannot be both final and abstract")

        declaration = "class " + self.class_name
        if self.final:
            declaration = "final " + declaration
        elif self.abstract:
            declaration = "abstract " + declaration

        if self.superclasses:
            declaration += " extends " + ", ".join(self.superclasses.references())
        if self.interfaces:
            declaration += " implements " + ", ".join(self.interfaces.references())

        return "\n".join([*docblock(self.comment), declaration])

    def _body(self) -> str:
        blocks: List[str] = []
        if self.traits:
            blocks.append("\n".join(f"\tuse {trait};" for trait in self.traits.references()))

        # method bodies keep the caller's indentation
        for fragment in self.fragments():
            text = fragment.indented("\t")
            if text is not None:
                blocks.append(text)

        if not blocks:
            return "{\n}"

        return "{\n" + "\n\n".join(blocks) + "\n}"

    def _build(self) -> str:
        head = "\n\n".join(self._head_blocks())
        return f"{head}\n\n{self._signature()}\n{self._body()}\n"


__all__ = ["SourceDocument", "TypeDocument"]
