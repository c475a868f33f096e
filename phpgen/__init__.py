r"""
phpgen: structured PHP source builder.

    doc = (
        TypeDocument("App\\Models\\User", strict=True)
        .add_superclass("Model")
        .add_constant("TABLE", "users")
        .add_property("name", "string", default="")
        .add_method("label", "\t\treturn $this->name;", returns="string")
    )
    print(doc)
"""

from __future__ import annotations

from .artifact import ArtifactBuilder, RenderedArtifact
from .canonical import canonicalize
from .config import GeneratorCfg, load_generator_cfg
from .document import SourceDocument, TypeDocument
from .errors import (
    CircularReferenceError,
    GeneratorError,
    InvalidModelError,
    SourceSyntaxError,
    UnsupportedValueError,
)
from .fragments import UNASSIGNED, Constant, Fragment, Method, Property, Visibility
from .literals import LiteralExporter, export
from .names import NameSet, QualifiedName
from .providers import ContentHasher, FixedClock, SystemClock

__all__ = [
    "TypeDocument",
    "SourceDocument",
    "Fragment",
    "Constant",
    "Property",
    "Method",
    "Visibility",
    "UNASSIGNED",
    "LiteralExporter",
    "export",
    "ArtifactBuilder",
    "RenderedArtifact",
    "canonicalize",
    "GeneratorCfg",
    "load_generator_cfg",
    "QualifiedName",
    "NameSet",
    "ContentHasher",
    "SystemClock",
    "FixedClock",
    "GeneratorError",
    "UnsupportedValueError",
    "CircularReferenceError",
    "SourceSyntaxError",
    "InvalidModelError",
]
