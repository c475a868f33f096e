"""
Fragments of a class body: constants, properties and methods.
"""

from __future__ import annotations

from .base import UNASSIGNED, Fragment, TypeSpec, Unassigned, Visibility, docblock, indent_lines, type_expression
from .constant import Constant, infer_php_type
from .method import Method
from .property import Property

# Rendering order of fragment kinds inside a class body.
KIND_ORDER = (Constant.KIND, Property.KIND, Method.KIND)

__all__ = [
    "Fragment",
    "Constant",
    "Property",
    "Method",
    "Visibility",
    "Unassigned",
    "UNASSIGNED",
    "TypeSpec",
    "KIND_ORDER",
    "docblock",
    "indent_lines",
    "type_expression",
    "infer_php_type",
]
