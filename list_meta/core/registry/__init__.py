"""
List registry for list-meta.

This package provides the list and field declarations, the immutable
registry built from them and the loaders that build it from configuration.
"""

from .declarations import (
    FieldDeclaration,
    FieldKind,
    ListDeclaration,
    RelationshipField,
    ScalarField,
)
from .loader import build_field, build_list, build_registry, load_registry_from_settings
from .registry import ListRegistry

__all__ = [
    "FieldDeclaration",
    "FieldKind",
    "ListDeclaration",
    "ListRegistry",
    "RelationshipField",
    "ScalarField",
    "build_field",
    "build_list",
    "build_registry",
    "load_registry_from_settings",
]
