"""
Core metadata derivation: registry, naming conventions and the reverse
relationship index.
"""

from .naming import (
    get_list_meta_query_name,
    get_query_names,
    get_related_meta_name,
    pluralize,
)
from .registry import (
    FieldKind,
    ListDeclaration,
    ListRegistry,
    RelationshipField,
    ScalarField,
    build_registry,
)
from .relationships import RelatedFieldGroup, build_relationship_index

__all__ = [
    "FieldKind",
    "ListDeclaration",
    "ListRegistry",
    "RelatedFieldGroup",
    "RelationshipField",
    "ScalarField",
    "build_registry",
    "build_relationship_index",
    "get_list_meta_query_name",
    "get_query_names",
    "get_related_meta_name",
    "pluralize",
]
