"""Metadata extension package.

Exposes schema metadata for registered lists: the query names of each list,
the fields other lists use to reference it, and its own fields.

Example Usage:
    from list_meta.core.registry import build_registry
    from list_meta.extensions.metadata import MetaResolver, build_meta_schema

    registry = build_registry(LISTS)
    resolver = MetaResolver(registry)
    resolver.get_list_schema("Company")
    schema = build_meta_schema(registry, resolver)
"""

from .queries import build_meta_query, build_meta_query_fields, build_meta_schema
from .resolver import MetaResolver
from .types import (
    FieldSchemaType,
    FieldSummary,
    FieldsWhereInput,
    ListMetadata,
    ListMetaType,
    ListSchemaMetadata,
    ListSchemaType,
    ListsMetaWhereInput,
    RelatedFieldsType,
)

__all__ = [
    # Dataclasses
    "FieldSummary",
    "ListMetadata",
    "ListSchemaMetadata",
    # GraphQL types
    "FieldSchemaType",
    "FieldsWhereInput",
    "ListMetaType",
    "ListSchemaType",
    "ListsMetaWhereInput",
    "RelatedFieldsType",
    # Resolver and queries
    "MetaResolver",
    "build_meta_query",
    "build_meta_query_fields",
    "build_meta_schema",
]
