"""Metadata result types.

This module contains the dataclasses returned by ``MetaResolver`` and the
Graphene ObjectType classes that expose them.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import graphene

from ...core.relationships import RelatedFieldGroup


@dataclass(frozen=True)
class FieldSummary:
    """Name and kind of a single list field."""

    name: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class ListSchemaMetadata:
    """Schema metadata for one list."""

    type: str
    queries: tuple[str, ...]
    related_fields: tuple[RelatedFieldGroup, ...]
    fields: tuple[FieldSummary, ...] = field(default_factory=tuple)

    def filter_fields(self, field_type: Optional[str] = None) -> tuple[FieldSummary, ...]:
        """Return own fields, restricted to ``field_type`` when given."""
        if field_type is None:
            return self.fields
        return tuple(f for f in self.fields if f.type == field_type)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "queries": list(self.queries),
            "fields": [f.to_dict() for f in self.fields],
            "relatedFields": [group.to_dict() for group in self.related_fields],
        }


@dataclass(frozen=True)
class ListMetadata:
    """Entry of the all-lists metadata listing."""

    name: str
    schema: ListSchemaMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "schema": self.schema.to_dict()}


class FieldSchemaType(graphene.ObjectType):
    """GraphQL type for a list's own field."""

    class Meta:
        name = "_ListSchemaFields"

    name = graphene.String(required=True, description="Field name")
    type = graphene.String(required=True, description="Field type (e.g. 'Text')")


class RelatedFieldsType(graphene.ObjectType):
    """GraphQL type for the fields one list uses to reference another."""

    class Meta:
        name = "_ListSchemaRelatedFields"

    type = graphene.String(required=True, description="Referencing list name")
    fields = graphene.List(
        graphene.NonNull(graphene.String),
        required=True,
        description="Relationship field names, with _<field>Meta for many-valued ones",
    )


class FieldsWhereInput(graphene.InputObjectType):
    class Meta:
        name = "_ListSchemaFieldsInput"

    type = graphene.String(description="Restrict fields to this field type")


class ListSchemaType(graphene.ObjectType):
    """GraphQL type for schema metadata of one list."""

    class Meta:
        name = "_ListSchema"

    type = graphene.String(required=True, description="GraphQL type name of the list")
    queries = graphene.List(
        graphene.NonNull(graphene.String),
        required=True,
        description="Fetch-one, fetch-many and meta query names",
    )
    fields = graphene.List(
        graphene.NonNull(FieldSchemaType),
        required=True,
        where=graphene.Argument(FieldsWhereInput),
        description="Fields declared on the list",
    )
    related_fields = graphene.List(
        graphene.NonNull(RelatedFieldsType),
        required=True,
        description="Fields on other lists referencing this list",
    )

    def resolve_fields(self: ListSchemaMetadata, info, where=None):
        field_type = where.get("type") if where else None
        return self.filter_fields(field_type)

    def resolve_related_fields(self: ListSchemaMetadata, info):
        return self.related_fields


class ListMetaType(graphene.ObjectType):
    """GraphQL type wrapping a list name and its schema metadata."""

    class Meta:
        name = "_ListMeta"

    name = graphene.String(required=True, description="List name")
    schema = graphene.Field(ListSchemaType, required=True)


class ListsMetaWhereInput(graphene.InputObjectType):
    class Meta:
        name = "_ksListsMetaInput"

    key = graphene.String(description="Restrict the listing to this list name")
