"""GraphQL query types for list metadata.

``build_meta_query`` generates a Graphene ObjectType with one
``_<Plural>Meta`` field per registered list and an all-lists field
(``_ksListsMeta`` by default) accepting ``where: {key}``.
"""

import logging
from typing import Any, Optional

import graphene

from ...config_proxy import get_setting
from ...core.naming import get_list_meta_query_name
from ...core.registry import ListRegistry
from ...exceptions import ConfigurationError
from .resolver import MetaResolver
from .types import ListMetaType, ListsMetaWhereInput

logger = logging.getLogger(__name__)


def _make_list_meta_resolver(resolver: MetaResolver, list_name: str):
    def resolve_list_meta(root, info):
        return resolver.get_list_meta(list_name)

    return resolve_list_meta


def build_meta_query_fields(
    registry: ListRegistry,
    resolver: Optional[MetaResolver] = None,
    all_lists_query_name: Optional[str] = None,
) -> dict[str, Any]:
    """
    Build the Graphene fields exposing list metadata.

    Args:
        registry: Registry whose lists are exposed.
        resolver: Resolver to use; a new one is created when omitted.
        all_lists_query_name: Name of the all-lists field; defaults to the
            ``all_lists_query_name`` setting.

    Returns:
        Mapping of attribute name to ``graphene.Field``, ready to be merged
        into a Query type.
    """
    resolver = resolver or MetaResolver(registry)
    all_lists_query_name = all_lists_query_name or get_setting("all_lists_query_name")

    def resolve_lists_meta(root, info, where=None):
        return resolver.resolve_lists_meta(where)

    query_fields: dict[str, Any] = {
        "lists_meta": graphene.Field(
            graphene.List(graphene.NonNull(ListMetaType)),
            required=True,
            name=all_lists_query_name,
            where=graphene.Argument(ListsMetaWhereInput),
            resolver=resolve_lists_meta,
            description="Schema metadata for all registered lists",
        )
    }

    used_names = {all_lists_query_name}
    for declaration in registry:
        query_name = get_list_meta_query_name(declaration.name, resolver.pluralizer)
        if query_name in used_names:
            raise ConfigurationError(
                f"Metadata query name '{query_name}' for list '{declaration.name}' "
                "is already in use",
                list_name=declaration.name,
            )
        used_names.add(query_name)
        query_fields[f"list_meta_{declaration.name}"] = graphene.Field(
            ListMetaType,
            name=query_name,
            required=True,
            resolver=_make_list_meta_resolver(resolver, declaration.name),
            description=f"Schema metadata for the {declaration.name} list",
        )

    logger.debug("Built %d metadata query fields", len(query_fields))
    return query_fields


def build_meta_query(
    registry: ListRegistry,
    resolver: Optional[MetaResolver] = None,
    all_lists_query_name: Optional[str] = None,
) -> type[graphene.ObjectType]:
    """Create a Query ObjectType exposing list metadata."""
    query_fields = build_meta_query_fields(registry, resolver, all_lists_query_name)
    return type("ListMetaQuery", (graphene.ObjectType,), query_fields)


def build_meta_schema(
    registry: ListRegistry,
    resolver: Optional[MetaResolver] = None,
    all_lists_query_name: Optional[str] = None,
) -> graphene.Schema:
    """Create a standalone schema whose Query type only exposes list metadata."""
    query = build_meta_query(registry, resolver, all_lists_query_name)
    return graphene.Schema(query=query)
