"""
Meta resolver for registered lists.

``MetaResolver`` composes the query name conventions and the reverse
relationship index into per-list schema metadata and the all-lists listing.
The relationship index is memoized per resolver; a registry never changes
after construction, so the memo is valid for the resolver's lifetime.
"""

import logging
import threading
from typing import Any, Mapping, Optional

from ...config_proxy import get_setting
from ...core.naming import Pluralizer, get_pluralizer, get_query_names
from ...core.registry import ListDeclaration, ListRegistry
from ...core.relationships import RelationshipIndex, build_relationship_index
from ...exceptions import ListNotFoundError
from .types import FieldSummary, ListMetadata, ListSchemaMetadata

logger = logging.getLogger(__name__)


class MetaResolver:
    """Resolves schema metadata for the lists of one registry."""

    def __init__(
        self,
        registry: ListRegistry,
        pluralizer: Optional[Pluralizer] = None,
        cache_index: Optional[bool] = None,
    ):
        self.registry = registry
        self.pluralizer = get_pluralizer(pluralizer)
        if cache_index is None:
            cache_index = bool(get_setting("cache_relationship_index", True))
        self.cache_index = cache_index

        self._lock = threading.RLock()
        self._index: Optional[RelationshipIndex] = None
        self._stats = {"hits": 0, "misses": 0}

    # -------------------------
    # Relationship index
    # -------------------------

    def get_relationship_index(self) -> RelationshipIndex:
        """Return the reverse relationship index, building it if needed."""
        if not self.cache_index:
            return build_relationship_index(self.registry)

        with self._lock:
            if self._index is None:
                self._stats["misses"] += 1
                self._index = build_relationship_index(self.registry)
            else:
                self._stats["hits"] += 1
            return self._index

    def clear_cache(self) -> None:
        """Drop the memoized relationship index."""
        with self._lock:
            self._index = None
        logger.debug("Cleared relationship index cache")

    def get_cache_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "enabled": self.cache_index,
                "built": self._index is not None,
                **self._stats,
            }

    # -------------------------
    # Metadata queries
    # -------------------------

    def _build_schema(
        self,
        declaration: ListDeclaration,
        index: RelationshipIndex,
        field_type: Optional[str],
    ) -> ListSchemaMetadata:
        fields = tuple(
            FieldSummary(name=f.name, type=f.kind.value)
            for f in declaration.fields
            if field_type is None or f.kind.value == field_type
        )
        return ListSchemaMetadata(
            type=declaration.name,
            queries=tuple(get_query_names(declaration.name, self.pluralizer)),
            related_fields=index.get(declaration.name, ()),
            fields=fields,
        )

    def get_list_schema(
        self, name: str, field_type: Optional[str] = None
    ) -> ListSchemaMetadata:
        """
        Get schema metadata for a single list.

        Args:
            name: Registered list name.
            field_type: Optional field kind restricting the ``fields`` projection.

        Raises:
            ListNotFoundError: If ``name`` is not registered.
        """
        declaration = self.registry.get_list(name)
        if declaration is None:
            raise ListNotFoundError(name)
        return self._build_schema(declaration, self.get_relationship_index(), field_type)

    def get_lists_meta(
        self, key: Optional[str] = None, field_type: Optional[str] = None
    ) -> list[ListMetadata]:
        """
        Get metadata for every list in registration order.

        An unknown ``key`` yields an empty list; an unknown ``field_type``
        yields entries with no fields.
        """
        if key is None:
            declarations = list(self.registry)
        else:
            declaration = self.registry.get_list(key)
            declarations = [declaration] if declaration is not None else []

        index = self.get_relationship_index()
        return [
            ListMetadata(
                name=declaration.name,
                schema=self._build_schema(declaration, index, field_type),
            )
            for declaration in declarations
        ]

    def resolve_lists_meta(
        self,
        where: Optional[Mapping[str, Any]] = None,
    ) -> list[ListMetadata]:
        """Variant of ``get_lists_meta`` taking the ``where`` filter mapping."""
        key = where.get("key") if where else None
        return self.get_lists_meta(key=key)

    def get_list_meta(self, name: str) -> ListMetadata:
        """Get the ``{name, schema}`` wrapper for a single list."""
        return ListMetadata(name=name, schema=self.get_list_schema(name))
