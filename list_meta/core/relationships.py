"""
Reverse relationship index.

For every registered list ``X`` the index holds one ``RelatedFieldGroup`` per
other list ``Y`` that declares relationship fields pointing at ``X``. Groups
follow registry order and field names follow declaration order; each
many-valued field is immediately followed by its ``_<field>Meta`` query name.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .naming import get_related_meta_name
from .registry import ListDeclaration, ListRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelatedFieldGroup:
    """Relationship field names one list uses to reference another."""

    type: str
    fields: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "fields": list(self.fields)}


RelationshipIndex = Mapping[str, tuple[RelatedFieldGroup, ...]]


def _collect_group(source: ListDeclaration, target_name: str) -> tuple[str, ...]:
    names: list[str] = []
    for list_field in source.relationship_fields:
        if not list_field.points_at(target_name):
            continue
        names.append(list_field.name)
        if list_field.many:
            names.append(get_related_meta_name(list_field.name))
    return tuple(names)


def build_relationship_index(registry: ListRegistry) -> RelationshipIndex:
    """
    Build the reverse relationship index for every list in ``registry``.

    Args:
        registry: Validated list registry.

    Returns:
        Read-only mapping of list name to its related field groups. Lists
        nobody references map to an empty tuple.
    """
    groups: dict[str, list[RelatedFieldGroup]] = {
        name: [] for name in registry.get_list_names()
    }

    # Targets are visited per source so each (target, source) pair is
    # emitted once, in source registration order.
    for source in registry:
        targets = []
        for list_field in source.relationship_fields:
            if list_field.ref not in targets:
                targets.append(list_field.ref)
        for target_name in targets:
            groups[target_name].append(
                RelatedFieldGroup(type=source.name, fields=_collect_group(source, target_name))
            )

    logger.debug("Built relationship index for %d lists", len(groups))
    return MappingProxyType({name: tuple(entries) for name, entries in groups.items()})
