"""
ListRegistry implementation.
"""

import logging
import re
from typing import Iterable, Iterator, Optional

from ...exceptions import ConfigurationError
from .declarations import FieldKind, ListDeclaration, RelationshipField, ScalarField

logger = logging.getLogger(__name__)

_GRAPHQL_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ListRegistry:
    """
    Ordered, immutable set of list declarations.

    The registry is validated once at construction; every relationship
    target must resolve to a registered list. Iteration yields lists in
    registration order.
    """

    def __init__(self, lists: Iterable[ListDeclaration]):
        self._lists: tuple[ListDeclaration, ...] = tuple(lists)
        self._by_name: dict[str, ListDeclaration] = {}

        for declaration in self._lists:
            self._validate_list(declaration)
            self._by_name[declaration.name] = declaration

        for declaration in self._lists:
            self._validate_relationships(declaration)

        logger.info("Built list registry with %d lists", len(self._lists))

    def _validate_list(self, declaration: ListDeclaration) -> None:
        name = declaration.name
        if not isinstance(name, str) or not _GRAPHQL_NAME_RE.match(name):
            raise ConfigurationError(f"Invalid list name: {name!r}", list_name=name)
        if name.startswith("__"):
            raise ConfigurationError(
                f"List name '{name}' uses the reserved '__' prefix", list_name=name
            )
        if name in self._by_name:
            raise ConfigurationError(
                f"List '{name}' is registered more than once", list_name=name
            )

        seen: set[str] = set()
        for list_field in declaration.fields:
            if not isinstance(list_field, (ScalarField, RelationshipField)):
                raise ConfigurationError(
                    f"Field {list_field!r} on list '{name}' is not a field declaration",
                    list_name=name,
                )
            if not isinstance(list_field.name, str) or not _GRAPHQL_NAME_RE.match(
                list_field.name
            ):
                raise ConfigurationError(
                    f"Invalid field name {list_field.name!r} on list '{name}'",
                    list_name=name,
                    field_name=list_field.name,
                )
            if list_field.name in seen:
                raise ConfigurationError(
                    f"Field '{list_field.name}' is declared more than once on list '{name}'",
                    list_name=name,
                    field_name=list_field.name,
                )
            seen.add(list_field.name)
            self._validate_field(name, list_field)

    def _validate_field(self, list_name: str, list_field) -> None:
        if isinstance(list_field, ScalarField):
            if not isinstance(list_field.kind, FieldKind):
                raise ConfigurationError(
                    f"Field '{list_name}.{list_field.name}' has unknown type "
                    f"{list_field.kind!r}",
                    list_name=list_name,
                    field_name=list_field.name,
                )
            if list_field.kind is FieldKind.RELATIONSHIP:
                raise ConfigurationError(
                    f"Field '{list_name}.{list_field.name}' must be declared as a "
                    "RelationshipField",
                    list_name=list_name,
                    field_name=list_field.name,
                )
        elif not isinstance(list_field.ref, str) or not isinstance(list_field.many, bool):
            raise ConfigurationError(
                f"Relationship field '{list_name}.{list_field.name}' needs a list "
                "name 'ref' and a boolean 'many'",
                list_name=list_name,
                field_name=list_field.name,
            )

    def _validate_relationships(self, declaration: ListDeclaration) -> None:
        for list_field in declaration.relationship_fields:
            target = self._by_name.get(list_field.ref)
            if target is None:
                raise ConfigurationError(
                    f"Field '{declaration.name}.{list_field.name}' references "
                    f"unknown list '{list_field.ref}'",
                    list_name=declaration.name,
                    field_name=list_field.name,
                )
            if list_field.ref_field is None:
                continue
            back_reference = target.get_field(list_field.ref_field)
            if back_reference is None or not back_reference.is_relationship:
                raise ConfigurationError(
                    f"Field '{declaration.name}.{list_field.name}' references "
                    f"'{list_field.ref}.{list_field.ref_field}', which is not a "
                    "relationship field",
                    list_name=declaration.name,
                    field_name=list_field.name,
                )

    def __iter__(self) -> Iterator[ListDeclaration]:
        return iter(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def lists(self) -> tuple[ListDeclaration, ...]:
        return self._lists

    def get_list(self, name: str) -> Optional[ListDeclaration]:
        """Get a list declaration by name."""
        return self._by_name.get(name)

    def get_list_names(self) -> list[str]:
        """Get list names in registration order."""
        return [declaration.name for declaration in self._lists]
