"""
Dataclasses for list and field declarations.

A field is either a ``ScalarField`` or a ``RelationshipField``; only the
relationship variant carries a target list and a cardinality.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class FieldKind(str, Enum):
    """Supported field kinds."""

    TEXT = "Text"
    INTEGER = "Integer"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    CHECKBOX = "Checkbox"
    SELECT = "Select"
    DATE_TIME = "DateTime"
    CALENDAR_DAY = "CalendarDay"
    PASSWORD = "Password"
    URL = "Url"
    UUID = "Uuid"
    FILE = "File"
    RELATIONSHIP = "Relationship"


@dataclass(frozen=True)
class ScalarField:
    """A non-relationship field."""

    name: str
    kind: FieldKind = FieldKind.TEXT

    @property
    def is_relationship(self) -> bool:
        return False


@dataclass(frozen=True)
class RelationshipField:
    """A field referencing items of another (or the same) list."""

    name: str
    ref: str  # related list name
    many: bool = False
    ref_field: Optional[str] = None  # back-reference field on the related list

    @property
    def kind(self) -> FieldKind:
        return FieldKind.RELATIONSHIP

    @property
    def is_relationship(self) -> bool:
        return True

    def points_at(self, list_name: str) -> bool:
        return self.ref == list_name


FieldDeclaration = Union[ScalarField, RelationshipField]


@dataclass(frozen=True)
class ListDeclaration:
    """A named, ordered collection of field declarations."""

    name: str
    fields: tuple[FieldDeclaration, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of fields but store an immutable tuple.
        object.__setattr__(self, "fields", tuple(self.fields))

    def get_field(self, name: str) -> Optional[FieldDeclaration]:
        for list_field in self.fields:
            if list_field.name == name:
                return list_field
        return None

    @property
    def relationship_fields(self) -> tuple[RelationshipField, ...]:
        return tuple(f for f in self.fields if f.is_relationship)
