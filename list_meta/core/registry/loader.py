"""
Build list registries from declarative configuration.

Lists are declared the same way they are configured in settings::

    LIST_META = {
        "lists": [
            {
                "name": "User",
                "fields": {
                    "company": {"type": "Relationship", "ref": "Company"},
                    "workHistory": {"type": "Relationship", "ref": "Company", "many": True},
                },
            },
            ...
        ]
    }

``lists`` may also be a mapping of list name to list config (in declaration
order) or a dotted import path to either form, or to a callable returning it.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from django.utils.module_loading import import_string

from ...config_proxy import get_setting
from ...exceptions import ConfigurationError
from .declarations import (
    FieldDeclaration,
    FieldKind,
    ListDeclaration,
    RelationshipField,
    ScalarField,
)
from .registry import ListRegistry

logger = logging.getLogger(__name__)

ListsConfig = Union[str, Iterable[Any], Mapping[str, Any]]


def _parse_kind(list_name: str, field_name: str, raw_kind: Any) -> FieldKind:
    if isinstance(raw_kind, FieldKind):
        return raw_kind
    try:
        return FieldKind(raw_kind)
    except ValueError:
        raise ConfigurationError(
            f"Field '{list_name}.{field_name}' has unknown type {raw_kind!r}",
            list_name=list_name,
            field_name=field_name,
        ) from None


def build_field(
    list_name: str, field_name: str, config: Union[str, Mapping[str, Any], FieldDeclaration]
) -> FieldDeclaration:
    """
    Build a field declaration from its config.

    A bare string is shorthand for ``{"type": <string>}``. The ``ref`` of a
    relationship may name a back-reference as ``"List.field"``.
    """
    if isinstance(config, (ScalarField, RelationshipField)):
        return config
    if isinstance(config, (str, FieldKind)):
        config = {"type": config}
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Field '{list_name}.{field_name}' must be declared with a mapping",
            list_name=list_name,
            field_name=field_name,
        )

    kind = _parse_kind(list_name, field_name, config.get("type", FieldKind.TEXT))
    ref = config.get("ref")

    many = config.get("many", False)
    if not isinstance(many, bool):
        raise ConfigurationError(
            f"Field '{list_name}.{field_name}' must set 'many' to true or false, "
            f"got {many!r}",
            list_name=list_name,
            field_name=field_name,
        )

    if kind is not FieldKind.RELATIONSHIP:
        if ref is not None or many:
            raise ConfigurationError(
                f"Field '{list_name}.{field_name}' declares 'ref'/'many' but is "
                f"of type '{kind.value}'",
                list_name=list_name,
                field_name=field_name,
            )
        return ScalarField(name=field_name, kind=kind)

    if not ref or not isinstance(ref, str):
        raise ConfigurationError(
            f"Relationship field '{list_name}.{field_name}' is missing 'ref'",
            list_name=list_name,
            field_name=field_name,
        )
    ref_list, _, ref_field = ref.partition(".")
    return RelationshipField(
        name=field_name,
        ref=ref_list,
        many=many,
        ref_field=ref_field or None,
    )


def build_list(
    config: Union[Mapping[str, Any], ListDeclaration], name: Optional[str] = None
) -> ListDeclaration:
    """Build a list declaration from ``{"name": ..., "fields": {...}}``."""
    if isinstance(config, ListDeclaration):
        return config
    if not isinstance(config, Mapping):
        raise ConfigurationError(f"List config must be a mapping, got {type(config).__name__}")

    list_name = name or config.get("name")
    if not list_name:
        raise ConfigurationError("List config is missing 'name'")

    raw_fields = config.get("fields") or {}
    if isinstance(raw_fields, Mapping):
        items = list(raw_fields.items())
    else:
        # Sequence form: [{"name": "title", "type": "Text"}, ...]
        items = []
        for raw_field in raw_fields:
            if isinstance(raw_field, (ScalarField, RelationshipField)):
                items.append((raw_field.name, raw_field))
            else:
                items.append((raw_field.get("name"), raw_field))

    fields = [build_field(list_name, field_name, raw) for field_name, raw in items]
    return ListDeclaration(name=list_name, fields=fields)


def _resolve_lists_config(config: ListsConfig) -> Any:
    if isinstance(config, str):
        config = import_string(config)
    if callable(config):
        config = config()
    return config


def build_registry(config: ListsConfig) -> ListRegistry:
    """
    Build and validate a registry from list configuration.

    Raises:
        ConfigurationError: If any declaration is malformed or a relationship
            target does not resolve.
    """
    try:
        config = _resolve_lists_config(config)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import list declarations: {exc}") from exc

    if isinstance(config, ListRegistry):
        return config
    if isinstance(config, Mapping):
        declarations = [build_list(value, name=key) for key, value in config.items()]
    elif config is None:
        raise ConfigurationError("List declarations resolved to None")
    else:
        declarations = [build_list(value) for value in config]

    return ListRegistry(declarations)


def load_registry_from_settings() -> ListRegistry:
    """Build the registry declared by ``settings.LIST_META['lists']``."""
    config = get_setting("lists")
    if config is None:
        raise ConfigurationError("LIST_META['lists'] is not configured")
    return build_registry(config)
