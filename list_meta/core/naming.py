"""
Naming conventions for list queries.

Every list ``T`` exposes three queries: ``T`` (fetch one), ``all<Plural>``
(fetch many) and ``_all<Plural>Meta`` (count/pagination metadata). Many-valued
relationship fields get an auxiliary ``_<field>Meta`` query.
"""

from typing import Callable, Optional

from ..config_proxy import get_settings_proxy

Pluralizer = Callable[[str], str]

_VOWELS = frozenset("aeiouAEIOU")
_SIBILANT_SUFFIXES = ("s", "x", "z", "ch", "sh")


def pluralize(name: str) -> str:
    """
    Pluralize a list name using regular English suffix rules.

    ``Company`` -> ``Companies``, ``Address`` -> ``Addresses``,
    ``Post`` -> ``Posts``. Irregular plurals need a custom pluralizer.
    """
    value = str(name or "").strip()
    if not value:
        return value
    if len(value) > 1 and value[-1] in "yY" and value[-2] not in _VOWELS:
        return f"{value[:-1]}ies"
    if value.lower().endswith(_SIBILANT_SUFFIXES):
        return f"{value}es"
    return f"{value}s"


def get_pluralizer(pluralizer: Optional[Pluralizer] = None) -> Pluralizer:
    """Return ``pluralizer``, the configured one, or the built-in rule."""
    if pluralizer is not None:
        return pluralizer
    return get_settings_proxy().get_callable("pluralizer") or pluralize


def get_query_names(list_name: str, pluralizer: Optional[Pluralizer] = None) -> list[str]:
    """Return the fetch-one, fetch-many and meta query names for a list."""
    plural = get_pluralizer(pluralizer)(list_name)
    return [list_name, f"all{plural}", f"_all{plural}Meta"]


def get_list_meta_query_name(list_name: str, pluralizer: Optional[Pluralizer] = None) -> str:
    """Return the per-list schema metadata query name (``_<Plural>Meta``)."""
    return f"_{get_pluralizer(pluralizer)(list_name)}Meta"


def get_related_meta_name(field_name: str) -> str:
    """Return the auxiliary meta query name for a many-valued relationship."""
    return f"_{field_name}Meta"
