"""
Default configuration for the list-meta library.

Every key the library reads from ``settings.LIST_META`` has its fallback
value here.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"

SETTINGS_NAME = "LIST_META"


LIBRARY_DEFAULTS: dict[str, Any] = {
    # Import path (or literal list) of list declarations.
    "lists": None,
    # Import path of a ``str -> str`` callable; None uses the built-in rule.
    "pluralizer": None,
    "all_lists_query_name": "_ksListsMeta",
    "cache_relationship_index": True,
    "validate_on_startup": True,
}
