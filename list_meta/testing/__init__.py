"""
Public test utilities for list-meta.
"""

from .harness import (
    ListMetaTestClient,
    SchemaHarness,
    build_schema,
    override_list_meta_settings,
)

__all__ = [
    "ListMetaTestClient",
    "SchemaHarness",
    "build_schema",
    "override_list_meta_settings",
]
