"""
list-meta - schema metadata for list-oriented data models.

Derives, from a registry of declared lists and fields, the query names each
list exposes and the relationship fields other lists use to reference it.
"""

from .defaults import LIBRARY_VERSION

__version__ = LIBRARY_VERSION
