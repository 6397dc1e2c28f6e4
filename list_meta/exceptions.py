"""
Custom exceptions for list metadata derivation.

This module defines the error kinds raised while building a list registry
and while resolving metadata for registered lists.
"""

from typing import Optional


class ListMetaError(Exception):
    """Base exception for list metadata errors."""

    def __init__(self, message: str, list_name: Optional[str] = None):
        self.list_name = list_name
        super().__init__(message)


class ConfigurationError(ListMetaError):
    """Raised when list declarations cannot form a valid registry."""

    def __init__(
        self,
        message: str,
        list_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.field_name = field_name
        super().__init__(message, list_name)


class ListNotFoundError(ListMetaError):
    """Raised when metadata is requested for a list that is not registered."""

    def __init__(self, list_name: str):
        super().__init__(f"List '{list_name}' is not registered", list_name)
