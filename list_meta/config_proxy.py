"""
Configuration management for list-meta.

Settings are resolved from ``settings.LIST_META`` first and fall back to
``LIBRARY_DEFAULTS``.
"""

from typing import Any, Callable, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME


class SettingsProxy:
    """
    Proxy for accessing list-meta settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Django settings (LIST_META)
    2. Library defaults (LIBRARY_DEFAULTS)

    Lookups are not cached so ``override_settings`` is honoured.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution.

        Args:
            key: Setting key to retrieve (supports dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        django_value = self._get_nested_value(
            getattr(settings, SETTINGS_NAME, {}) or {}, key
        )
        if django_value is not None:
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            return library_value

        return default

    def get_callable(self, key: str) -> Optional[Callable]:
        """Resolve a setting holding a callable or its dotted import path."""
        value = self.get(key)
        if value is None:
            return None
        if isinstance(value, str):
            return import_string(value)
        return value

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current


settings_proxy = SettingsProxy()


def get_settings_proxy() -> SettingsProxy:
    """Return the shared settings proxy."""
    return settings_proxy


def get_setting(key: str, default: Any = None) -> Any:
    """Shortcut for ``settings_proxy.get``."""
    return settings_proxy.get(key, default)
