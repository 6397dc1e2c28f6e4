"""
Django app configuration for the list-meta library.

On startup the configured list declarations are built once so that broken
relationship targets abort startup instead of failing a later query.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for list-meta."""

    name = "list_meta"
    verbose_name = "List Metadata"
    label = "list_meta"

    def ready(self):
        """Validate list configuration after Django has loaded."""
        self._validate_configuration()

    def _validate_configuration(self):
        from .config_proxy import get_settings_proxy
        from .core.registry import load_registry_from_settings
        from .exceptions import ConfigurationError

        settings = get_settings_proxy()
        if not settings.get("validate_on_startup", True):
            logger.debug("List configuration validation disabled")
            return
        if settings.get("lists") is None:
            logger.info("No lists configured, skipping registry validation")
            return

        try:
            registry = load_registry_from_settings()
        except ConfigurationError as e:
            logger.error(f"Invalid list configuration: {e}")
            raise

        logger.info(
            "List configuration validated: %s", ", ".join(registry.get_list_names())
        )
