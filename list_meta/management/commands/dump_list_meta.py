import json

from django.core.management.base import BaseCommand, CommandError

from list_meta.core.registry import load_registry_from_settings
from list_meta.exceptions import ConfigurationError
from list_meta.extensions.metadata import MetaResolver


class Command(BaseCommand):
    help = "Print schema metadata for the configured lists as JSON."

    def add_arguments(self, parser):
        parser.add_argument(
            "--list",
            dest="list_name",
            default=None,
            help="Only print metadata for this list.",
        )
        parser.add_argument(
            "--field-type",
            default=None,
            help="Only include fields of this type (e.g. 'Text').",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (default: 2).",
        )

    def handle(self, *args, **options):
        try:
            registry = load_registry_from_settings()
        except ConfigurationError as exc:
            raise CommandError(str(exc)) from exc

        resolver = MetaResolver(registry)
        lists_meta = resolver.get_lists_meta(
            key=options.get("list_name"), field_type=options.get("field_type")
        )
        payload = [entry.to_dict() for entry in lists_meta]
        self.stdout.write(json.dumps(payload, indent=options.get("indent")))
