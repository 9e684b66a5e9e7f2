"""
Management command to list notification and subscription routes.

Walks the active URLconf and prints every pattern generated by
NotificationRouter, one line per HTTP method:

    GET    api/v1/users/<str:user_id>/notifications/   user_notifications   activity_notification/notifications#index

Usage:
    python manage.py show_notification_routes
    python manage.py show_notification_routes --controller subscriptions
    python manage.py show_notification_routes --urlconf config.urls
"""

from django.core.management.base import BaseCommand
from django.urls import URLPattern, URLResolver, get_resolver

from activity_notification.routing import format_route_table


def iter_controller_patterns(patterns, prefix="", namespace=""):
    """Yield (path, name, pattern) for every pattern bound to a controller view."""
    for entry in patterns:
        if isinstance(entry, URLResolver):
            nested = namespace
            if entry.namespace:
                nested = f"{namespace}{entry.namespace}:"
            yield from iter_controller_patterns(
                entry.url_patterns, prefix + str(entry.pattern), nested
            )
        elif isinstance(entry, URLPattern):
            if getattr(entry.callback, "controller", None) is None:
                continue
            name = f"{namespace}{entry.name}" if entry.name else ""
            yield prefix + str(entry.pattern), name, entry


class Command(BaseCommand):
    help = "List routes generated by activity_notification"

    def add_arguments(self, parser):
        parser.add_argument(
            "--controller",
            default="",
            help="Only show routes whose controller name contains this text",
        )
        parser.add_argument(
            "--urlconf",
            default=None,
            help="URLconf module to inspect (defaults to ROOT_URLCONF)",
        )

    def handle(self, *args, **options):
        resolver = get_resolver(options["urlconf"])
        rows = []
        for route_path, name, entry in iter_controller_patterns(resolver.url_patterns):
            controller = entry.callback.controller
            if options["controller"] not in controller:
                continue
            for method, action in entry.callback.actions.items():
                rows.append((method.upper(), route_path, name, f"{controller}#{action}"))

        if not rows:
            self.stdout.write(self.style.WARNING("No notification routes found"))
            return

        self.stdout.write(format_route_table(rows))
        self.stdout.write(self.style.SUCCESS(f"{len(rows)} route(s)"))
