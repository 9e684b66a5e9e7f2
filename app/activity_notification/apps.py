"""Django app configuration for activity_notification."""

from django.apps import AppConfig


class ActivityNotificationConfig(AppConfig):
    """Configuration for the activity_notification app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "activity_notification"
    verbose_name = "Activity Notification"
