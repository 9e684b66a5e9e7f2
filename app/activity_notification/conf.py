"""
Settings access for activity_notification.

All options live in a single ACTIVITY_NOTIFICATION dict in the project
settings. Missing keys fall back to DEFAULTS.

Settings:
    CONTROLLERS: Controller name -> ViewSet class or dotted import path
    TARGETS: Target resource name -> "app_label.ModelName" or dotted import path
    INFLECTIONS: Extra irregular words, singular -> plural
    ID_CONVERTER: Django path converter used for id segments
    TRAILING_SLASH: Whether generated paths end with "/"

Usage:
    # settings.py
    ACTIVITY_NOTIFICATION = {
        "CONTROLLERS": {
            "activity_notification/notifications": "inbox.views.NotificationViewSet",
        },
        "TARGETS": {"users": "accounts.User"},
    }

    from activity_notification.conf import get_setting
    converter = get_setting("ID_CONVERTER")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from typing import Any

SETTINGS_NAME = "ACTIVITY_NOTIFICATION"

DEFAULTS: dict[str, Any] = {
    "CONTROLLERS": {},
    "TARGETS": {},
    "INFLECTIONS": {},
    "ID_CONVERTER": "str",
    "TRAILING_SLASH": True,
}


def get_setting(name: str) -> Any:
    """
    Read one activity_notification setting.

    Settings are read on every call so that test overrides take effect
    without reloading anything.

    Raises:
        ImproperlyConfigured: If name is not a known setting
    """
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f"Unknown {SETTINGS_NAME} setting: {name!r}")
    user_settings = getattr(settings, SETTINGS_NAME, None) or {}
    return user_settings.get(name, DEFAULTS[name])
