"""
Controller lookup.

Routes refer to controllers by name ("activity_notification/notifications").
The CONTROLLERS setting maps those names to DRF ViewSet classes, given either
as classes or dotted import paths.

Usage:
    # settings.py
    ACTIVITY_NOTIFICATION = {
        "CONTROLLERS": {
            "activity_notification/notifications": "inbox.views.NotificationViewSet",
            "activity_notification/subscriptions": "inbox.views.SubscriptionViewSet",
        },
    }

    from activity_notification.controllers import resolve_controller
    viewset = resolve_controller("activity_notification/notifications")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.utils.module_loading import import_string

from activity_notification.conf import get_setting
from activity_notification.exceptions import ControllerNotFoundError

if TYPE_CHECKING:
    from rest_framework.viewsets import ViewSetMixin

logger = logging.getLogger(__name__)


def resolve_controller(name: str) -> type[ViewSetMixin]:
    """
    Return the ViewSet class registered under controller name.

    Raises:
        ControllerNotFoundError: If the name is not configured or its import
            path cannot be loaded
    """
    controllers = get_setting("CONTROLLERS")
    reference = controllers.get(name)
    if reference is None:
        logger.warning(f"No controller registered for '{name}'")
        raise ControllerNotFoundError(
            f"No controller registered for '{name}'",
            details={"controller": name, "registered": sorted(controllers)},
        )
    if not isinstance(reference, str):
        return reference
    try:
        return import_string(reference)
    except ImportError as e:
        logger.warning(f"Controller '{name}' could not be imported from {reference}")
        raise ControllerNotFoundError(
            f"Controller '{name}' could not be imported from {reference!r}",
            details={"controller": name, "reference": reference, "reason": str(e)},
        ) from e
