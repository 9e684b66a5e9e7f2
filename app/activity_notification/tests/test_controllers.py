"""
Tests for controller lookup.

Test Classes:
    TestResolveController: Class and dotted-path entries, missing entries
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from activity_notification.controllers import resolve_controller
from activity_notification.exceptions import ControllerNotFoundError
from activity_notification.tests.support import (
    NotificationsViewSet,
    SubscriptionsViewSet,
)


class TestResolveController:
    def test_class_entry(self, echo_controllers):
        assert (
            resolve_controller("activity_notification/notifications")
            is NotificationsViewSet
        )

    def test_dotted_path_entry(self, echo_controllers):
        assert (
            resolve_controller("activity_notification/subscriptions")
            is SubscriptionsViewSet
        )

    def test_missing_entry(self, notification_settings):
        with pytest.raises(ControllerNotFoundError) as exc_info:
            resolve_controller("activity_notification/notifications")

        error = exc_info.value
        assert error.error_code == "CONTROLLER_NOT_FOUND"
        assert error.details["controller"] == "activity_notification/notifications"
        assert error.to_dict()["error_code"] == "CONTROLLER_NOT_FOUND"

    def test_unimportable_entry(self, notification_settings):
        notification_settings["CONTROLLERS"] = {
            "activity_notification/notifications": "nowhere.views.NotificationViewSet"
        }

        with pytest.raises(ControllerNotFoundError) as exc_info:
            resolve_controller("activity_notification/notifications")

        assert exc_info.value.details["reference"] == "nowhere.views.NotificationViewSet"

    def test_is_improperly_configured(self, notification_settings):
        with pytest.raises(ImproperlyConfigured):
            resolve_controller("activity_notification/notifications")

    def test_error_string_includes_code(self, notification_settings):
        with pytest.raises(ControllerNotFoundError) as exc_info:
            resolve_controller("inbox/alerts")

        assert str(exc_info.value).startswith("[CONTROLLER_NOT_FOUND]")
