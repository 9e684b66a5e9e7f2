"""
Tests for target model lookup and subscription capability.

Test Classes:
    TestGetTargetModel: Overrides, settings entries and misconfiguration
    TestSupportsSubscriptions: Protocol-based capability check
"""

import pytest
from django.contrib.auth.models import Group

from activity_notification.exceptions import TargetConfigurationError
from activity_notification.protocols import SubscriptionTarget
from activity_notification.targets import get_target_model, supports_subscriptions
from activity_notification.tests.support import (
    InstanceMethodTarget,
    PlainTarget,
    SubscribedUser,
    UnsubscribedUser,
)


class TestGetTargetModel:
    def test_unknown_target_is_none(self, notification_settings):
        assert get_target_model("users") is None

    def test_override_class(self, notification_settings):
        assert get_target_model("users", {"users": SubscribedUser}) is SubscribedUser

    def test_override_wins_over_settings(self, notification_settings):
        notification_settings["TARGETS"] = {"users": PlainTarget}

        assert get_target_model("users", {"users": SubscribedUser}) is SubscribedUser

    def test_model_label_from_settings(self, notification_settings):
        notification_settings["TARGETS"] = {"groups": "auth.Group"}

        assert get_target_model("groups") is Group

    def test_dotted_path_from_settings(self, notification_settings):
        notification_settings["TARGETS"] = {
            "users": "activity_notification.tests.support.UnsubscribedUser"
        }

        assert get_target_model("users") is UnsubscribedUser

    def test_missing_model_label_raises(self, notification_settings):
        notification_settings["TARGETS"] = {"users": "auth.Nobody"}

        with pytest.raises(TargetConfigurationError) as exc_info:
            get_target_model("users")

        assert exc_info.value.error_code == "TARGET_MISCONFIGURED"
        assert exc_info.value.details["target"] == "users"

    def test_bad_import_path_raises(self, notification_settings):
        notification_settings["TARGETS"] = {"users": "nowhere.models.User"}

        with pytest.raises(TargetConfigurationError):
            get_target_model("users")


class TestSupportsSubscriptions:
    def test_protocol_detection(self):
        assert isinstance(SubscribedUser, SubscriptionTarget)
        assert not isinstance(PlainTarget, SubscriptionTarget)

    def test_enabled(self, notification_settings):
        assert supports_subscriptions("users", {"users": SubscribedUser}) is True

    def test_disabled(self, notification_settings):
        assert supports_subscriptions("users", {"users": UnsubscribedUser}) is False

    def test_without_protocol(self, notification_settings):
        assert supports_subscriptions("users", {"users": PlainTarget}) is False

    def test_django_model_without_protocol(self, notification_settings):
        notification_settings["TARGETS"] = {"groups": "auth.Group"}

        assert supports_subscriptions("groups") is False

    def test_unknown_target(self, notification_settings):
        assert supports_subscriptions("users") is False

    def test_staticmethod_accepted(self, notification_settings):
        class StaticTarget:
            @staticmethod
            def subscription_enabled():
                return True

        assert supports_subscriptions("users", {"users": StaticTarget}) is True

    def test_instance_method_raises_configuration_error(self, notification_settings):
        with pytest.raises(TargetConfigurationError) as exc_info:
            supports_subscriptions("users", {"users": InstanceMethodTarget})

        assert exc_info.value.details == {
            "target": "users",
            "model": "InstanceMethodTarget",
        }
