"""
Test configuration and fixtures for activity_notification tests.

This module provides:
- Router fixtures (default and with explicit target models)
- Settings fixtures wiring the echo controllers and target models

Usage:
    def test_example(router):
        router.notify_to("users")
        assert len(router.routes) == 6
"""

import pytest

from activity_notification.routing import NotificationRouter
from activity_notification.tests.support import (
    CONTROLLERS,
    PlainTarget,
    SubscribedUser,
    UnsubscribedUser,
)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def notification_settings(settings):
    """
    Replace ACTIVITY_NOTIFICATION with a fresh dict for the test.

    Returns the dict so tests can fill in CONTROLLERS, TARGETS, etc.
    """
    settings.ACTIVITY_NOTIFICATION = {
        "CONTROLLERS": {},
        "TARGETS": {},
        "INFLECTIONS": {},
        "ID_CONVERTER": "str",
        "TRAILING_SLASH": True,
    }
    return settings.ACTIVITY_NOTIFICATION


@pytest.fixture
def echo_controllers(notification_settings):
    """Register the echo ViewSets for every default controller name."""
    notification_settings["CONTROLLERS"] = dict(CONTROLLERS)
    return notification_settings


# =============================================================================
# Router Fixtures
# =============================================================================


@pytest.fixture
def router(notification_settings):
    """Router with no target models configured."""
    return NotificationRouter()


@pytest.fixture
def target_router(notification_settings):
    """
    Router with explicit target models.

    users: subscriptions enabled
    guests: protocol implemented, subscriptions disabled
    devices: no protocol
    """
    return NotificationRouter(
        target_models={
            "users": SubscribedUser,
            "guests": UnsubscribedUser,
            "devices": PlainTarget,
        }
    )

