"""
Test doubles: echo controllers and target classes.

The controllers answer every action with the action name and the view kwargs
they received, which is all the URL tests need to check.
"""

from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


def _echo(self, request, *args, **kwargs):
    return Response(
        {
            "controller": self.controller_name,
            "action": self.action,
            "kwargs": kwargs,
        }
    )


class NotificationsViewSet(viewsets.ViewSet):
    controller_name = "activity_notification/notifications"
    authentication_classes = []
    permission_classes = [AllowAny]

    index = show = destroy = open_all = move = open = _echo


class NotificationsWithDeviseViewSet(NotificationsViewSet):
    controller_name = "activity_notification/notifications_with_devise"


class SubscriptionsViewSet(viewsets.ViewSet):
    controller_name = "activity_notification/subscriptions"
    authentication_classes = []
    permission_classes = [AllowAny]

    index = show = create = destroy = _echo
    subscribe = unsubscribe = _echo
    subscribe_to_email = unsubscribe_to_email = _echo
    subscribe_to_optional_target = unsubscribe_to_optional_target = _echo


class SubscriptionsWithDeviseViewSet(SubscriptionsViewSet):
    controller_name = "activity_notification/subscriptions_with_devise"


CONTROLLERS = {
    "activity_notification/notifications": NotificationsViewSet,
    "activity_notification/notifications_with_devise": NotificationsWithDeviseViewSet,
    "activity_notification/subscriptions": (
        "activity_notification.tests.support.SubscriptionsViewSet"
    ),
    "activity_notification/subscriptions_with_devise": (
        "activity_notification.tests.support.SubscriptionsWithDeviseViewSet"
    ),
}


class SubscribedUser:
    """Target with subscription management enabled."""

    @classmethod
    def subscription_enabled(cls):
        return True


class UnsubscribedUser:
    """Target implementing the protocol but with subscriptions turned off."""

    @classmethod
    def subscription_enabled(cls):
        return False


class PlainTarget:
    """Target without the SubscriptionTarget protocol."""


class InstanceMethodTarget:
    """Target whose subscription_enabled cannot be called on the class."""

    def subscription_enabled(self):
        return True


def routes_by_action(router):
    """Map action -> route for a router holding a single target's routes."""
    return {route.action: route for route in router.routes}
