"""
Protocol definitions for notification targets.

Available Protocols:
    SubscriptionTarget: Target models that can report subscription support

Usage:
    from activity_notification.protocols import SubscriptionTarget

    class User(AbstractUser):
        @classmethod
        def subscription_enabled(cls) -> bool:
            return True

    isinstance(User, SubscriptionTarget)  # True

Note:
    The check is made against the model class, not an instance, so
    subscription_enabled must be a classmethod or staticmethod. A plain
    instance method is reported as a TargetConfigurationError.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SubscriptionTarget(Protocol):
    """
    Protocol for target models with subscription management.

    Models that do not implement it are treated as having subscriptions
    disabled.
    """

    @classmethod
    def subscription_enabled(cls) -> bool:
        """Whether subscription routes should be generated for this target."""
        ...
