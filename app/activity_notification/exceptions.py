"""
Exception classes for activity_notification routing.

Route declaration itself never raises: malformed options degrade to defaults
or pass through untouched. These exceptions cover the lookups that happen
later, against project configuration.

Exception Hierarchy:
    ActivityNotificationError (base)
    ├── ControllerNotFoundError - Controller name not configured or not importable
    └── TargetConfigurationError - Target model entry cannot be loaded

Both concrete errors also subclass Django's ImproperlyConfigured, so existing
handlers for configuration problems keep working.

Usage:
    from activity_notification.exceptions import ControllerNotFoundError

    try:
        viewset = resolve_controller("activity_notification/notifications")
    except ControllerNotFoundError as e:
        logger.warning(f"Routing misconfigured: {e.error_code}")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from typing import Any


class ActivityNotificationError(Exception):
    """
    Base exception for activity_notification errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context
    """

    default_error_code: str = "ACTIVITY_NOTIFICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API or log output.

        Returns:
            Dict with error, error_code, and (when set) details keys
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ControllerNotFoundError(ActivityNotificationError, ImproperlyConfigured):
    """
    Raised when a route's controller name cannot be resolved to a ViewSet.

    Example:
        raise ControllerNotFoundError(
            "No controller registered for 'activity_notification/notifications'",
            details={"controller": "activity_notification/notifications"},
        )

    Note:
        Raised at request time, not when routes are declared.
    """

    default_error_code: str = "CONTROLLER_NOT_FOUND"


class TargetConfigurationError(ActivityNotificationError, ImproperlyConfigured):
    """
    Raised when a configured target model entry cannot be loaded.

    An unknown target is not an error (it simply has no subscription
    support). This is only raised for entries that exist in configuration
    but point at a missing model or import path, or at a model whose
    subscription_enabled is an instance method.
    """

    default_error_code: str = "TARGET_MISCONFIGURED"
