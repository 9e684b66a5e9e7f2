"""
Target model lookup and capability checks.

Target resource names ("users") are mapped to model classes explicitly,
either through the router's target_models argument or the TARGETS setting.
No name inference is attempted.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from django.apps import apps
from django.utils.module_loading import import_string

from activity_notification.conf import get_setting
from activity_notification.exceptions import TargetConfigurationError
from activity_notification.protocols import SubscriptionTarget

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def _load_model(target: str, reference: Any) -> Any:
    if not isinstance(reference, str):
        return reference
    try:
        if reference.count(".") == 1:
            return apps.get_model(reference)
        return import_string(reference)
    except (LookupError, ImportError, ValueError) as e:
        raise TargetConfigurationError(
            f"Cannot load model {reference!r} for target {target!r}",
            details={"target": target, "reference": reference, "reason": str(e)},
        ) from e


def get_target_model(
    target: str, overrides: Mapping[str, Any] | None = None
) -> Any | None:
    """
    Return the model class configured for target, or None if there is none.

    Lookup order: overrides (the router's target_models), then the TARGETS
    setting. Entries may be classes, "app_label.ModelName" labels or dotted
    import paths.

    Raises:
        TargetConfigurationError: If an entry exists but cannot be loaded
    """
    target = str(target)
    if overrides and target in overrides:
        return _load_model(target, overrides[target])
    configured = get_setting("TARGETS")
    if target in configured:
        return _load_model(target, configured[target])
    return None


def supports_subscriptions(
    target: str, overrides: Mapping[str, Any] | None = None
) -> bool:
    """
    Whether target's model reports subscription support.

    Unknown targets and models not implementing SubscriptionTarget count
    as unsupported.

    Raises:
        TargetConfigurationError: If the model entry cannot be loaded, or its
            subscription_enabled cannot be called on the class
    """
    model = get_target_model(target, overrides)
    if model is None:
        logger.debug(f"No model configured for target '{target}'")
        return False
    if not isinstance(model, SubscriptionTarget):
        return False
    check = inspect.getattr_static(model, "subscription_enabled")
    if not isinstance(check, (classmethod, staticmethod)):
        name = getattr(model, "__name__", type(model).__name__)
        logger.warning(f"{name}.subscription_enabled is not a classmethod")
        raise TargetConfigurationError(
            f"{name}.subscription_enabled must be a classmethod "
            f"for target {target!r}",
            details={"target": target, "model": name},
        )
    return bool(model.subscription_enabled())
