"""
Option resolution and path filtering for notification/subscription routes.

create_options() turns the keyword arguments given to notify_to/subscribed_by
into an immutable RouteOptions value. ignore_path() decides, per optional
action, whether its route is skipped.

Recognized option keys:
    model, controller, with_devise, with_subscription, except_ (or "except"),
    only, as_ (or "as"), path, param, defaults

Anything else is kept in RouteOptions.extra and handed to the resource
declaration untouched.

Usage:
    from activity_notification.options import create_options, ignore_path

    options = create_options(
        "notifications",
        {"with_devise": "users", "except_": ["move"]},
        ("new", "create", "edit", "update"),
        subscription_cascade=True,
    )
    options.controller          # "activity_notification/notifications_with_devise"
    ignore_path("move", options)  # True
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from activity_notification import naming

if TYPE_CHECKING:
    from typing import Any

NOTIFICATION_EXCLUDES: tuple[str, ...] = ("new", "create", "edit", "update")
SUBSCRIPTION_EXCLUDES: tuple[str, ...] = ("new", "edit", "update")

# Keyword spellings for Python reserved words. Mappings may use either form.
OPTION_ALIASES: dict[str, str] = {
    "except": "except_",
    "as": "as_",
}


class FrozenDict(dict):
    """Read-only dict, hashable once built."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._hash: int | None = None

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self.items()))
        return self._hash

    def _immutable(self, *args, **kwargs) -> NoReturn:
        msg = "FrozenDict is immutable"
        raise TypeError(msg)

    __setitem__ = __delitem__ = __ior__ = _immutable
    clear = pop = popitem = setdefault = update = _immutable


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """Fully resolved options for one notify_to/subscribed_by call."""

    resource_kind: str
    model: str
    controller: str
    with_devise: str | None = None
    devise_defaults: Mapping[str, str] = field(default_factory=FrozenDict)
    with_subscription: Any = None
    subscription_option: Mapping[str, Any] | None = None
    except_: tuple[str, ...] = ()
    only: tuple[str, ...] = ()
    as_: str | None = None
    path: str | None = None
    param: str = "id"
    defaults: Mapping[str, Any] = field(default_factory=FrozenDict)
    extra: Mapping[str, Any] = field(default_factory=FrozenDict)

    @property
    def cascades_subscriptions(self) -> bool:
        return self.subscription_option is not None

    def route_defaults(self, target: str) -> FrozenDict:
        """Defaults attached to every route declared for target."""
        return FrozenDict(
            {**self.defaults, "target_type": str(target), **self.devise_defaults}
        )


def _action_names(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(action) for action in value)
    return (str(value),)


def _normalize_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    return {OPTION_ALIASES.get(key, key): value for key, value in options.items()}


def _freeze(value: Any) -> Any:
    """Copy value with mappings as FrozenDicts and lists, tuples and sets as tuples."""
    if isinstance(value, Mapping):
        return FrozenDict({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze(item) for item in value)
    return value


def create_options(
    resource_kind: str,
    raw_options: Mapping[str, Any] | None = None,
    except_actions: Iterable[str] = (),
    *,
    subscription_cascade: bool = False,
) -> RouteOptions:
    """
    Resolve raw caller options into RouteOptions.

    Args:
        resource_kind: "notifications" or "subscriptions"
        raw_options: Caller options; never mutated
        except_actions: Actions appended to except_ regardless of caller input
        subscription_cascade: Whether with_subscription is meaningful here
            (notification entry point only)

    Returns:
        New RouteOptions sharing no mutable state with raw_options. Equal
        inputs always give equal results.
    """
    opts = _normalize_keys(raw_options or {})
    resources = naming.resources_name(resource_kind)

    with_devise = opts.pop("with_devise", None)
    with_devise = str(with_devise) if with_devise else None

    model = opts.pop("model", None)
    controller = opts.pop("controller", None)
    as_ = opts.pop("as_", None)
    path = opts.pop("path", None)
    param = opts.pop("param", None)
    defaults = opts.pop("defaults", None)

    except_ = _action_names(opts.pop("except_", None)) + tuple(except_actions)
    only = _action_names(opts.pop("only", None))

    with_subscription = None
    subscription_option = None
    if subscription_cascade:
        with_subscription = _freeze(opts.pop("with_subscription", None))
        if with_subscription:
            base = (
                _normalize_keys(with_subscription)
                if isinstance(with_subscription, Mapping)
                else {}
            )
            subscription_option = FrozenDict({**base, "with_devise": with_devise})

    return RouteOptions(
        resource_kind=resources,
        model=str(model) if model else resources,
        controller=str(controller)
        if controller
        else naming.controller_name(resources, with_devise),
        with_devise=with_devise,
        devise_defaults=FrozenDict({"devise_type": with_devise} if with_devise else {}),
        with_subscription=with_subscription,
        subscription_option=subscription_option,
        except_=except_,
        only=only,
        as_=str(as_) if as_ else (resources if with_devise else None),
        path=str(path) if path else None,
        param=str(param) if param else "id",
        defaults=_freeze(defaults or {}),
        extra=_freeze(opts),
    )


def ignore_path(action: str, options: RouteOptions) -> bool:
    """
    Whether the optional route for action should be skipped.

    except_ is checked first and wins; only then restricts the remainder.
    """
    if options.except_ and action in options.except_:
        return True
    if options.only and action not in options.only:
        return True
    return False
