"""
URL routing for notifications and subscriptions.

NotificationRouter declares a nested family of routes under each target
resource, the way DRF routers do for a ViewSet:

    router = NotificationRouter()
    router.notify_to("users", with_subscription=True)
    router.subscribed_by("admins", with_devise="admins", except_=["subscribe_to_email"])

    urlpatterns = [
        path("api/v1/", include(router.urls)),
    ]

notify_to("users") declares:

    POST    users/<user_id>/notifications/open_all/     open_all_user_notifications   #open_all
    GET     users/<user_id>/notifications/<id>/move/    move_user_notification        #move
    POST    users/<user_id>/notifications/<id>/open/    open_user_notification        #open
    GET     users/<user_id>/notifications/              user_notifications            #index
    GET     users/<user_id>/notifications/<id>/         user_notification             #show
    DELETE  users/<user_id>/notifications/<id>/         user_notification             #destroy

subscribed_by("users") declares subscribe, unsubscribe, subscribe_to_email,
unsubscribe_to_email, subscribe_to_optional_target and
unsubscribe_to_optional_target (POST, member), then index, create, show and
destroy. Every route carries target_type (and devise_type with with_devise)
as fixed view kwargs.

Fixed path segments are declared ahead of the <id> capture so that
".../open_all/" is never swallowed by the member pattern.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from django.urls import path as django_path

from activity_notification import naming
from activity_notification.conf import get_setting
from activity_notification.options import (
    NOTIFICATION_EXCLUDES,
    SUBSCRIPTION_EXCLUDES,
    RouteOptions,
    create_options,
    ignore_path,
)
from activity_notification.targets import supports_subscriptions
from activity_notification.views import controller_view

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from django.urls import URLPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionSpec:
    """One action of a resource family."""

    action: str
    method: Literal["GET", "POST", "DELETE"]
    detail: bool
    suffix: str | None = None
    filtered: bool = True


NOTIFICATION_ACTIONS: tuple[ActionSpec, ...] = (
    ActionSpec("open_all", "POST", detail=False, suffix="open_all"),
    ActionSpec("move", "GET", detail=True, suffix="move"),
    ActionSpec("open", "POST", detail=True, suffix="open"),
    ActionSpec("index", "GET", detail=False, filtered=False),
    ActionSpec("show", "GET", detail=True, filtered=False),
    ActionSpec("destroy", "DELETE", detail=True, filtered=False),
)

SUBSCRIPTION_ACTIONS: tuple[ActionSpec, ...] = (
    ActionSpec("subscribe", "POST", detail=True, suffix="subscribe"),
    ActionSpec("unsubscribe", "POST", detail=True, suffix="unsubscribe"),
    ActionSpec("subscribe_to_email", "POST", detail=True, suffix="subscribe_to_email"),
    ActionSpec(
        "unsubscribe_to_email", "POST", detail=True, suffix="unsubscribe_to_email"
    ),
    ActionSpec(
        "subscribe_to_optional_target",
        "POST",
        detail=True,
        suffix="subscribe_to_optional_target",
    ),
    ActionSpec(
        "unsubscribe_to_optional_target",
        "POST",
        detail=True,
        suffix="unsubscribe_to_optional_target",
    ),
    ActionSpec("index", "GET", detail=False, filtered=False),
    ActionSpec("create", "POST", detail=False, filtered=False),
    ActionSpec("show", "GET", detail=True, filtered=False),
    ActionSpec("destroy", "DELETE", detail=True, filtered=False),
)


@dataclass(frozen=True, slots=True)
class Route:
    """A single declared endpoint."""

    name: str
    method: str
    path: str
    controller: str
    action: str
    target: str
    detail: bool
    defaults: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class TargetScope:
    """Action-less parent resource: path prefix and naming scope for a target."""

    target: str
    singular: str
    id_kwarg: str
    prefix: str


class NotificationRouter:
    """
    Route declaration helper for notification and subscription endpoints.

    Args:
        trailing_slash: End generated paths with "/" (TRAILING_SLASH setting)
        id_converter: Path converter for id segments (ID_CONVERTER setting)
        target_models: Explicit target name -> model mapping, consulted
            before the TARGETS setting for subscription support
    """

    def __init__(
        self,
        *,
        trailing_slash: bool | None = None,
        id_converter: str | None = None,
        target_models: Mapping[str, Any] | None = None,
    ) -> None:
        self.trailing_slash = (
            get_setting("TRAILING_SLASH") if trailing_slash is None else trailing_slash
        )
        self.id_converter = id_converter or get_setting("ID_CONVERTER")
        self.target_models = dict(target_models or {})
        self._routes: list[Route] = []

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def notify_to(self, *targets: str, **options: Any) -> NotificationRouter:
        """
        Declare notification routes for each target.

        Options:
            with_devise: Authentication resource name; selects the
                "_with_devise" controller and adds devise_type to defaults
            with_subscription: True, or a dict of subscribed_by options, to
                also declare subscription routes for targets that support them
            model: Resource name (default "notifications")
            controller: Controller name
            as_: Resource part of route names
            path: Resource URL segment
            param: Member id kwarg name (default "id")
            only: Optional actions to keep
            except_: Actions to skip
            defaults: Extra view kwargs

        Returns:
            The router, for chaining
        """
        resolved = create_options(
            "notifications",
            options,
            NOTIFICATION_EXCLUDES,
            subscription_cascade=True,
        )
        for target in targets:
            scope = self._target_scope(target)
            self._declare_resources(scope, resolved, NOTIFICATION_ACTIONS)

            if resolved.cascades_subscriptions:
                if supports_subscriptions(scope.target, self.target_models):
                    self.subscribed_by(scope.target, **resolved.subscription_option)
                else:
                    logger.debug(
                        f"Target '{scope.target}' does not support subscriptions, "
                        "skipping subscription routes"
                    )
        return self

    def subscribed_by(self, *targets: str, **options: Any) -> NotificationRouter:
        """
        Declare subscription routes for each target.

        Accepts the same options as notify_to except with_subscription.

        Returns:
            The router, for chaining
        """
        resolved = create_options("subscriptions", options, SUBSCRIPTION_EXCLUDES)
        for target in targets:
            scope = self._target_scope(target)
            self._declare_resources(scope, resolved, SUBSCRIPTION_ACTIONS)
        return self

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def _target_scope(self, target: str) -> TargetScope:
        target = str(target)
        singular = naming.singularize(target)
        id_kwarg = f"{singular}_id"
        return TargetScope(
            target=target,
            singular=singular,
            id_kwarg=id_kwarg,
            prefix=f"{target}/<{self.id_converter}:{id_kwarg}>/",
        )

    def _declare_resources(
        self,
        scope: TargetScope,
        options: RouteOptions,
        actions: Iterable[ActionSpec],
    ) -> None:
        if options.extra:
            logger.debug(
                f"Ignoring unsupported route options for '{options.model}': "
                f"{sorted(options.extra)}"
            )

        defaults = options.route_defaults(scope.target)
        for spec in actions:
            # Always-on routes ignore only/except
            if spec.filtered and ignore_path(spec.action, options):
                continue
            route = Route(
                name=self._route_name(scope, options, spec),
                method=spec.method,
                path=self._route_path(scope, options, spec),
                controller=options.controller,
                action=spec.action,
                target=scope.target,
                detail=spec.detail,
                defaults=defaults,
            )
            logger.debug(
                f"Declared {route.method} {route.path} -> "
                f"{route.controller}#{route.action}"
            )
            self._routes.append(route)

        # Routes changed, rebuild url patterns on next access
        self.__dict__.pop("_urls", None)

    def _route_path(
        self, scope: TargetScope, options: RouteOptions, spec: ActionSpec
    ) -> str:
        parts = [options.path or options.model]
        if spec.detail:
            parts.append(f"<{self.id_converter}:{options.param}>")
        if spec.suffix:
            parts.append(spec.suffix)
        route = scope.prefix + "/".join(parts)
        return route + "/" if self.trailing_slash else route

    def _route_name(
        self, scope: TargetScope, options: RouteOptions, spec: ActionSpec
    ) -> str:
        resource = options.as_ or options.model
        if spec.detail:
            resource = naming.singularize(resource)
        name = f"{scope.singular}_{resource}"
        return f"{spec.suffix}_{name}" if spec.suffix else name

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    def get_urls(self) -> list[URLPattern]:
        """
        Build Django URL patterns from the declared routes.

        Routes sharing a path and controller become one pattern whose view
        maps each HTTP method to its action.
        """
        grouped: dict[tuple[str, str], list[Route]] = {}
        for route in self._routes:
            grouped.setdefault((route.path, route.controller), []).append(route)

        urls = []
        for (route_path, controller), group in grouped.items():
            first = group[0]
            actions = {route.method.lower(): route.action for route in group}
            view = controller_view(
                controller,
                actions,
                basename=first.name,
                detail=first.detail,
            )
            urls.append(
                django_path(
                    route_path,
                    view,
                    kwargs=dict(first.defaults),
                    name=first.name,
                )
            )
        return urls

    @property
    def urls(self) -> list[URLPattern]:
        if not hasattr(self, "_urls"):
            self._urls = self.get_urls()
        return self._urls

    def format_routes(self) -> str:
        """
        Column-aligned listing of declared routes:

            GET    users/<str:user_id>/notifications/   user_notifications   activity_notification/notifications#index
        """
        return format_route_table(
            (
                route.method,
                route.path,
                route.name,
                f"{route.controller}#{route.action}",
            )
            for route in self._routes
        )


def format_route_table(rows: Iterable[tuple[str, str, str, str]]) -> str:
    """Align (method, path, name, controller#action) rows into columns."""
    rows = list(rows)
    if not rows:
        return ""
    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    return "\n".join(
        f"{method:<{widths[0]}}   {route_path:<{widths[1]}}   "
        f"{name:<{widths[2]}}   {endpoint}"
        for method, route_path, name, endpoint in rows
    )

