"""
Views bound to generated routes.

Each generated URL pattern gets one view from controller_view(). The view
knows its controller name and its HTTP method -> action mapping, and looks
the controller up on every request, so the URLconf can be loaded before (or
without) the controllers being importable.

The returned view exposes `controller`, `actions` and `initkwargs`
attributes, in the same spirit as DRF's `view.cls` / `view.actions`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.views.decorators.csrf import csrf_exempt

from activity_notification.controllers import resolve_controller

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from django.http import HttpRequest, HttpResponse


def controller_view(
    controller: str,
    actions: Mapping[str, str],
    **initkwargs: Any,
) -> Callable[..., HttpResponse]:
    """
    Build a view dispatching to controller's actions.

    Args:
        controller: Controller name resolved through the CONTROLLERS setting
        actions: Lower-case HTTP method -> action name, e.g. {"get": "show"}
        **initkwargs: Passed to ViewSet.as_view (basename, detail, ...)

    Returns:
        CSRF-exempt view callable. Methods missing from actions get a 405
        from DRF.
    """
    actions = dict(actions)

    @csrf_exempt
    def view(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        viewset = resolve_controller(controller)
        return viewset.as_view(dict(actions), **initkwargs)(request, *args, **kwargs)

    view.controller = controller
    view.actions = actions
    view.initkwargs = initkwargs
    return view
