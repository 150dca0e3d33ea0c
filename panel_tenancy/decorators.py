"""
View decorators for django-panel-tenancy.

Provides the decorator that resolves a tenant's branding at render
time and makes it available to the view as ``request.tenant_context``.
"""

from functools import wraps
from typing import Callable

from django.http import Http404, HttpRequest, HttpResponse
from django.utils.module_loading import import_string

from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.resolvers import resolve_render_context


def get_not_found_handler():
    """Get the configured not-found handler, or None to raise Http404."""
    handler_path = panel_tenancy_settings.NOT_FOUND_HANDLER

    if handler_path == "raise":
        return None
    if callable(handler_path):
        return handler_path
    return import_string(handler_path)


def tenant_page(view_func: Callable = None):
    """
    Decorator for views rendered inside a tenant panel.

    Checks:
    1. request.tenant_route was set by TenantRoutingMiddleware
    2. The tenant's config resolves on the config backend

    If the request did not arrive through a tenant host, Http404 is
    raised, so the tenant namespace is not reachable on the main
    domain. If the config cannot be resolved, the configured
    not-found handler renders the fallback page.

    Usage:
        @tenant_page
        def my_view(request):
            brand = request.tenant_context.brand_name
            ...

    For class-based views, use as method_decorator:
        @method_decorator(tenant_page, name='dispatch')
        class MyView(View):
            ...

    Args:
        view_func: The view function to wrap

    Returns:
        Decorated view function
    """
    def decorator(view_func: Callable) -> Callable:
        @wraps(view_func)
        def _wrapped_view(
            request: HttpRequest,
            *args,
            **kwargs
        ) -> HttpResponse:
            route = getattr(request, "tenant_route", None)
            if route is None:
                raise Http404("No tenant panel at this address")

            request.tenant_context = resolve_render_context(route)

            if request.tenant_context is None:
                handler = get_not_found_handler()
                if handler is None:
                    raise Http404("Panel not found")
                return handler(request, route)

            return view_func(request, *args, **kwargs)

        return _wrapped_view

    if view_func is not None:
        return decorator(view_func)
    return decorator
