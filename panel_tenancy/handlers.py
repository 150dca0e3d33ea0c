"""
Default handlers for panel_tenancy events.

Provides the default "panel not found" response rendered when a
tenant's config cannot be resolved.
"""

from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string

from panel_tenancy.datatypes import TenantRoute


def default_panel_not_found(request: HttpRequest, route: TenantRoute) -> HttpResponse:
    """
    Default handler for tenant config resolution failures.

    Renders an unbranded page naming the subdomain or domain that was
    attempted. Backend error details are never shown. Override this in
    settings by setting PANEL_TENANCY_NOT_FOUND_HANDLER to your custom
    handler.

    Args:
        request: The HTTP request whose tenant could not be resolved
        route: The tenant route that was attempted

    Returns:
        HTTP 404 response
    """
    content = render_to_string(
        "panel_tenancy/not_found.html",
        {
            "route": route,
            "identifier": route.identifier,
            "is_custom_domain": route.is_custom_domain,
        },
        request=request,
    )
    return HttpResponse(content, status=404)
