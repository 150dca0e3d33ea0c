"""
Template context processors for django-panel-tenancy.
"""

from panel_tenancy.exceptions import InvalidTenantContextError


def tenant(request) -> dict:
    """
    Expose the request-scoped tenant render context to templates.

    Adds ``tenant`` (RenderContext or None) and ``tenant_route``
    (TenantRoute or None).
    """
    return {
        "tenant": getattr(request, "tenant_context", None),
        "tenant_route": getattr(request, "tenant_route", None),
    }


def get_tenant_context(request):
    """
    Return the render context of a tenant request.

    Raises:
        InvalidTenantContextError: If the view was not wrapped with tenant_page
    """
    context = getattr(request, "tenant_context", None)
    if context is None:
        raise InvalidTenantContextError(
            "Tenant render context is required but not available"
        )
    return context
