"""
DRF permission classes for django-panel-tenancy.
"""

from rest_framework.permissions import BasePermission
from rest_framework.request import Request
from rest_framework.views import APIView

from panel_tenancy.utils import audit_log


class HasTenantRoute(BasePermission):
    """
    Permission class that requires the request to address a tenant panel.

    The route is only ever set by TenantRoutingMiddleware, so this
    cannot be satisfied by client-supplied headers.

    Usage:
        class MyView(APIView):
            permission_classes = [HasTenantRoute]
    """

    message = "This endpoint is only available on a tenant panel."

    def has_permission(self, request: Request, view: APIView) -> bool:
        """
        Check that the request was routed to a tenant.

        Args:
            request: The DRF request
            view: The view being accessed

        Returns:
            True if the request carries a tenant route
        """
        if getattr(request, "tenant_route", None) is not None:
            return True

        audit_log(
            event="api_tenant_route_missing",
            success=False,
            request=request,
            extra={"view": view.__class__.__name__},
        )
        return False
