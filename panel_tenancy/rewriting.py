"""
Request rewriting for django-panel-tenancy.

Moves tenant requests into the tenant URL namespace and attaches the
trusted ``TenantRoute`` signal consumed at render time.
"""

from django.http import HttpRequest

from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.datatypes import ClassificationResult, TenantRoute


class RequestRewriter:
    """
    Rewrites tenant requests into a fixed path namespace.

    ``/orders?page=2`` on ``acme.example.com`` becomes
    ``/tenant/orders?page=2`` for URL resolution, with
    ``request.tenant_route`` set to ``TenantRoute("acme", False)``.
    Only ``path_info`` moves: ``request.path`` keeps the address the
    client used, so redirects built from it (APPEND_SLASH, SSL) never
    expose the namespace. The query string lives in ``META`` and is
    left untouched.
    """

    def __init__(self, prefix: str = None):
        prefix = prefix if prefix is not None else panel_tenancy_settings.TENANT_PATH_PREFIX
        self.prefix = ("/" + prefix.strip("/")).rstrip("/")

    def rewrite(self, request: HttpRequest, classification: ClassificationResult) -> HttpRequest:
        """
        Rewrite a request according to its classification.

        Args:
            request: The incoming HTTP request
            classification: Result of classifying the request host

        Returns:
            The same request, rewritten when it targets a tenant
        """
        if not classification.is_tenant:
            request.tenant_route = None
            return request

        original_path = request.path_info or "/"
        path_info = self.rewrite_path(original_path)

        request.path_info = path_info
        request.META["PATH_INFO"] = path_info

        request.tenant_route = TenantRoute(
            identifier=classification.identifier,
            is_custom_domain=classification.is_custom_domain,
            original_path=original_path,
        )
        return request

    def rewrite_path(self, path: str) -> str:
        """Prefix a path with the tenant namespace."""
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.prefix}{path}"
