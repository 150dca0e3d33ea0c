"""
Middleware for django-panel-tenancy.

Provides TenantRoutingMiddleware, which classifies every request by
its host and rewrites tenant requests into the tenant namespace.
"""

import re
from typing import Callable

from django.http import HttpRequest, HttpResponse

from panel_tenancy.classifiers import classify
from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.rewriting import RequestRewriter
from panel_tenancy.utils import audit_log, get_raw_host, header_to_meta_key


class TenantRoutingMiddleware:
    """
    Middleware that routes each request to the main app or a tenant panel.

    It should run before any middleware that resolves URLs. Tenant
    requests get ``request.tenant_route``; main-app and exempt requests
    get ``request.tenant_route = None``. Client-supplied tenant signal
    headers are removed from every request before classification.

    Configuration:
        PANEL_TENANCY_MAIN_DOMAIN: Domain the panel is served from
        PANEL_TENANCY_RESERVED_SUBDOMAINS: Subdomains kept by the main app
        PANEL_TENANCY_TENANT_PATH_PREFIX: Namespace tenant paths move into
        PANEL_TENANCY_EXEMPT_URLS: List of URL patterns to skip
        PANEL_TENANCY_SIGNAL_HEADERS: Headers never trusted from clients
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        """
        Initialize the middleware.

        Args:
            get_response: The next middleware/view in the chain
        """
        self.get_response = get_response
        self.rewriter = RequestRewriter()
        self._exempt_patterns = self._compile_exempt_patterns()
        self._signal_keys = [
            header_to_meta_key(header)
            for header in panel_tenancy_settings.SIGNAL_HEADERS
        ]

    def _compile_exempt_patterns(self) -> list:
        """Compile exempt URL patterns for faster matching."""
        patterns = panel_tenancy_settings.EXEMPT_URLS
        return [re.compile(pattern) for pattern in patterns]

    def _is_exempt(self, path: str) -> bool:
        """Check if a path is exempt from tenant routing."""
        return any(pattern.match(path) for pattern in self._exempt_patterns)

    def _strip_signal_headers(self, request: HttpRequest) -> None:
        for key in self._signal_keys:
            request.META.pop(key, None)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process the request and route it.

        Args:
            request: The incoming HTTP request

        Returns:
            The response from the view/next middleware
        """
        self._strip_signal_headers(request)
        request.tenant_route = None

        if self._is_exempt(request.path_info):
            return self.get_response(request)

        classification = classify(
            get_raw_host(request),
            panel_tenancy_settings.MAIN_DOMAIN,
            reserved=panel_tenancy_settings.RESERVED_SUBDOMAINS,
        )

        if classification.is_tenant:
            original_path = request.path_info
            self.rewriter.rewrite(request, classification)

            audit_log(
                event="tenant_request_rewritten",
                route=request.tenant_route,
                request=request,
                extra={
                    "kind": str(classification.kind),
                    "original_path": original_path,
                },
            )

        return self.get_response(request)
