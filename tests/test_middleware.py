"""
Tests for panel_tenancy request rewriting and routing middleware.
"""

import logging

import pytest
from django.http import HttpResponse

from panel_tenancy.classifiers import classify
from panel_tenancy.datatypes import ClassificationResult, DomainKind, MAIN_APP, TenantRoute
from panel_tenancy.middleware import TenantRoutingMiddleware
from panel_tenancy.rewriting import RequestRewriter


@pytest.fixture
def seen():
    """Collect requests reaching the view."""
    return []


@pytest.fixture
def middleware(seen):
    """Create the routing middleware in front of a recording view."""
    def get_response(request):
        seen.append(request)
        return HttpResponse("ok")
    return TenantRoutingMiddleware(get_response)


class TestRequestRewriter:
    """Tests for RequestRewriter."""

    def test_main_passes_through(self, rf):
        request = rf.get("/dashboard/", HTTP_HOST="example.com")

        RequestRewriter("/tenant").rewrite(request, MAIN_APP)

        assert request.path_info == "/dashboard/"
        assert request.path == "/dashboard/"
        assert request.tenant_route is None

    def test_subdomain_tenant_is_prefixed(self, rf):
        request = rf.get("/orders", {"page": "2"}, HTTP_HOST="acme.example.com")
        classification = ClassificationResult(DomainKind.SUBDOMAIN_TENANT, "acme")

        RequestRewriter("/tenant").rewrite(request, classification)

        assert request.path_info == "/tenant/orders"
        assert request.META["PATH_INFO"] == "/tenant/orders"
        assert request.path == "/orders"
        assert request.get_full_path() == "/orders?page=2"
        assert request.tenant_route == TenantRoute("acme", False, "/orders")

    def test_custom_domain_flag(self, rf):
        request = rf.get("/", HTTP_HOST="customsite.com")
        classification = ClassificationResult(DomainKind.CUSTOM_DOMAIN_TENANT, "customsite.com")

        RequestRewriter("/tenant").rewrite(request, classification)

        assert request.path_info == "/tenant/"
        assert request.tenant_route.is_custom_domain is True
        assert request.tenant_route.identifier == "customsite.com"

    def test_script_name_is_kept(self, rf):
        request = rf.get("/orders", HTTP_HOST="acme.example.com", SCRIPT_NAME="/panel")
        request.path = "/panel/orders"
        classification = ClassificationResult(DomainKind.SUBDOMAIN_TENANT, "acme")

        RequestRewriter("/tenant").rewrite(request, classification)

        assert request.path == "/panel/orders"
        assert request.path_info == "/tenant/orders"

    @pytest.mark.parametrize("prefix", ["tenant", "/tenant/", "/tenant"])
    def test_prefix_is_normalized(self, prefix):
        assert RequestRewriter(prefix).rewrite_path("/x") == "/tenant/x"

    def test_default_prefix_from_settings(self):
        assert RequestRewriter().prefix == "/tenant"

    @pytest.mark.parametrize("is_custom_domain,expected", [
        (False, "Subdomain: acme"),
        (True, "Domain: acme"),
    ])
    def test_route_label(self, is_custom_domain, expected):
        assert TenantRoute("acme", is_custom_domain).label == expected


class TestTenantRoutingMiddleware:
    """Tests for TenantRoutingMiddleware."""

    def test_main_domain_passes_through(self, rf, middleware, seen):
        request = rf.get("/pricing/", HTTP_HOST="example.com")

        middleware(request)

        assert seen[0].path_info == "/pricing/"
        assert seen[0].tenant_route is None

    @pytest.mark.parametrize("host", ["www.example.com", "admin.example.com", "api.example.com"])
    def test_reserved_subdomains_pass_through(self, rf, middleware, seen, host):
        request = rf.get("/", HTTP_HOST=host)

        middleware(request)

        assert seen[0].path_info == "/"
        assert seen[0].tenant_route is None

    def test_subdomain_tenant_is_rewritten(self, rf, middleware, seen):
        request = rf.get("/services", {"category": "instagram"}, HTTP_HOST="acme.example.com")

        middleware(request)

        assert seen[0].path_info == "/tenant/services"
        assert seen[0].get_full_path() == "/services?category=instagram"
        assert seen[0].tenant_route == TenantRoute("acme", False, "/services")

    def test_custom_domain_is_rewritten(self, rf, middleware, seen):
        request = rf.get("/", HTTP_HOST="customsite.com")

        middleware(request)

        assert seen[0].path_info == "/tenant/"
        assert seen[0].tenant_route == TenantRoute("customsite.com", True, "/")

    def test_client_signal_headers_are_stripped(self, rf, middleware, seen):
        request = rf.get(
            "/",
            HTTP_HOST="example.com",
            HTTP_X_TENANT_SUBDOMAIN="victim",
            HTTP_X_TENANT_DOMAIN="victim.com",
            HTTP_X_IS_CUSTOM_DOMAIN="true",
            HTTP_X_TENANT_IDENTIFIER="victim",
        )

        middleware(request)

        for key in (
            "HTTP_X_TENANT_SUBDOMAIN",
            "HTTP_X_TENANT_DOMAIN",
            "HTTP_X_IS_CUSTOM_DOMAIN",
            "HTTP_X_TENANT_IDENTIFIER",
        ):
            assert key not in seen[0].META
        assert seen[0].tenant_route is None

    def test_client_cannot_preset_tenant_route(self, rf, middleware, seen):
        request = rf.get("/", HTTP_HOST="example.com")
        request.tenant_route = TenantRoute("victim", False)

        middleware(request)

        assert seen[0].tenant_route is None

    def test_signal_headers_do_not_override_host(self, rf, middleware, seen):
        request = rf.get("/", HTTP_HOST="acme.example.com", HTTP_X_TENANT_SUBDOMAIN="victim")

        middleware(request)

        assert seen[0].tenant_route.identifier == "acme"

    @pytest.mark.parametrize(
        "path",
        ["/static/app.css", "/media/logo.png", "/favicon.ico", "/api/orders/", "/images/hero.webp"],
    )
    def test_exempt_paths_are_not_routed(self, rf, middleware, seen, path):
        request = rf.get(path, HTTP_HOST="acme.example.com")

        middleware(request)

        assert seen[0].path_info == path
        assert seen[0].tenant_route is None

    def test_malformed_host_is_main(self, rf, middleware, seen):
        request = rf.get("/", HTTP_HOST="bad host!")

        middleware(request)

        assert seen[0].tenant_route is None
        assert seen[0].path_info == "/"

    def test_forwarded_host_honoured_when_enabled(self, rf, settings, seen):
        settings.USE_X_FORWARDED_HOST = True
        middleware = TenantRoutingMiddleware(lambda request: seen.append(request) or HttpResponse())
        request = rf.get("/", HTTP_HOST="internal.lb", HTTP_X_FORWARDED_HOST="acme.example.com")

        middleware(request)

        assert seen[0].tenant_route.identifier == "acme"

    def test_main_domain_setting(self, rf, settings, seen):
        settings.PANEL_TENANCY_MAIN_DOMAIN = "localhost:3000"
        middleware = TenantRoutingMiddleware(lambda request: seen.append(request) or HttpResponse())
        request = rf.get("/", HTTP_HOST="foo.localhost:3000")

        middleware(request)

        assert seen[0].tenant_route == TenantRoute("foo", False, "/")

    def test_rewrite_is_audited(self, rf, middleware, caplog):
        request = rf.get("/orders", HTTP_HOST="acme.example.com")

        with caplog.at_level(logging.INFO, logger="panel_tenancy.audit"):
            middleware(request)

        data = caplog.records[-1].audit_data
        assert data["event"] == "tenant_request_rewritten"
        assert data["identifier"] == "acme"
        assert data["kind"] == "subdomain-tenant"
        assert data["original_path"] == "/orders"

    def test_main_domain_is_not_audited(self, rf, middleware, caplog):
        request = rf.get("/", HTTP_HOST="example.com")

        with caplog.at_level(logging.INFO, logger="panel_tenancy.audit"):
            middleware(request)

        assert not caplog.records


def test_classification_matches_middleware(rf, middleware, seen):
    host = "a.b.example.com"
    request = rf.get("/", HTTP_HOST=host)

    middleware(request)

    assert seen[0].tenant_route.identifier == classify(host, "example.com").identifier
