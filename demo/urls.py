"""
Demo URL configuration.

Main app pages live at the root. Tenant panels are served from the
internal /tenant/ namespace that TenantRoutingMiddleware rewrites
tenant hosts into.
"""

from django.urls import path, include

from demo.core import views

urlpatterns = [
    # Main app
    path("", views.home, name="home"),

    # Tenant panels (only reachable through a tenant host)
    path("tenant/", include("panel_tenancy.urls")),
]
