"""
URL patterns of the tenant namespace.

Include them under the configured TENANT_PATH_PREFIX:

    path("tenant/", include("panel_tenancy.urls"))
"""

from django.urls import path

from panel_tenancy.drf.views import TenantBrandingView
from panel_tenancy.views import TenantHomeView, theme_stylesheet

app_name = "panel_tenancy"

urlpatterns = [
    path("", TenantHomeView.as_view(), name="home"),
    path("theme.css", theme_stylesheet, name="theme-css"),
    path("branding/", TenantBrandingView.as_view(), name="branding"),
]
