"""
Django REST Framework integration for django-panel-tenancy.

Provides a branding endpoint exposing the resolved render context to
client code, and the permission guarding it.
"""

from panel_tenancy.drf.permissions import HasTenantRoute
from panel_tenancy.drf.views import TenantBrandingView

__all__ = [
    "HasTenantRoute",
    "TenantBrandingView",
]
