"""
django-panel-tenancy

A Django app providing host-based multi-tenant routing and per-tenant
branding for SMM reseller panels.
"""

__version__ = "0.1.0"

# Public API exports
from panel_tenancy.classifiers import classify
from panel_tenancy.datatypes import (
    ClassificationResult,
    DomainKind,
    RenderContext,
    TenantConfig,
    TenantRoute,
    ThemeColors,
)
from panel_tenancy.exceptions import (
    TenantRoutingException,
    TenantConfigError,
    TenantConfigNotFound,
    TenantConfigUnavailable,
    MalformedTenantConfig,
)

__all__ = [
    "__version__",
    "classify",
    "ClassificationResult",
    "DomainKind",
    "RenderContext",
    "TenantConfig",
    "TenantRoute",
    "ThemeColors",
    "TenantRoutingException",
    "TenantConfigError",
    "TenantConfigNotFound",
    "TenantConfigUnavailable",
    "MalformedTenantConfig",
]
