"""
Configuration settings for django-panel-tenancy.

Provides default settings and a Settings accessor class that
allows per-project customization via Django settings, with
environment variable fallbacks for deployment-specific values.
"""

import os

from django.conf import settings


# Default configuration values
PANEL_TENANCY_DEFAULTS = {
    # Main domain (hostname, optionally with port) used for classification
    "MAIN_DOMAIN": "localhost:3000",

    # Base URL of the backend exposing /tenant/config endpoints
    "API_URL": "http://localhost:5000/api",

    # Timeout for the tenant config fetch (seconds)
    "API_TIMEOUT": 5.0,

    # Subdomains that always belong to the main app
    "RESERVED_SUBDOMAINS": ["www", "admin", "api", ""],

    # Path namespace tenant requests are rewritten into
    "TENANT_PATH_PREFIX": "/tenant",

    # URLs that bypass classification entirely (list of regex patterns)
    "EXEMPT_URLS": [
        r"^/static/",
        r"^/media/",
        r"^/favicon\.ico$",
        r"^/api/",
        r".*\.(?:svg|png|jpg|jpeg|gif|webp)$",
    ],

    # Client-supplied headers that must never be trusted as tenant signals
    "SIGNAL_HEADERS": [
        "X-Tenant-Subdomain",
        "X-Tenant-Domain",
        "X-Is-Custom-Domain",
        "X-Tenant-Identifier",
    ],

    # Mapping of font identifier -> FontHandle, or None for the built-in set
    "FONTS": None,

    # Font used when a tenant's font is missing or unsupported
    "DEFAULT_FONT": "Inter",

    # Fallbacks for the rendered shell
    "DEFAULT_BRAND_NAME": "SMM Panel",
    "DEFAULT_FAVICON": "/favicon.ico",
    "DEFAULT_THEME_COLORS": {
        "primary": "#3B82F6",
        "secondary": "#64748B",
        "accent": "#10B981",
    },

    # Behavior when tenant config resolution fails
    # Options: 'raise' or path to custom handler function
    "NOT_FOUND_HANDLER": "panel_tenancy.handlers.default_panel_not_found",

    # Enable audit logging for routing events
    "AUDIT_ENABLED": True,

    # Audit logger name
    "AUDIT_LOGGER": "panel_tenancy.audit",
}

# Settings that may also be supplied through the environment
ENVIRONMENT_FALLBACKS = {
    "MAIN_DOMAIN": "PANEL_MAIN_DOMAIN",
    "API_URL": "PANEL_API_URL",
}


class Settings:
    """
    Settings accessor that reads from Django settings with fallback to
    environment variables and defaults.

    Usage:
        from panel_tenancy.conf import panel_tenancy_settings
        main_domain = panel_tenancy_settings.MAIN_DOMAIN
    """

    def __getattr__(self, name: str):
        """
        Get a setting value.

        First checks Django settings for PANEL_TENANCY_{name}, then the
        environment variable mapped in ENVIRONMENT_FALLBACKS, then falls
        back to the default value.

        Args:
            name: Setting name (without PANEL_TENANCY_ prefix)

        Returns:
            The setting value

        Raises:
            AttributeError: If setting name is not valid
        """
        if name not in PANEL_TENANCY_DEFAULTS:
            raise AttributeError(f"Invalid panel_tenancy setting: '{name}'")

        django_setting_name = f"PANEL_TENANCY_{name}"
        if hasattr(settings, django_setting_name):
            return getattr(settings, django_setting_name)

        env_name = ENVIRONMENT_FALLBACKS.get(name)
        if env_name and os.environ.get(env_name):
            return os.environ[env_name]

        return PANEL_TENANCY_DEFAULTS[name]

    def __dir__(self):
        """Return list of available settings."""
        return list(PANEL_TENANCY_DEFAULTS.keys())


# Singleton instance for easy access
panel_tenancy_settings = Settings()
