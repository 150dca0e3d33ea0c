"""
Demo Django application settings.

This demonstrates how to configure a Django project to serve tenant
panels with panel_tenancy.

Run with:
    DJANGO_SETTINGS_MODULE=demo.settings django-admin runserver 3000

Then visit http://localhost:3000/ for the main app and
http://acme.localhost:3000/ for the "acme" tenant panel.
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = "demo-secret-key-change-in-production"

DEBUG = True

ALLOWED_HOSTS = ["*"]

# =============================================================================
# Application definition
# =============================================================================

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",

    # Third-party
    "rest_framework",

    # Our library
    "panel_tenancy",
]

MIDDLEWARE = [
    # Panel tenancy middleware - MUST run before anything that resolves URLs
    "panel_tenancy.middleware.TenantRoutingMiddleware",

    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "demo.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "panel_tenancy.context_processors.tenant",
            ],
        },
    },
]

WSGI_APPLICATION = "demo.wsgi.application"

# =============================================================================
# Database
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.path.join(BASE_DIR, "demo_db.sqlite3"),
    }
}

# =============================================================================
# Internationalization
# =============================================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# =============================================================================
# Static files
# =============================================================================

STATIC_URL = "/static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# =============================================================================
# Django REST Framework
# =============================================================================

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# =============================================================================
# Panel Tenancy Configuration
# =============================================================================

# Host of the main app; "<label>.<main domain>" hosts are tenant panels
PANEL_TENANCY_MAIN_DOMAIN = os.environ.get("PANEL_MAIN_DOMAIN", "localhost:3000")

# Base URL of the tenant config service
PANEL_TENANCY_API_URL = os.environ.get("PANEL_API_URL", "http://localhost:5000/api")

# Subdomain labels that belong to the main app
PANEL_TENANCY_RESERVED_SUBDOMAINS = ["www", "admin", "api", ""]

# Internal namespace tenant requests are rewritten into
PANEL_TENANCY_TENANT_PATH_PREFIX = "/tenant"

# Enable audit logging for routing and config resolution events
PANEL_TENANCY_AUDIT_ENABLED = True

# =============================================================================
# Logging
# =============================================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "panel_tenancy.audit": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
