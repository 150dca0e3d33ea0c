"""
Django app configuration for panel_tenancy.
"""

from django.apps import AppConfig


class PanelTenancyConfig(AppConfig):
    """
    App configuration for django-panel-tenancy.

    Provides host-based routing of reseller panels and per-tenant
    branding for the rendered shell.
    """

    name = "panel_tenancy"
    verbose_name = "Panel Tenancy"
