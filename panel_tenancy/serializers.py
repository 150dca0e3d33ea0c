"""
Serializers for tenant config payloads.

TenantConfigSerializer validates the ``data`` member of the config
backend's envelope and normalizes it into a TenantConfig. The
serializer context must carry the supported ``fonts`` registry.
"""

from rest_framework import serializers

from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.datatypes import TenantConfig, ThemeColors
from panel_tenancy.theming import THEME_COLOR_NAMES, normalize_hex


def _optional_text(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


def default_theme_colors(context: dict) -> ThemeColors:
    defaults = context.get("default_theme_colors") or panel_tenancy_settings.DEFAULT_THEME_COLORS
    return ThemeColors(**{name: normalize_hex(defaults[name]) for name in THEME_COLOR_NAMES})


class ThemeColorsSerializer(serializers.Serializer):
    """
    Tenant palette. Members that are missing or not ``#RRGGBB`` colors
    are replaced by the configured defaults.
    """

    primary = _optional_text()
    secondary = _optional_text()
    accent = _optional_text()

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        defaults = default_theme_colors(self.context)
        return ThemeColors(**{
            name: normalize_hex(values.get(name)) or getattr(defaults, name)
            for name in THEME_COLOR_NAMES
        })


class TenantConfigSerializer(serializers.Serializer):
    subdomain = _optional_text()
    customDomain = _optional_text()
    brandName = _optional_text()
    logo = _optional_text()
    favicon = _optional_text()
    font = _optional_text()
    themeColors = ThemeColorsSerializer(required=False, allow_null=True)

    def to_tenant_config(self) -> TenantConfig:
        """
        Build the normalized TenantConfig from validated data.

        Must only be called after ``is_valid()`` returned True.
        """
        data = self.validated_data
        fonts = self.context["fonts"]

        return TenantConfig(
            subdomain=data.get("subdomain") or "",
            custom_domain=data.get("customDomain") or None,
            brand_name=data.get("brandName") or "",
            logo=data.get("logo") or None,
            favicon=data.get("favicon") or None,
            font=fonts.canonical_name(data.get("font")),
            theme_colors=data.get("themeColors") or default_theme_colors(self.context),
        )
