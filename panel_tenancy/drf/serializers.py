"""
Serializers exposing a tenant's render context to client code.
"""

from rest_framework import serializers


class FontHandleSerializer(serializers.Serializer):
    family = serializers.CharField()
    variable = serializers.CharField()
    className = serializers.CharField(source="class_name")
    stylesheetUrl = serializers.CharField(source="stylesheet_url")


class RenderContextSerializer(serializers.Serializer):
    """Read-only representation of a tenant's render context for client code."""

    subdomain = serializers.CharField(source="config.subdomain")
    customDomain = serializers.CharField(source="config.custom_domain", allow_null=True)
    brandName = serializers.CharField(source="brand_name")
    logo = serializers.CharField(allow_null=True)
    favicon = serializers.CharField()
    font = FontHandleSerializer()
    themeColors = serializers.SerializerMethodField()
    themeCss = serializers.CharField(source="theme_css")

    def get_themeColors(self, obj) -> dict:
        return obj.theme_colors.as_dict()
