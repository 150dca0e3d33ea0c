"""
Value types shared by the routing, resolution and theming layers.

All of them are immutable: a value is created once per request and
discarded with it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import quote_plus


class DomainKind(str, Enum):
    """What an inbound host addresses."""

    MAIN = "main"
    SUBDOMAIN_TENANT = "subdomain-tenant"
    CUSTOM_DOMAIN_TENANT = "custom-domain-tenant"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying a host header against the main domain."""

    kind: DomainKind
    identifier: str = ""

    @property
    def is_tenant(self) -> bool:
        return self.kind != DomainKind.MAIN

    @property
    def is_custom_domain(self) -> bool:
        return self.kind == DomainKind.CUSTOM_DOMAIN_TENANT


MAIN_APP = ClassificationResult(kind=DomainKind.MAIN, identifier="")


@dataclass(frozen=True)
class TenantRoute:
    """
    Trusted tenant signals attached to a rewritten request.

    Only the routing middleware creates these; anything the client
    sends in headers is discarded before this is set.
    """

    identifier: str
    is_custom_domain: bool
    original_path: str = "/"

    @property
    def label(self) -> str:
        """Human-readable description of the addressed tenant."""
        kind = "Domain" if self.is_custom_domain else "Subdomain"
        return f"{kind}: {self.identifier}"


@dataclass(frozen=True)
class ThemeColors:
    primary: str
    secondary: str
    accent: str

    def as_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
        }


@dataclass(frozen=True)
class TenantConfig:
    """
    Branding identity of one tenant, as resolved from the backend.

    ``font`` is always a member of the supported font set and
    ``theme_colors`` always has all three members populated.
    """

    subdomain: str
    font: str
    theme_colors: ThemeColors
    brand_name: str = ""
    custom_domain: Optional[str] = None
    logo: Optional[str] = None
    favicon: Optional[str] = None


GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2"


@dataclass(frozen=True)
class FontHandle:
    """
    A loadable font family.

    Args:
        family: Font family name as published on Google Fonts
        variable: CSS custom property the family is exposed under
        weights: Weights to load; empty means the variable-weight axis
        fallback: Generic family appended to the CSS stack
    """

    family: str
    variable: str
    weights: Tuple[int, ...] = field(default_factory=tuple)
    fallback: str = "sans-serif"

    @property
    def class_name(self) -> str:
        return "font-" + self.family.lower().replace(" ", "-")

    @property
    def css_stack(self) -> str:
        return f"'{self.family}', {self.fallback}"

    @property
    def stylesheet_url(self) -> str:
        family = quote_plus(self.family)
        if self.weights:
            weights = ";".join(str(weight) for weight in sorted(self.weights))
            family = f"{family}:wght@{weights}"
        return f"{GOOGLE_FONTS_URL}?family={family}&display=swap"


@dataclass(frozen=True)
class RenderContext:
    """Everything the tenant shell needs to render branded pages."""

    config: TenantConfig
    font: FontHandle
    theme_css: str
    brand_name: str
    favicon: str
    logo: Optional[str] = None

    @property
    def theme_colors(self) -> ThemeColors:
        return self.config.theme_colors
