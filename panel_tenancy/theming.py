"""
Theme and asset injection for django-panel-tenancy.

Turns a resolved TenantConfig into a RenderContext: a font handle from
a fixed allow-list, CSS custom properties for the tenant palette (hex
plus HSL triples for HSL-based design tokens), and the brand name,
logo and favicon of the rendered shell.
"""

import math
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional

from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.datatypes import FontHandle, RenderContext, TenantConfig, ThemeColors


HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

THEME_COLOR_NAMES = ("primary", "secondary", "accent")

DEFAULT_FONTS = {
    "Inter": FontHandle(family="Inter", variable="--font-inter"),
    "Roboto": FontHandle(family="Roboto", variable="--font-roboto", weights=(300, 400, 500, 700)),
    "Poppins": FontHandle(family="Poppins", variable="--font-poppins", weights=(300, 400, 500, 600, 700)),
    "Montserrat": FontHandle(family="Montserrat", variable="--font-montserrat"),
    "Lato": FontHandle(family="Lato", variable="--font-lato", weights=(300, 400, 700)),
    "Open Sans": FontHandle(family="Open Sans", variable="--font-open-sans"),
    "Source Sans Pro": FontHandle(
        family="Source Sans Pro", variable="--font-source-sans-pro", weights=(300, 400, 600, 700)
    ),
    "Nunito": FontHandle(family="Nunito", variable="--font-nunito"),
}

# Palettes offered to resellers in the customization screen
THEME_PRESETS = (
    ("Default Blue", ThemeColors(primary="#3B82F6", secondary="#64748B", accent="#10B981")),
    ("Purple Theme", ThemeColors(primary="#8B5CF6", secondary="#64748B", accent="#EC4899")),
    ("Green Theme", ThemeColors(primary="#10B981", secondary="#64748B", accent="#F59E0B")),
    ("Red Theme", ThemeColors(primary="#EF4444", secondary="#64748B", accent="#8B5CF6")),
    ("Orange Theme", ThemeColors(primary="#F97316", secondary="#64748B", accent="#06B6D4")),
)


class FontRegistry(Mapping):
    """
    Immutable mapping of supported font identifiers to font handles.

    Lookups through ``handle_for`` and ``canonical_name`` are total:
    unknown, empty or non-string names resolve to the default font.

    Args:
        fonts: Mapping of font identifier to FontHandle
        default: Identifier of the fallback font; must be in ``fonts``
    """

    def __init__(self, fonts: Mapping, default: str):
        if default not in fonts:
            raise ValueError(f"Default font '{default}' is not a supported font")
        self._fonts = MappingProxyType(dict(fonts))
        self._folded = {name.casefold(): name for name in self._fonts}
        self.default = default

    def __getitem__(self, name: str) -> FontHandle:
        return self._fonts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)

    def canonical_name(self, name) -> str:
        """Map a font name to a supported identifier, case-insensitively."""
        if isinstance(name, str):
            if name in self._fonts:
                return name
            folded = self._folded.get(name.strip().casefold())
            if folded is not None:
                return folded
        return self.default

    def handle_for(self, name) -> FontHandle:
        return self._fonts[self.canonical_name(name)]

    @property
    def default_handle(self) -> FontHandle:
        return self._fonts[self.default]


def normalize_hex(value) -> Optional[str]:
    """
    Normalize a hex color to ``#RRGGBB``.

    Args:
        value: Candidate color such as '#3b82f6' or '3B82F6'

    Returns:
        The upper-cased color, or None if it is not a 6-digit hex color
    """
    if not isinstance(value, str):
        return None
    match = HEX_COLOR_PATTERN.match(value.strip())
    if not match:
        return None
    return f"#{match.group(1).upper()}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_hsl(value: str) -> str:
    """
    Convert a hex color to an HSL triple such as ``"217 91% 60%"``.

    Hue is in degrees within [0, 360); saturation and lightness are
    percentages. Each component is rounded half-up to an integer.

    Args:
        value: A ``#RRGGBB`` color (the ``#`` is optional)

    Returns:
        Space-separated ``H S% L%`` string

    Raises:
        ValueError: If value is not a 6-digit hex color
    """
    color = normalize_hex(value)
    if color is None:
        raise ValueError(f"Invalid hex color: {value!r}")

    red, green, blue = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    high, low = max(red, green, blue), min(red, green, blue)

    lightness = (high + low) / 510
    hue = saturation = 0.0

    if high != low:
        delta = (high - low) / 255
        saturation = delta / (1 - abs(2 * lightness - 1))

        r, g, b = red / 255, green / 255, blue / 255
        if high == red:
            sector = ((g - b) / delta) % 6
        elif high == green:
            sector = (b - r) / delta + 2
        else:
            sector = (r - g) / delta + 4
        hue = sector * 60

    h = _round_half_up(hue) % 360
    s = _round_half_up(saturation * 100)
    l = _round_half_up(lightness * 100)  # noqa: E741

    return f"{h} {s}% {l}%"


def generate_theme_css(theme_colors: ThemeColors) -> str:
    """
    Build the ``:root`` block exposing a tenant palette.

    Emits ``--color-<name>`` with the hex value and ``--<name>`` with
    the HSL triple for each of primary, secondary and accent.
    """
    colors = theme_colors.as_dict()
    lines = [":root {"]
    for name in THEME_COLOR_NAMES:
        lines.append(f"  --color-{name}: {colors[name]};")
    for name in THEME_COLOR_NAMES:
        lines.append(f"  --{name}: {hex_to_hsl(colors[name])};")
    lines.append("}")
    return "\n".join(lines) + "\n"


class ThemeInjector:
    """
    Builds the render context for a resolved tenant config.

    No I/O happens here; the config has already been validated by
    the resolver.
    """

    def __init__(
        self,
        fonts: FontRegistry,
        default_brand_name: str = None,
        default_favicon: str = None,
    ):
        self.fonts = fonts
        self.default_brand_name = (
            default_brand_name
            if default_brand_name is not None
            else panel_tenancy_settings.DEFAULT_BRAND_NAME
        )
        self.default_favicon = (
            default_favicon
            if default_favicon is not None
            else panel_tenancy_settings.DEFAULT_FAVICON
        )

    def inject(self, config: TenantConfig) -> RenderContext:
        """
        Produce the render context for a tenant.

        Args:
            config: The resolved tenant config

        Returns:
            RenderContext with font, theme CSS and shell assets
        """
        logo = config.logo or None
        return RenderContext(
            config=config,
            font=self.fonts.handle_for(config.font),
            theme_css=generate_theme_css(config.theme_colors),
            brand_name=config.brand_name or self.default_brand_name,
            logo=logo,
            favicon=config.favicon or logo or self.default_favicon,
        )


def get_font_registry() -> FontRegistry:
    """Build the font registry from settings."""
    fonts = panel_tenancy_settings.FONTS or DEFAULT_FONTS
    return FontRegistry(fonts, default=panel_tenancy_settings.DEFAULT_FONT)


def get_theme_injector(fonts: FontRegistry = None) -> ThemeInjector:
    """Build a ThemeInjector configured from settings."""
    return ThemeInjector(fonts=fonts if fonts is not None else get_font_registry())
