"""
Tests for panel_tenancy theme and asset injection.
"""

import pytest

from panel_tenancy.datatypes import FontHandle, TenantConfig, ThemeColors
from panel_tenancy.theming import (
    DEFAULT_FONTS,
    THEME_PRESETS,
    FontRegistry,
    ThemeInjector,
    generate_theme_css,
    get_theme_injector,
    hex_to_hsl,
    normalize_hex,
)


@pytest.fixture
def fonts():
    """Create the built-in font registry."""
    return FontRegistry(DEFAULT_FONTS, default="Inter")


@pytest.fixture
def injector(fonts):
    """Create a theme injector with explicit fallbacks."""
    return ThemeInjector(fonts=fonts, default_brand_name="SMM Panel", default_favicon="/favicon.ico")


@pytest.fixture
def purple_config():
    """Create a fully populated tenant config."""
    return TenantConfig(
        subdomain="acme",
        brand_name="Acme Panel",
        font="Poppins",
        logo="https://cdn.example.com/acme.png",
        theme_colors=ThemeColors(primary="#8B5CF6", secondary="#64748B", accent="#EC4899"),
    )


class TestHexToHsl:
    """Tests for the hex to HSL conversion."""

    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#000000", "0 0% 0%"),
            ("#FFFFFF", "0 0% 100%"),
            ("#FF0000", "0 100% 50%"),
            ("#00FF00", "120 100% 50%"),
            ("#0000FF", "240 100% 50%"),
            ("#FFFF00", "60 100% 50%"),
            ("#00FFFF", "180 100% 50%"),
            ("#FF00FF", "300 100% 50%"),
            ("#808080", "0 0% 50%"),
        ],
    )
    def test_exact_for_reference_colors(self, color, expected):
        assert hex_to_hsl(color) == expected

    def test_tailwind_blue(self):
        assert hex_to_hsl("#3B82F6") == "217 91% 60%"

    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#8B5CF6", "258 90% 66%"),
            ("#64748B", "215 16% 47%"),
            ("#EC4899", "330 81% 60%"),
            ("#10B981", "160 84% 39%"),
        ],
    )
    def test_palette_colors(self, color, expected):
        assert hex_to_hsl(color) == expected

    def test_hash_is_optional(self):
        assert hex_to_hsl("3b82f6") == "217 91% 60%"

    @pytest.mark.parametrize("color", ["", "#FFF", "#GGGGGG", "blue", "#3B82F6FF", None])
    def test_invalid_colors_raise(self, color):
        with pytest.raises(ValueError):
            hex_to_hsl(color)


class TestNormalizeHex:

    def test_upper_cases_and_adds_hash(self):
        assert normalize_hex(" 3b82f6 ") == "#3B82F6"

    def test_rejects_non_strings(self):
        assert normalize_hex(0x3B82F6) is None


class TestGenerateThemeCss:
    """Tests for CSS custom property generation."""

    def test_emits_hex_and_hsl_properties(self):
        css = generate_theme_css(
            ThemeColors(primary="#8B5CF6", secondary="#64748B", accent="#EC4899")
        )

        assert css.startswith(":root {")
        assert "--color-primary: #8B5CF6;" in css
        assert "--color-secondary: #64748B;" in css
        assert "--color-accent: #EC4899;" in css
        assert "--primary: 258 90% 66%;" in css
        assert "--secondary: 215 16% 47%;" in css
        assert "--accent: 330 81% 60%;" in css

    def test_presets_produce_css(self):
        for name, colors in THEME_PRESETS:
            assert "--color-primary: " + colors.primary in generate_theme_css(colors), name


class TestFontRegistry:
    """Tests for font allow-list lookups."""

    def test_known_font(self, fonts):
        assert fonts.handle_for("Poppins") == DEFAULT_FONTS["Poppins"]

    def test_lookup_is_case_insensitive(self, fonts):
        assert fonts.canonical_name("open sans") == "Open Sans"

    @pytest.mark.parametrize("name", ["", "Comic Sans", "<script>", None, 12])
    def test_unknown_fonts_use_default(self, fonts, name):
        assert fonts.handle_for(name) == fonts.default_handle
        assert fonts.default_handle.family == "Inter"

    def test_registry_is_read_only(self, fonts):
        with pytest.raises(TypeError):
            fonts["Inter"] = FontHandle(family="Other", variable="--font-other")

    def test_custom_font_set(self):
        registry = FontRegistry(
            {"Lora": FontHandle(family="Lora", variable="--font-lora", fallback="serif")},
            default="Lora",
        )

        assert registry.handle_for("Poppins").family == "Lora"
        assert list(registry) == ["Lora"]

    def test_default_must_be_supported(self):
        with pytest.raises(ValueError):
            FontRegistry(DEFAULT_FONTS, default="Papyrus")


class TestFontHandle:

    def test_stylesheet_url_with_weights(self):
        handle = DEFAULT_FONTS["Lato"]

        assert handle.stylesheet_url == (
            "https://fonts.googleapis.com/css2?family=Lato:wght@300;400;700&display=swap"
        )

    def test_stylesheet_url_quotes_family(self):
        assert "family=Open+Sans&" in DEFAULT_FONTS["Open Sans"].stylesheet_url

    def test_class_name_and_stack(self):
        handle = DEFAULT_FONTS["Source Sans Pro"]

        assert handle.class_name == "font-source-sans-pro"
        assert handle.css_stack == "'Source Sans Pro', sans-serif"


class TestThemeInjector:
    """Tests for building the render context."""

    def test_inject_full_config(self, injector, purple_config):
        context = injector.inject(purple_config)

        assert context.brand_name == "Acme Panel"
        assert context.font == DEFAULT_FONTS["Poppins"]
        assert context.logo == "https://cdn.example.com/acme.png"
        assert "--primary: 258 90% 66%;" in context.theme_css
        assert context.theme_colors == purple_config.theme_colors

    def test_favicon_falls_back_to_logo(self, injector, purple_config):
        assert injector.inject(purple_config).favicon == "https://cdn.example.com/acme.png"

    def test_explicit_favicon_wins(self, injector):
        config = TenantConfig(
            subdomain="acme",
            font="Inter",
            logo="/logo.png",
            favicon="/icon.png",
            theme_colors=ThemeColors("#3B82F6", "#64748B", "#10B981"),
        )

        assert injector.inject(config).favicon == "/icon.png"

    def test_defaults_for_bare_config(self, injector):
        config = TenantConfig(
            subdomain="bare",
            font="Inter",
            theme_colors=ThemeColors("#3B82F6", "#64748B", "#10B981"),
        )

        context = injector.inject(config)

        assert context.brand_name == "SMM Panel"
        assert context.logo is None
        assert context.favicon == "/favicon.ico"

    def test_unsupported_font_on_config_uses_default(self, injector):
        config = TenantConfig(
            subdomain="acme",
            font="Wingdings",
            theme_colors=ThemeColors("#3B82F6", "#64748B", "#10B981"),
        )

        assert injector.inject(config).font.family == "Inter"

    def test_injector_from_settings(self, settings, purple_config):
        settings.PANEL_TENANCY_DEFAULT_BRAND_NAME = "Reseller Panel"
        settings.PANEL_TENANCY_DEFAULT_FONT = "Lato"

        injector = get_theme_injector()
        bare = TenantConfig(subdomain="bare", font="", theme_colors=purple_config.theme_colors)

        assert injector.fonts.default == "Lato"
        assert injector.inject(bare).brand_name == "Reseller Panel"
        assert injector.inject(bare).font.family == "Lato"

    def test_injector_keeps_given_fonts(self, fonts):
        assert get_theme_injector(fonts=fonts).fonts is fonts
