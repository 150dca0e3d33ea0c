"""
Tenant config resolution for django-panel-tenancy.

Fetches a tenant's branding config from the backend config service
by subdomain or by custom domain. Every lookup goes to the backend;
nothing is cached on this side, so branding changes show up on the
next request.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from panel_tenancy.conf import panel_tenancy_settings
from panel_tenancy.datatypes import RenderContext, TenantConfig, TenantRoute
from panel_tenancy.serializers import TenantConfigSerializer
from panel_tenancy.exceptions import (
    MalformedTenantConfig,
    TenantConfigError,
    TenantConfigNotFound,
    TenantConfigUnavailable,
)
from panel_tenancy.theming import (
    FontRegistry,
    ThemeInjector,
    get_font_registry,
    get_theme_injector,
)
from panel_tenancy.utils import audit_log


NO_STORE_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "Cache-Control": "no-cache, no-store, max-age=0",
    "Pragma": "no-cache",
}


class TenantConfigResolver:
    """
    Resolves tenant configs from the backend config service.

    Endpoints (relative to ``api_url``):
        GET /tenant/config/{subdomain}
        GET /tenant/config/domain/{domain}

    Both answer with ``{"success": bool, "data": {...}}``.

    Args:
        api_url: Base URL of the config service
        fonts: Supported font registry used to validate ``font``
        client: Optional httpx client (a fresh one per call otherwise)
        timeout: Request timeout in seconds
        default_theme_colors: Palette used for missing color members
    """

    def __init__(
        self,
        api_url: str = None,
        fonts: FontRegistry = None,
        client: Optional[httpx.Client] = None,
        timeout: float = None,
        default_theme_colors: dict = None,
    ):
        self.api_url = (api_url or panel_tenancy_settings.API_URL).rstrip("/")
        self.fonts = fonts if fonts is not None else get_font_registry()
        self.client = client
        self.timeout = timeout if timeout is not None else panel_tenancy_settings.API_TIMEOUT
        self.default_theme_colors = default_theme_colors

    def endpoint_for(self, identifier: str, is_custom_domain: bool) -> str:
        """
        Build the lookup URL for an identifier.

        Args:
            identifier: Subdomain label or full custom domain
            is_custom_domain: Whether identifier is a custom domain

        Returns:
            Absolute URL of the config endpoint
        """
        key = quote(identifier, safe="")
        if is_custom_domain:
            return f"{self.api_url}/tenant/config/domain/{key}"
        return f"{self.api_url}/tenant/config/{key}"

    def resolve(self, identifier: str, is_custom_domain: bool = False) -> Optional[TenantConfig]:
        """
        Resolve a tenant config, converting every failure to None.

        Not-found and malformed outcomes are logged at INFO; an
        unreachable backend is logged at WARNING so the two stay
        distinguishable even though callers see the same result.

        Args:
            identifier: Subdomain label or full custom domain
            is_custom_domain: Whether identifier is a custom domain

        Returns:
            The normalized TenantConfig, or None if it cannot be resolved
        """
        try:
            config = self.fetch(identifier, is_custom_domain)
        except TenantConfigUnavailable as e:
            audit_log(
                event="tenant_config_unavailable",
                identifier=identifier,
                success=False,
                extra={"reason": e.reason, "error": e.message, "is_custom_domain": is_custom_domain},
                level=logging.WARNING,
            )
            return None
        except TenantConfigError as e:
            audit_log(
                event=f"tenant_config_{e.reason}",
                identifier=identifier,
                success=False,
                extra={"reason": e.reason, "error": e.message, "is_custom_domain": is_custom_domain},
                level=logging.INFO,
            )
            return None

        audit_log(
            event="tenant_config_resolved",
            identifier=identifier,
            extra={"is_custom_domain": is_custom_domain, "font": config.font},
            level=logging.DEBUG,
        )
        return config

    def fetch(self, identifier: str, is_custom_domain: bool = False) -> TenantConfig:
        """
        Fetch and validate a tenant config.

        Args:
            identifier: Subdomain label or full custom domain
            is_custom_domain: Whether identifier is a custom domain

        Returns:
            The normalized TenantConfig

        Raises:
            TenantConfigNotFound: If the backend has no config for identifier
            MalformedTenantConfig: If the backend returned an invalid payload
            TenantConfigUnavailable: If the backend could not be reached
        """
        if not identifier:
            raise TenantConfigNotFound("Empty tenant identifier", identifier=identifier)

        url = self.endpoint_for(identifier, is_custom_domain)

        try:
            response = self._get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TenantConfigUnavailable(
                f"Config service unreachable: {e.__class__.__name__}",
                identifier=identifier,
            ) from e

        if not response.is_success:
            raise TenantConfigNotFound(
                f"Config service answered {response.status_code}",
                identifier=identifier,
                status_code=response.status_code,
            )

        try:
            envelope = response.json()
        except ValueError as e:
            raise MalformedTenantConfig(
                "Config service returned invalid JSON", identifier=identifier
            ) from e

        if not isinstance(envelope, dict) or not envelope.get("success") or not envelope.get("data"):
            raise TenantConfigNotFound(identifier=identifier, status_code=response.status_code)

        serializer = TenantConfigSerializer(
            data=envelope["data"],
            context={"fonts": self.fonts, "default_theme_colors": self.default_theme_colors},
        )
        if not serializer.is_valid():
            raise MalformedTenantConfig(
                "Config payload failed validation",
                identifier=identifier,
                errors=serializer.errors,
            )

        return serializer.to_tenant_config()

    def _get(self, url: str) -> httpx.Response:
        if self.client is not None:
            return self.client.get(url, headers=NO_STORE_HEADERS, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(url, headers=NO_STORE_HEADERS)


def get_config_resolver() -> TenantConfigResolver:
    """Build a TenantConfigResolver configured from settings."""
    return TenantConfigResolver()


def resolve_render_context(
    route: TenantRoute,
    resolver: TenantConfigResolver = None,
    injector: ThemeInjector = None,
) -> Optional[RenderContext]:
    """
    Resolve a routed tenant's config and build its render context.

    Args:
        route: The trusted tenant route of the current request
        resolver: Optional resolver (built from settings otherwise)
        injector: Optional theme injector (built from settings otherwise)

    Returns:
        The RenderContext, or None if the tenant config cannot be resolved
    """
    resolver = resolver or get_config_resolver()
    config = resolver.resolve(route.identifier, route.is_custom_domain)
    if config is None:
        return None

    injector = injector or get_theme_injector(fonts=resolver.fonts)
    return injector.inject(config)
