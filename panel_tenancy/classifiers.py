"""
Hostname classification for django-panel-tenancy.

Decides whether an inbound host addresses the main application,
a tenant subdomain of the main domain, or a tenant's custom domain.
Classification is pure string logic and never raises: anything it
cannot make sense of is treated as the main application.
"""

import re
from typing import Iterable, Optional

from panel_tenancy.datatypes import ClassificationResult, DomainKind, MAIN_APP
from panel_tenancy.utils import is_ip_literal, is_loopback_host, strip_port


# Subdomains that always belong to the main application
RESERVED_SUBDOMAINS = frozenset({"www", "admin", "api", ""})

# Dot-separated labels of letters, digits, hyphens and underscores
HOST_PATTERN = re.compile(r"^[a-z0-9_-]+(?:\.[a-z0-9_-]+)*$")

LOCALHOST_SUFFIX = ".localhost"


def normalize_host(value: str) -> str:
    """
    Lower-case a host and drop its port and any trailing root dot.

    Args:
        value: Host header or configured domain

    Returns:
        The normalized host, possibly empty
    """
    host = strip_port(value).lower()
    if host.endswith("."):
        host = host[:-1]
    return host


def classify(
    host_header: str,
    main_domain: str,
    reserved: Optional[Iterable[str]] = None,
) -> ClassificationResult:
    """
    Classify a request host against the configured main domain.

    Examples (main domain ``example.com``):
        ``example.com``           -> main
        ``www.example.com``       -> main (reserved)
        ``acme.example.com``      -> subdomain-tenant ``acme``
        ``a.b.example.com``       -> subdomain-tenant ``a.b``
        ``acme.localhost:3000``   -> subdomain-tenant ``acme``
        ``customsite.com``        -> custom-domain-tenant ``customsite.com``

    Reserved identifiers only match exactly, so ``www.acme.example.com``
    is the tenant ``www.acme``.

    Args:
        host_header: Raw Host header, possibly with a port
        main_domain: Main domain, possibly with a port
        reserved: Identifiers that always map to the main app

    Returns:
        The classification; ``MAIN_APP`` for malformed input
    """
    if not isinstance(host_header, str) or not isinstance(main_domain, str):
        return MAIN_APP

    reserved = RESERVED_SUBDOMAINS if reserved is None else frozenset(reserved)
    host = normalize_host(host_header)
    main = normalize_host(main_domain)

    if not host or not main or host == main:
        return MAIN_APP

    # Requests by address (health checks, load balancers) are never tenants
    if is_ip_literal(host) or not HOST_PATTERN.match(host):
        return MAIN_APP

    if host.endswith(LOCALHOST_SUFFIX):
        return _subdomain_result(host[: -len(LOCALHOST_SUFFIX)], reserved)

    if is_loopback_host(host):
        return MAIN_APP

    if host.endswith("." + main):
        labels = host.split(".")
        excess = len(labels) - len(main.split("."))
        return _subdomain_result(".".join(labels[:excess]), reserved)

    return ClassificationResult(
        kind=DomainKind.CUSTOM_DOMAIN_TENANT,
        identifier=host_header.strip(),
    )


def _subdomain_result(subdomain: str, reserved: frozenset) -> ClassificationResult:
    if subdomain in reserved:
        return MAIN_APP
    return ClassificationResult(kind=DomainKind.SUBDOMAIN_TENANT, identifier=subdomain)
