"""
Utility functions for django-panel-tenancy.

Provides helpers for host header handling and audit logging.
"""

import ipaddress
import logging
from typing import Optional

from django.conf import settings
from django.utils import timezone

from panel_tenancy.conf import panel_tenancy_settings


LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "[::1]", "::1", "0.0.0.0"})


def strip_port(host: str) -> str:
    """
    Remove a trailing port from a host header value.

    Bracketed IPv6 literals keep their brackets:
    ``[::1]:8000`` becomes ``[::1]``.

    Args:
        host: Raw host value (e.g., 'tenant.example.com:8000')

    Returns:
        The host without its port
    """
    host = host.strip()
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    return host.split(":", 1)[0]


def is_ip_literal(host: str) -> bool:
    """Check whether a port-less host is an IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def is_loopback_host(host: str) -> bool:
    """
    Check whether a port-less host is a local development host.

    Args:
        host: Lower-cased host without port

    Returns:
        True for localhost, *.localhost and loopback addresses
    """
    if host in LOOPBACK_HOSTS or host.endswith(".localhost"):
        return True
    if is_ip_literal(host):
        return ipaddress.ip_address(host.strip("[]")).is_loopback
    return False


def get_raw_host(request) -> str:
    """
    Extract the host the client addressed, without validating it.

    Unlike ``request.get_host()`` this never raises ``DisallowedHost``:
    custom domains are unknown ahead of time.

    Args:
        request: Django HTTP request

    Returns:
        The raw host header value, possibly empty
    """
    if getattr(settings, "USE_X_FORWARDED_HOST", False):
        forwarded = request.META.get("HTTP_X_FORWARDED_HOST")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.META.get("HTTP_HOST") or request.META.get("SERVER_NAME", "")


def header_to_meta_key(header: str) -> str:
    """Convert an HTTP header name to Django's META key format."""
    return f"HTTP_{header.upper().replace('-', '_')}"


def get_audit_logger() -> logging.Logger:
    """
    Get the audit logger instance.

    Returns:
        Logger instance for audit events
    """
    return logging.getLogger(panel_tenancy_settings.AUDIT_LOGGER)


def audit_log(
    event: str,
    route=None,
    identifier: Optional[str] = None,
    success: bool = True,
    request=None,
    extra: dict = None,
    level: int = None,
):
    """
    Log an audit event for tenant routing activities.

    Args:
        event: Event type (e.g., 'tenant_request_rewritten')
        route: The TenantRoute involved (if any)
        identifier: Tenant identifier when no route is available
        success: Whether the operation succeeded
        request: The HTTP request (for IP/user agent extraction)
        extra: Additional context data
        level: Explicit log level; defaults to INFO on success, WARNING otherwise
    """
    if not panel_tenancy_settings.AUDIT_ENABLED:
        return

    logger = get_audit_logger()

    # Build log data
    log_data = {
        "event": event,
        "timestamp": timezone.now().isoformat(),
        "success": success,
    }

    if route:
        log_data["identifier"] = route.identifier
        log_data["is_custom_domain"] = route.is_custom_domain
    elif identifier is not None:
        log_data["identifier"] = identifier

    if request:
        log_data["ip_address"] = get_client_ip(request)
        log_data["user_agent"] = request.META.get("HTTP_USER_AGENT", "")[:200]
        log_data["host"] = get_raw_host(request)
        log_data["path"] = request.path
        log_data["method"] = request.method

    if extra:
        log_data.update(extra)

    if level is None:
        level = logging.INFO if success else logging.WARNING

    suffix = "" if success else " FAILED"
    logger.log(level, f"Audit: {event}{suffix}", extra={"audit_data": log_data})


def get_client_ip(request) -> str:
    """
    Extract client IP address from request.

    Handles proxied requests via X-Forwarded-For header.

    Args:
        request: Django HTTP request

    Returns:
        Client IP address string
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        # Take the first IP in the chain (client IP)
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")
