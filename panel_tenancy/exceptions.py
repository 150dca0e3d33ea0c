"""
Custom exception classes for django-panel-tenancy.

The resolver raises these internally and converts them to a
"not found" outcome at its boundary, so none of them should reach
an end user.
"""


class TenantRoutingException(Exception):
    """
    Base exception for all tenant routing errors.

    All custom exceptions in this library inherit from this class,
    allowing catch-all handling when needed.
    """

    def __init__(self, message: str = None, identifier: str = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            identifier: The tenant identifier involved (if any)
        """
        self.message = message or self.__class__.__doc__.strip().splitlines()[0]
        self.identifier = identifier
        super().__init__(self.message)


class TenantConfigError(TenantRoutingException):
    """
    Tenant configuration could not be resolved.

    Subclasses carry a ``reason`` tag so that logs can tell an absent
    tenant apart from an unreachable backend.
    """

    reason = "error"


class TenantConfigNotFound(TenantConfigError):
    """
    Raised when the backend has no active config for the identifier.

    This typically occurs when:
    - The subdomain or domain was never provisioned
    - The tenant was deactivated
    - The backend answers with a non-success status or envelope
    """

    reason = "not_found"

    def __init__(self, message: str = None, identifier: str = None, status_code: int = None):
        self.status_code = status_code
        if message is None and identifier:
            message = f"Tenant config not found: '{identifier}'"
        super().__init__(message, identifier=identifier)


class MalformedTenantConfig(TenantConfigError):
    """
    Raised when the backend reports success but the payload is invalid.
    """

    reason = "malformed"

    def __init__(self, message: str = None, identifier: str = None, errors=None):
        self.errors = errors
        super().__init__(message, identifier=identifier)


class TenantConfigUnavailable(TenantConfigError):
    """
    Raised when the config backend cannot be reached.

    Covers timeouts, DNS failures, refused connections and any other
    transport-level error.
    """

    reason = "unavailable"


class InvalidTenantContextError(TenantRoutingException):
    """
    Raised when an operation requires a tenant render context but none is available.

    This typically indicates a view that was not wrapped with
    ``tenant_page`` or a middleware configuration issue.
    """
