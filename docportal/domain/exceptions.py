"""Errors raised by the portal's services and repositories.

Each carries a machine-readable error_code and a details dict. Nothing here
knows about HTTP; docportal.core.exception_handlers picks the status code.
"""

from typing import Any


class PortalException(Exception):
    """Root of the portal's error hierarchy.

    Attributes:
        message: Text returned to the caller.
        error_code: Stable code clients can branch on (class name if omitted).
        details: Extra context such as the offending field or resource id.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error body as sent over the wire."""
        return {"error": self.error_code, "message": self.message, "details": self.details}


class ValidationException(PortalException):
    """A business rule on input was broken (e.g. password too short)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else {})


class AuthenticationException(PortalException):
    """Raised when authentication fails (missing, malformed, invalid or expired token; bad credentials).

    The message is deliberately the same for every cause so callers cannot
    tell an expired token from a forged one, or an unknown email from a wrong
    password.
    """

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(PortalException):
    """Raised when a requested resource (or one of its ancestors) is not found."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'client', 'collection').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class ConflictException(PortalException):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(
        self,
        resource_type: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"{resource_type} already exists",
            "CONFLICT",
            {"resource_type": resource_type},
        )


class DuplicateEmailException(ConflictException):
    """Raised when creating or updating a user with an email that is already registered."""

    def __init__(self) -> None:
        super().__init__("user", "This email is already in use.")


class DataStoreException(PortalException):
    """Raised when the backing store fails for a reason other than a uniqueness violation.

    The message is generic; the underlying error is logged where it occurs
    and never returned to the caller.
    """

    def __init__(self, resource_type: str, operation: str) -> None:
        super().__init__(
            "Internal server error",
            "INTERNAL_ERROR",
            {},
        )
        self.resource_type = resource_type
        self.operation = operation


class DatabaseNotConfiguredException(PortalException):
    """Raised when a request needs the database but none is attached to the app."""

    def __init__(self) -> None:
        super().__init__(
            message="The database is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
