from typing import Any, Mapping, Optional


class FlavourlyError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message, returned to clients as ``error``
        details: optional mapping with extra context (field errors, ids)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(FlavourlyError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(FlavourlyError):
    """Raised when a requested resource does not exist or is not owned by the caller."""

    http_status = 404
    default_message = "Not found"


class ConflictError(FlavourlyError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_message = "Conflict"


class UnauthorizedError(FlavourlyError):
    """Raised when no authenticated user accompanies the request."""

    http_status = 401
    default_message = "Unauthorized"
