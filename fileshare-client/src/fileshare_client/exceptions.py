"""
Exception hierarchy for the file share client library.

Every exception maps to an HTTP status code or a client-side failure. Service
errors preserve the storage error code (the ``x-ms-error-code`` header or the
``<Code>`` element of the error body) and the request id the service assigned.
"""

from typing import Any, Dict, Optional


class StorageClientError(Exception):
    """
    Base exception for all file share client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Storage error code (e.g., "ShareNotFound")
        request_id: Value of the x-ms-request-id response header
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.request_id = request_id
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Bad Request (400)
# =============================================================================


class BadRequestError(StorageClientError):
    """
    The service rejected the request as invalid.

    Raised when:
    - A query parameter or header has an invalid value
    - The operation is not supported on a share snapshot
    - maxresults is zero or negative
    """

    def __init__(
        self,
        message: str = "Bad request",
        *,
        status_code: int = 400,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


# =============================================================================
# Authentication / Authorization Errors (401, 403)
# =============================================================================


class AuthenticationError(StorageClientError):
    """The request carried no usable credentials."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


class AuthorizationError(StorageClientError):
    """
    Access denied.

    The storage service answers 403 both for a rejected signature and for a
    SAS token that lacks the required permission.
    """

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


# =============================================================================
# Not Found Errors (404)
# =============================================================================


class NotFoundError(StorageClientError):
    """The requested resource does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


class ResourceNotFoundError(NotFoundError):
    """The share, parent directory, or target resource is missing."""


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(StorageClientError):
    """
    Request conflicts with the current state of the resource.

    Raised when creating a resource that already exists, deleting a
    directory that still has children, or deleting a file that is open.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


class ResourceExistsError(ConflictError):
    """A resource with the same name already exists."""


class DirectoryNotEmptyError(ConflictError):
    """The directory still contains files or subdirectories."""


class SharingViolationError(ConflictError):
    """The file is open on an SMB client."""


# =============================================================================
# Precondition Errors (412)
# =============================================================================


class PreconditionFailedError(StorageClientError):
    """A conditional header did not match, e.g. a lease is held."""

    def __init__(
        self,
        message: str = "Precondition failed",
        *,
        status_code: int = 412,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(StorageClientError):
    """
    Server-side error occurred.

    Raised when the service returns a 5xx status code.
    """

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


class ServerBusyError(ServerError):
    """The service is throttling requests or temporarily unavailable."""

    def __init__(
        self,
        message: str = "Server busy",
        *,
        status_code: int = 503,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            request_id=request_id,
            details=details,
        )


# =============================================================================
# Client-side Errors
# =============================================================================


class NetworkError(StorageClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport failure before a response was received.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the service."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class RequestAbortedError(StorageClientError):
    """The request was cancelled through its abort signal."""

    def __init__(
        self,
        message: str = "The request was aborted",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    412: PreconditionFailedError,
    500: ServerError,
    502: ServerError,
    503: ServerBusyError,
    504: ServerError,
}

# Storage error codes that refine the status code mapping
ERROR_CODE_EXCEPTIONS = {
    "DirectoryNotEmpty": DirectoryNotEmptyError,
    "ResourceAlreadyExists": ResourceExistsError,
    "SharingViolation": SharingViolationError,
    "ResourceNotFound": ResourceNotFoundError,
    "ParentNotFound": ResourceNotFoundError,
    "ShareNotFound": ResourceNotFoundError,
    "ServerBusy": ServerBusyError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    request_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> StorageClientError:
    """
    Create an appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Storage error code
        request_id: Service request id
        details: Additional error details

    Returns:
        Appropriate StorageClientError subclass
    """
    exception_class = ERROR_CODE_EXCEPTIONS.get(error_code) or STATUS_CODE_EXCEPTIONS.get(
        status_code
    )
    if exception_class is None:
        if 500 <= status_code < 600:
            exception_class = ServerError
        else:
            exception_class = StorageClientError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        request_id=request_id,
        details=details,
    )
