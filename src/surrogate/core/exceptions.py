"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class AccessDenied(AppError):
    """Raised when the current caller is not the owner of a protected subject."""

    def __init__(self, operation: str, attempted: str, required: str):
        self.operation = operation
        self.attempted = attempted
        self.required = required
        super().__init__(
            f"Illegal access: {attempted} cannot call {operation} "
            f"on an account owned by {required}",
            code="ACCESS_DENIED",
        )


class UnsupportedOperation(AppError):
    """Raised when a subject has no operation registered under a name."""

    def __init__(self, operation: str, subject: Optional[str] = None):
        self.operation = operation
        self.subject = subject
        target = f" on {subject}" if subject else ""
        super().__init__(
            f"Unsupported operation: {operation}{target}",
            code="UNSUPPORTED_OPERATION",
        )


class ResourceClosed(AppError):
    """Raised when a writer is used after it has been closed."""

    def __init__(self, operation: str, resource: str):
        self.operation = operation
        self.resource = resource
        super().__init__(
            f"Cannot {operation}: {resource} is closed",
            code="RESOURCE_CLOSED",
        )


class TransportFailure(AppError):
    """Raised when a remote call could not be delivered or its reply decoded."""

    def __init__(self, operation: str, uri: str, reason: str = ""):
        self.operation = operation
        self.uri = uri
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Transport failure calling {operation} at {uri}{detail}",
            code="TRANSPORT_FAILURE",
        )


class RemoteOperationError(AppError):
    """Raised when the remote subject's operation itself failed."""

    def __init__(self, operation: str, remote_code: str, message: str):
        self.operation = operation
        self.remote_code = remote_code
        super().__init__(
            f"Remote {operation} failed ({remote_code}): {message}",
            code="REMOTE_OPERATION_ERROR",
        )
