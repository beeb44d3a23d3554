"""Core utilities and shared functionality."""

from surrogate.core.timezone import (
    now_eastern,
    parse_datetime,
    frozen_clock,
    get_clock,
    format_timestamp,
    EASTERN_TZ,
)
from surrogate.core.exceptions import (
    AppError,
    ValidationError,
    AccessDenied,
    UnsupportedOperation,
    ResourceClosed,
    TransportFailure,
    RemoteOperationError,
)
from surrogate.core.dispatch import Dispatchable, SupportsInvoke, SupportsOperations, invoke
from surrogate.core.identity import current_caller_identity

__all__ = [
    "now_eastern",
    "parse_datetime",
    "frozen_clock",
    "get_clock",
    "format_timestamp",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "AccessDenied",
    "UnsupportedOperation",
    "ResourceClosed",
    "TransportFailure",
    "RemoteOperationError",
    "Dispatchable",
    "SupportsOperations",
    "SupportsInvoke",
    "invoke",
    "current_caller_identity",
]
