"""Pydantic schemas for API request/response."""

from surrogate.api.schemas.call import CallRequest, CallResponse, ErrorResponse

__all__ = [
    "CallRequest",
    "CallResponse",
    "ErrorResponse",
]
