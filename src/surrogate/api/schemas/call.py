"""Pydantic schemas for remote call endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CallRequest(BaseModel):
    """Request schema for invoking an operation on the served subject."""

    args: list[Any] = Field(default_factory=list, description="Positional arguments")
    kwargs: dict[str, Any] = Field(default_factory=dict, description="Keyword arguments")


class CallResponse(BaseModel):
    """Response schema for a successful call."""

    operation: str
    result: Any = None


class ErrorResponse(BaseModel):
    """Response schema for a failed call."""

    error: str
    message: str
    operation: Optional[str] = None
