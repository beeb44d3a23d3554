import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from surrogate.api.deps import get_subject
from surrogate.api.schemas.call import CallRequest, CallResponse, ErrorResponse
from surrogate.core.dispatch import invoke
from surrogate.core.exceptions import AppError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calls", tags=["calls"])


@router.post(
    "/{operation}",
    response_model=CallResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def call_operation(
    operation: str,
    data: Optional[CallRequest] = None,
    subject: Any = Depends(get_subject),
):
    """Invoke one operation on the served subject and return its result."""
    data = data or CallRequest()
    try:
        result = invoke(subject, operation, *data.args, **data.kwargs)
    except AppError:
        # Rendered by the application-level handler
        raise
    except Exception as e:
        logger.exception("Operation %s failed on %s", operation, type(subject).__name__)
        error = ErrorResponse(
            error="OPERATION_FAILED",
            message=f"{type(e).__name__}: {e}",
            operation=operation,
        )
        return JSONResponse(status_code=500, content=error.model_dump())
    return CallResponse(operation=operation, result=result)
