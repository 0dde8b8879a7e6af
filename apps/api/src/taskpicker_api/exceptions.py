import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_selector.errors import (
    SelectionError,
    SolveCancelledError,
    SolveTimeoutError,
    TaskNotFoundError,
    WorkspaceError,
)
from taskpicker_api.models import ErrorResponse

logger = logging.getLogger(__name__)


class TaskPickerException(Exception):
    """Base exception for TaskPicker API"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class ValidationError(TaskPickerException):
    """Validation error exception"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        if field:
            message = f"Validation error for field '{field}': {message}"
        super().__init__(message, "VALIDATION_ERROR")


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions"""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = ErrorResponse.create(
            code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
            details={"path": str(request.url)},
        ).model_dump()
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": " -> ".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse.create(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"validation_errors": errors},
        ).model_dump(),
    )


async def taskpicker_exception_handler(request: Request, exc: TaskPickerException):
    """Handle custom TaskPicker exceptions"""
    status_code = status.HTTP_400_BAD_REQUEST
    details = {}

    if isinstance(exc, ValidationError):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        if exc.field:
            details["field"] = exc.field

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.create(
            code=exc.error_code or "TASKPICKER_ERROR",
            message=exc.message,
            details=details or None,
        ).model_dump(),
    )


async def selection_exception_handler(request: Request, exc: SelectionError):
    """Handle errors raised by the selection library"""
    status_code = status.HTTP_400_BAD_REQUEST
    details = None

    if isinstance(exc, TaskNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        details = {"task_id": exc.task_id}
    elif isinstance(exc, SolveTimeoutError):
        logger.warning(f"{exc.strategy} timed out after {exc.timeout_seconds}s")
        status_code = status.HTTP_408_REQUEST_TIMEOUT
        details = {"strategy": exc.strategy, "timeout_seconds": exc.timeout_seconds}
    elif isinstance(exc, SolveCancelledError):
        status_code = status.HTTP_409_CONFLICT
        details = {"strategy": exc.strategy}
    elif isinstance(exc, WorkspaceError):
        logger.error(f"Workspace storage failed: {exc.message}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.create(
            code=exc.error_code, message=exc.message, details=details
        ).model_dump(),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse.create(
            code="INTERNAL_ERROR",
            message="Internal server error",
            details={"error_type": type(exc).__name__},
        ).model_dump(),
    )
