"""
Table Order Service — Exception → HTTP response translation

  ValidationFailure / unparseable request → 400 {error, message}
  OperationError                           → 500 {error, fixed message}, cause logged once
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from table_order.core.errors import OperationError, ValidationFailure
from table_order.schemas.order import ErrorResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "An unknown server error has occurred, please try again later."


def _error_body(message: str) -> dict:
    return ErrorResponse(message=message).model_dump()


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query"))
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    message = "; ".join(parts) or "invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(message))


async def operation_error_handler(request: Request, exc: OperationError) -> JSONResponse:
    logger.error(
        "%s %s failed: %r", request.method, request.url.path, exc,
        exc_info=exc.cause if exc.cause is not None else exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(SERVER_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(OperationError, operation_error_handler)
