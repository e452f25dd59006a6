"""Translate business and domain errors into HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from ecommerce.domain.common.exceptions import ValidationError
from ecommerce.exceptions import BusinessError, InvalidTokenError

logger = structlog.get_logger(__name__)


async def business_error_handler(request: Request, exc: BusinessError) -> JSONResponse:
    """Render a BusinessError as ``{"code", "message"}`` with its status."""
    logger.warning(
        "business_error",
        code=exc.code,
        message=exc.message,
        path=request.url.path,
        method=request.method,
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, InvalidTokenError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("validation_error", field=exc.field, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"code": "VALIDATION_ERROR", "message": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BusinessError, business_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
