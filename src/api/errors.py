"""Envelope helpers and exception handlers.

Every API response is wrapped in ApiResponse. Body deserialization failures
(FastAPI's RequestValidationError) are reported as 400 instead of FastAPI's
default 422.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models import ApiResponse

logger = logging.getLogger(__name__)


def envelope(status_code: int, message: str, data: Any = None) -> JSONResponse:
    """Build a JSON response whose body code mirrors the HTTP status."""
    body = ApiResponse(code=status_code, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def format_validation_errors(errors) -> str:
    """Flatten pydantic error entries into 'loc: msg; loc: msg'."""
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = format_validation_errors(exc.errors())
    logger.warning("Invalid request body", extra={
        "method": request.method,
        "path": request.url.path,
        "detail": detail,
    })
    return envelope(
        status.HTTP_400_BAD_REQUEST,
        f"invalid request parameters: {detail}",
    )
