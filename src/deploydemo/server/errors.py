"""
Exception handlers that keep error bodies in the same shape as MessageEcho.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..logging_config import get_logger
from .schemas import MessageError

logger = get_logger(__name__)


def _describe(error: dict[str, Any]) -> str:
    """
    Turn one pydantic error entry into "field: reason".

    loc looks like ("body", "message") for a field error, ("body",) when the
    body itself is wrong, and ("body", <offset>) for a JSON decode error.
    """
    loc = error.get("loc", ())
    field = "body"
    if len(loc) > 1 and isinstance(loc[1], str):
        field = ".".join(str(p) for p in loc[1:])
    return f"{field}: {error.get('msg', 'invalid value')}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    reason = "; ".join(_describe(e) for e in errors) if errors else "invalid request"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, reason)
    body = MessageError(error=reason)
    return JSONResponse(status_code=422, content=body.model_dump())
