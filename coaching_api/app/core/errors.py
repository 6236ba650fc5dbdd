"""
Exception handlers producing the API's error envelope.

Every error response has the body ``{"success": false, "message": ...}``.
``HTTPException`` keeps its status code and uses its ``detail`` as the
message; request validation errors become 400 (not FastAPI's default
422); anything else unhandled is logged and turned into a generic 500.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # ``loc`` looks like ("body", "email"); drop the leading source marker.
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    if location:
        return f"Invalid request: {location}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Something went wrong!"),
    )


async def catch_unhandled_errors(request: Request, call_next):
    """Turn unhandled errors into the 500 envelope inside the middleware stack.

    A handler registered for ``Exception`` alone runs in Starlette's
    outermost middleware, so its response would skip CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to ``app``.

    Must be called before ``CORSMiddleware`` is added so that CORS wraps
    the catch‑all middleware.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.middleware("http")(catch_unhandled_errors)
