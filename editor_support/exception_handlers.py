"""
Exception Handlers for Editor Support

Error Response Format:
{
    "error": {
        "status_code": 404,
        "message": "No editor support rule for post_type 'book'",
        "type": "Not Found",
        "details": {"kind": "post_type", "value": "book"},
        "path": "/api/v1/editor-support/rules/post_type/book"
    }
}
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from editor_support.exceptions import EditorSupportError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        404: "Not Found",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


async def editor_support_exception_handler(request: Request, exc: EditorSupportError) -> JSONResponse:
    logger.warning("EditorSupportError on %s: %s", request.url.path, exc.message)

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        details=exc.details if exc.details else None,
        path=request.url.path,
    )


def register_exception_handlers(app) -> None:
    """Register the editor support exception handlers with a FastAPI app."""
    app.add_exception_handler(EditorSupportError, editor_support_exception_handler)
