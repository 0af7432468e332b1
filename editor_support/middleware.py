"""
Admin Request Middleware

Captures the admin page name, query parameters and the admin flag of the
current request in a context variable so hook callbacks can resolve the
RuntimeContext without being handed the request object.

Also provides the logging setup used by the reference app: every record
carries the admin page being served.
"""

import json
import logging
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from editor_support.config import settings


@dataclass(frozen=True)
class AdminRequest:
    """Snapshot of the request fields the editor support layer reads."""

    page: str = ""
    query: dict[str, str] = field(default_factory=dict)
    is_admin: bool = False


# Context variable for the current admin request (task-local)
admin_request_var: ContextVar[AdminRequest] = ContextVar("admin_request", default=AdminRequest())


def current_admin_request() -> AdminRequest:
    """Get the admin request bound to the current context."""
    return admin_request_var.get()


def admin_request_from_path(path: str, query: dict[str, str], admin_prefix: str | None = None) -> AdminRequest:
    """
    Build an AdminRequest from a URL path.

    ``/admin/post.php`` → page "post.php", is_admin True.
    Paths outside the admin prefix are non-admin with an empty page.
    """
    prefix = (admin_prefix if admin_prefix is not None else settings.admin_path_prefix).rstrip("/")
    if path != prefix and not path.startswith(prefix + "/"):
        return AdminRequest(query=dict(query))
    page = path[len(prefix) :].strip("/").rsplit("/", 1)[-1]
    return AdminRequest(page=page, query=dict(query), is_admin=True)


class AdminRequestMiddleware(BaseHTTPMiddleware):
    """Bind an AdminRequest for the lifetime of each HTTP request."""

    def __init__(self, app: ASGIApp, admin_prefix: str | None = None):
        super().__init__(app)
        self.admin_prefix = admin_prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        admin_request = admin_request_from_path(
            request.url.path,
            dict(request.query_params),
            self.admin_prefix,
        )
        token = admin_request_var.set(admin_request)
        try:
            return await call_next(request)
        finally:
            admin_request_var.reset(token)


class AdminPageFilter(logging.Filter):
    """Logging filter to add the admin page to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.admin_page = admin_request_var.get().page
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter for log aggregation systems."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "admin_page": getattr(record, "admin_page", ""),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatter (True for production)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(admin_page)s] %(message)s"))
    handler.addFilter(AdminPageFilter())
    root_logger.addHandler(handler)

    for logger_name, level in {"editor_support": log_level, "uvicorn": "WARNING", "uvicorn.access": "WARNING"}.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))
