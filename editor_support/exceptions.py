"""
Custom Exception Classes for Editor Support

The rule core itself never raises: unmatched contexts are no-ops.  These
exceptions cover the edges (declarative rule files and the admin inspection
routes) and carry an HTTP status code for consistent error responses.
"""

from typing import Any

from fastapi import status


class EditorSupportError(Exception):
    """Base exception class for all editor support exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidRuleError(EditorSupportError):
    """Raised when a declarative rule entry is malformed"""

    def __init__(self, message: str, index: int | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if index is not None:
            error_details["index"] = index
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class RuleNotFoundError(EditorSupportError):
    """Raised when no rule set is configured for a key"""

    def __init__(self, kind: str, value: Any):
        super().__init__(
            message=f"No editor support rule for {kind} '{value}'",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"kind": kind, "value": value},
        )
