"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        Catalog:
            - PRODUCT_NOT_FOUND (404)
            - INVALID_SUBMISSION (422)

        State:
            - STATE_CLOSED (409)

        General:
            - VALIDATION_ERROR (422)
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class InvalidSubmission(AppException):
    """
    Raised when the product form draft cannot be committed.

    Carries the names of the offending fields so the caller can log them.
    """

    def __init__(self, fields: List[str], draft: Optional[Dict[str, str]] = None):
        self.fields = list(fields)
        super().__init__(
            f"Required fields missing or invalid: {', '.join(self.fields)}",
            "INVALID_SUBMISSION",
            422,
            {"fields": self.fields, "draft": draft or {}}
        )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: Optional[int] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id is not None else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def state_closed() -> AppException:
    """Create closed state container exception."""
    return AppException(
        "Catalog state has been closed",
        "STATE_CLOSED",
        409
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
