"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies for reaching the catalog state container

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_editor.core import exceptions
    raise exceptions.product_not_found(3)

==============================================================================
"""

from .exceptions import (
    AppException,
    InvalidSubmission,
    register_exception_handlers,
)
from .dependencies import get_state_manager

__all__ = [
    # Exceptions
    "AppException",
    "InvalidSubmission",
    "register_exception_handlers",
    # Dependencies
    "get_state_manager",
]
