"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Snapshot and request schemas using Pydantic for validation.

==============================================================================
"""

from .catalog import (
    CatalogSnapshot,
    CategoryListResponse,
    FieldUpdate,
    FormField,
    FormSnapshot,
    SearchRequest,
    SubmitResponse,
)

__all__ = [
    "CatalogSnapshot",
    "CategoryListResponse",
    "FieldUpdate",
    "FormField",
    "FormSnapshot",
    "SearchRequest",
    "SubmitResponse",
]
