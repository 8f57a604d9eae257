"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Product records, category enumeration, search filter and the in-memory
product store.

Classes:
--------
- Product: Pydantic model for stored products
- ProductFields: Validated editable fields
- ProductDraft: Raw form input
- Category: Fixed category enumeration
- ProductStore: Authoritative and displayed product lists

==============================================================================
"""

from .categories import CATEGORY_LABELS, Category, category_options
from .models import Product, ProductDraft, ProductFields, format_stock
from .search import filter_products, matches
from .store import ProductStore

__all__ = [
    "CATEGORY_LABELS",
    "Category",
    "category_options",
    "Product",
    "ProductDraft",
    "ProductFields",
    "format_stock",
    "filter_products",
    "matches",
    "ProductStore",
]
