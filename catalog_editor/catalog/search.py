"""
==============================================================================
Product Search Module
==============================================================================

Substring search over the product list.

A product matches a query when any of these contains it:
- the id rendered as decimal text
- the name, ignoring case
- the category, ignoring case

The filter is always recomputed from the full list, never from a previous
result, so applying it twice gives the same answer as applying it once.

==============================================================================
"""

from __future__ import annotations

from typing import Iterable, List

from .models import Product


def matches(product: Product, query: str) -> bool:
    """
    Check whether a product matches a search query.

    Example:
        >>> matches(Product(id=12, name="Pen", price="1", category="Stationery", stock=1), "2")
        True
    """
    lower_query = query.lower()
    return (
        query in str(product.id)
        or lower_query in product.name.lower()
        or lower_query in product.category.lower()
    )


def filter_products(products: Iterable[Product], query: str) -> List[Product]:
    """
    Filter products by query, preserving order.

    Args:
        products: Authoritative product list
        query: Raw query text; empty yields every product

    Returns:
        New list of matching products
    """
    if not query:
        return list(products)
    return [product for product in products if matches(product, query)]
