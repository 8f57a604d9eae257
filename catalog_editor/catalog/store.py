"""
==============================================================================
Product Store Module
==============================================================================

In-memory product store holding the two views the editor table needs.

Views:
------
- products:  the authoritative list (every product, insertion order)
- displayed: the currently shown list (authoritative list after search)

Commit Rules:
-------------
- insert() appends a record with the next id from a monotonic counter
- update() replaces the record with the same id, order preserved
- After a commit the displayed list is reset to the full authoritative
  list; the search query is only re-applied when refilter is enabled
- delete() removes the record from both views, keeping the filter

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .models import Product, ProductFields
from .search import filter_products


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Authoritative and displayed product lists.

    Attributes:
        products: Copy of the authoritative list
        displayed: Copy of the displayed list
        query: Last search query applied

    Example:
        >>> store = ProductStore()
        >>> pen = store.insert(ProductFields(name="Pen", price="2", category="Stationery", stock=10))
        >>> pen.id
        1
        >>> [p.name for p in store.apply_search("pe")]
        ['Pen']
    """

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        refilter_after_commit: bool = False
    ) -> None:
        """
        Initialize the store.

        Args:
            products: Initial products (ids must be unique)
            refilter_after_commit: Re-apply the query after insert/update
        """
        self._products: List[Product] = list(products or [])
        self._displayed: List[Product] = list(self._products)
        self._query: str = ""
        self._refilter_after_commit = refilter_after_commit

        ids = [product.id for product in self._products]
        if len(set(ids)) != len(ids):
            raise ValueError("Initial products must have unique ids")
        self._next_id = max(ids, default=0) + 1

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return self._products.copy()

    @property
    def displayed(self) -> List[Product]:
        """Get the products currently shown."""
        return self._displayed.copy()

    @property
    def query(self) -> str:
        """Get the last applied search query."""
        return self._query

    @property
    def count(self) -> int:
        """Number of products in the authoritative list."""
        return len(self._products)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get(self, product_id: int) -> Optional[Product]:
        """Find product by id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __contains__(self, product_id: object) -> bool:
        return any(product.id == product_id for product in self._products)

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # COMMITS
    # =========================================================================

    def insert(self, fields: ProductFields) -> Product:
        """
        Append a new product.

        Args:
            fields: Validated field values

        Returns:
            The stored product with its assigned id
        """
        product = Product(id=self._next_id, **fields.model_dump())
        self._next_id += 1

        self._products.append(product)
        self._sync_displayed()

        logger.info(f"✅ Product added: #{product.id} {product.name!r}")
        return product

    def update(self, product_id: int, fields: ProductFields) -> Optional[Product]:
        """
        Replace the product with the given id.

        Args:
            product_id: Id of the record to replace
            fields: Validated field values

        Returns:
            The replacement product, or None if no record has that id
        """
        for index, product in enumerate(self._products):
            if product.id == product_id:
                updated = product.with_fields(fields)
                self._products[index] = updated
                self._sync_displayed()
                logger.info(f"✅ Product updated: #{product_id} {updated.name!r}")
                return updated

        logger.warning(f"Update skipped, product #{product_id} no longer exists")
        return None

    def delete(self, product_id: int) -> bool:
        """
        Remove a product from both views.

        Returns:
            True if a product was removed
        """
        before = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        self._displayed = [p for p in self._displayed if p.id != product_id]

        removed = len(self._products) != before
        if removed:
            logger.info(f"🗑️ Product deleted: #{product_id}")
        else:
            logger.debug(f"Delete ignored, product #{product_id} not found")
        return removed

    # =========================================================================
    # SEARCH
    # =========================================================================

    def apply_search(self, query: str) -> List[Product]:
        """
        Recompute the displayed list from the authoritative list.

        Args:
            query: Search text; empty shows every product

        Returns:
            The new displayed list
        """
        self._query = query
        self._displayed = filter_products(self._products, query)
        logger.debug(f"Search {query!r}: {len(self._displayed)}/{len(self._products)} shown")
        return self.displayed

    def _sync_displayed(self) -> None:
        """Reset the displayed list after a commit."""
        if self._refilter_after_commit:
            self._displayed = filter_products(self._products, self._query)
        else:
            self._displayed = list(self._products)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict:
        """Get store statistics."""
        by_category: Dict[str, int] = {}
        for product in self._products:
            by_category[product.category] = by_category.get(product.category, 0) + 1

        return {
            "total_products": len(self._products),
            "displayed_products": len(self._displayed),
            "next_id": self._next_id,
            "categories": by_category,
        }
