"""
==============================================================================
Catalog State Manager Module
==============================================================================

Explicit state container for the catalog editor.

This module implements:
- CatalogStateManager: Owns the product store, form controller and
  deletion confirmer, and exposes one handler per user event

Data Flow:
---------

    user event ──▶ handler ──▶ store / form / confirmer
                                      │
                                      ▼
                               snapshot() ──▶ subscribers

Every handler that changes state publishes a fresh snapshot to the
subscribers. The view layer renders whatever snapshot it last received.

Lifecycle:
---------
Created at application startup, closed on shutdown. A closed manager
rejects new subscriptions.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from catalog_editor.catalog.categories import category_options
from catalog_editor.catalog.models import Product
from catalog_editor.catalog.store import ProductStore
from catalog_editor.config import Settings, get_settings
from catalog_editor.core import exceptions
from catalog_editor.core.exceptions import InvalidSubmission
from catalog_editor.schemas.catalog import CatalogSnapshot, FormSnapshot
from catalog_editor.state.deletion import DeletionConfirmer
from catalog_editor.state.form import FormController


# Module logger
logger = logging.getLogger(__name__)


Subscriber = Callable[[CatalogSnapshot], None]


class CatalogStateManager:
    """
    State container for one editor session.

    Attributes:
        store: Product store (authoritative and displayed lists)
        form: Form controller for the product dialog
        confirmer: Deletion confirmer for the delete dialog
        categories: Category options for the configured locale

    Example:
        >>> manager = CatalogStateManager()
        >>> manager.set_field("name", "Chair")
        >>> manager.select_category("Furniture")
        >>> manager.set_field("price", "99.90")
        >>> manager.set_field("stock", "5")
        >>> manager.submit()
        True
        >>> manager.snapshot().products[0].id
        1
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        products: Optional[Iterable[Product]] = None
    ) -> None:
        """
        Initialize the state container.

        Args:
            settings: Optional Settings (uses singleton if None)
            products: Initial products
        """
        self._settings = settings or get_settings()
        self._categories = category_options(self._settings.category_locale)

        self.store = ProductStore(
            products,
            refilter_after_commit=self._settings.refilter_after_commit
        )
        self.form = FormController(self._categories)
        self.confirmer = DeletionConfirmer()

        self._subscribers: List[Subscriber] = []
        self._closed = False

    @property
    def categories(self) -> List[str]:
        return self._categories.copy()

    @property
    def locale(self) -> str:
        """Locale of the category labels."""
        return self._settings.category_locale

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # SNAPSHOT & SUBSCRIPTIONS
    # =========================================================================

    def snapshot(self) -> CatalogSnapshot:
        """Build an immutable view of the current state."""
        draft = self.form.draft
        editing = self.form.editing

        return CatalogSnapshot(
            products=self.store.displayed,
            total=self.store.count,
            query=self.store.query,
            form=FormSnapshot(
                name=draft.name,
                category=draft.category,
                price=draft.price,
                stock=draft.stock,
                editing_id=editing.id if editing else None,
                mode=self.form.mode,
            ),
            pending_delete_id=self.confirmer.pending_id,
            categories=self.categories,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback receiving a snapshot after every state change.

        Returns:
            Function removing the subscription

        Raises:
            AppException: STATE_CLOSED if the manager has been closed
        """
        if self._closed:
            raise exceptions.state_closed()

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Drop all subscribers and reject new ones."""
        self._subscribers.clear()
        self._closed = True
        logger.debug("Catalog state closed")

    def _publish(self) -> None:
        """Send the current snapshot to every subscriber."""
        if not self._subscribers:
            return

        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception as e:
                logger.error(f"Snapshot subscriber failed: {e}")

    # =========================================================================
    # SEARCH EVENTS
    # =========================================================================

    def change_query(self, query: str) -> List[Product]:
        """Apply a new search query."""
        displayed = self.store.apply_search(query)
        self._publish()
        return displayed

    # =========================================================================
    # FORM EVENTS
    # =========================================================================

    def set_field(self, field: str, value: str) -> None:
        """Update a draft field."""
        self.form.set_field(field, value)
        self._publish()

    def select_category(self, category: str) -> None:
        """Pick a category in the selection control."""
        self.form.select_category(category)
        self._publish()

    def begin_edit(self, product_id: int) -> Product:
        """
        Open the product dialog in edit mode.

        Raises:
            AppException: PRODUCT_NOT_FOUND if no product has that id
        """
        product = self.store.get(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)

        self.form.begin_edit(product)
        self._publish()
        return product

    def cancel_edit(self) -> None:
        """Close the product dialog, discarding the draft."""
        self.form.cancel_edit()
        self._publish()

    def submit(self) -> bool:
        """
        Submit the product dialog.

        Invalid drafts are reported to the log only; the draft stays as it
        was so the user can correct it.

        Returns:
            True if a product was inserted or updated
        """
        try:
            product = self.form.submit(self.store)
        except InvalidSubmission as e:
            draft = e.details.get("draft", {})
            logger.warning(
                f"Submission rejected, invalid fields: {', '.join(e.fields)} "
                f"(name={draft.get('name')!r}, price={draft.get('price')!r}, "
                f"category={draft.get('category')!r}, stock={draft.get('stock')!r})"
            )
            return False

        self._publish()
        return product is not None

    # =========================================================================
    # DELETE EVENTS
    # =========================================================================

    def request_delete(self, product_id: int) -> None:
        """Open the delete confirmation for a product."""
        self.confirmer.request(product_id)
        self._publish()

    def confirm_delete(self) -> Optional[int]:
        """
        Delete the pending product.

        Returns:
            The deleted id, or None when nothing was pending
        """
        product_id = self.confirmer.confirm(self.store)
        if product_id is not None:
            self._publish()
        return product_id

    def cancel_delete(self) -> None:
        """Close the delete confirmation."""
        self.confirmer.cancel()
        self._publish()
