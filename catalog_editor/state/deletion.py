"""
==============================================================================
Deletion Confirmer Module
==============================================================================

Two-step confirmation for destructive deletes.

State Machine:
-------------

┌──────┐  request(id)  ┌─────────────┐
│ IDLE │ ────────────▶ │ PENDING(id) │
└──────┘               └─────────────┘
   ▲                      │       │
   │ confirm(): delete id │       │ cancel()
   └──────────────────────┴───────┘

A request while pending replaces the pending id.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

from catalog_editor.catalog.store import ProductStore


# Module logger
logger = logging.getLogger(__name__)


class ConfirmState(str, enum.Enum):
    """Confirmer states."""

    IDLE = "idle"
    PENDING = "pending"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value


class DeletionConfirmer:
    """
    Pending-delete selection.

    Example:
        >>> confirmer = DeletionConfirmer()
        >>> confirmer.request(5)
        >>> confirmer.state
        <ConfirmState.PENDING: 'pending'>
        >>> confirmer.cancel()
        >>> confirmer.pending_id is None
        True
    """

    def __init__(self) -> None:
        self._pending_id: Optional[int] = None

    @property
    def pending_id(self) -> Optional[int]:
        """Id awaiting confirmation, or None when idle."""
        return self._pending_id

    @property
    def state(self) -> ConfirmState:
        if self._pending_id is None:
            return ConfirmState.IDLE
        return ConfirmState.PENDING

    def request(self, product_id: int) -> None:
        """Open the confirmation for a product."""
        if self._pending_id is not None and self._pending_id != product_id:
            logger.debug(f"Pending delete #{self._pending_id} replaced by #{product_id}")
        self._pending_id = product_id

    def confirm(self, store: ProductStore) -> Optional[int]:
        """
        Delete the pending product and return to idle.

        Returns:
            The id that was deleted, or None when idle
        """
        if self._pending_id is None:
            return None

        product_id = self._pending_id
        self._pending_id = None
        store.delete(product_id)
        return product_id

    def cancel(self) -> None:
        """Close the confirmation without deleting."""
        self._pending_id = None
