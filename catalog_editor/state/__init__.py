"""
==============================================================================
State Package
==============================================================================

Editor state: form draft, delete confirmation and the state container
wiring them to the product store.

Modules:
--------
- form: DraftValidator and FormController
- deletion: DeletionConfirmer state machine
- manager: CatalogStateManager

==============================================================================
"""

from .deletion import ConfirmState, DeletionConfirmer
from .form import DraftValidator, FormController, parse_stock
from .manager import CatalogStateManager

__all__ = [
    "ConfirmState",
    "DeletionConfirmer",
    "DraftValidator",
    "FormController",
    "parse_stock",
    "CatalogStateManager",
]
