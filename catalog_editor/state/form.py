"""
==============================================================================
Product Form Module
==============================================================================

Form controller for the create/edit product dialog.

This module implements:
- DraftValidator: Checks a raw draft and parses it into ProductFields
- FormController: Draft field state plus the optional editing target

Validation Rules:
----------------
- name, price, category: required, whitespace-only counts as empty
- category: must be one of the configured category labels
- stock: must parse as a finite number
- price is never parsed; any non-blank text is accepted

==============================================================================
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Sequence, Tuple

from catalog_editor.catalog.models import Product, ProductDraft, ProductFields
from catalog_editor.catalog.store import ProductStore
from catalog_editor.core.exceptions import InvalidSubmission


# Module logger
logger = logging.getLogger(__name__)


FORM_FIELDS = ("name", "category", "price", "stock")

MODE_CREATE = "create"
MODE_EDIT = "edit"


STOCK_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def parse_stock(text: str) -> Optional[float]:
    """
    Parse stock text into a number.

    Only plain decimal notation with ASCII digits is accepted, as a number
    input produces it.

    Returns:
        The parsed value, or None when the text is not a finite number
    """
    text = text.strip()
    if not STOCK_PATTERN.match(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


class DraftValidator:
    """
    Validator for product form drafts.

    Example:
        >>> validator = DraftValidator(["Furniture"])
        >>> draft = ProductDraft(name="Chair", category="Furniture", price="99.90", stock="5")
        >>> fields, errors = validator.validate(draft)
        >>> fields.stock
        5.0
    """

    def __init__(self, categories: Sequence[str]) -> None:
        self._categories = list(categories)

    @property
    def categories(self) -> List[str]:
        """Accepted category labels."""
        return self._categories.copy()

    def validate(self, draft: ProductDraft) -> Tuple[Optional[ProductFields], List[str]]:
        """
        Validate and parse a draft.

        Args:
            draft: Raw form values

        Returns:
            Tuple of (fields, invalid_field_names)
            - If valid: (ProductFields, [])
            - If invalid: (None, ["price", ...])
        """
        errors = []

        if not draft.name.strip():
            errors.append("name")

        if not draft.category.strip() or draft.category not in self._categories:
            errors.append("category")

        if not draft.price.strip():
            errors.append("price")

        stock = parse_stock(draft.stock)
        if stock is None:
            errors.append("stock")

        if errors:
            return None, errors

        fields = ProductFields(
            name=draft.name,
            price=draft.price,
            category=draft.category,
            stock=stock,
        )
        return fields, []

    def is_valid(self, draft: ProductDraft) -> bool:
        """Quick validation check."""
        _, errors = self.validate(draft)
        return not errors


class FormController:
    """
    Draft state for the product dialog.

    Holds the four raw field values and, while editing, the product being
    edited. The dialog title and submit label follow ``mode``.

    Attributes:
        draft: Copy of the current draft
        editing: Product being edited, or None when creating
        mode: "edit" or "create"
    """

    def __init__(self, categories: Sequence[str]) -> None:
        self._validator = DraftValidator(categories)
        self._draft = ProductDraft()
        self._editing: Optional[Product] = None

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def draft(self) -> ProductDraft:
        return self._draft.model_copy()

    @property
    def editing(self) -> Optional[Product]:
        return self._editing

    @property
    def mode(self) -> str:
        return MODE_EDIT if self._editing is not None else MODE_CREATE

    @property
    def categories(self) -> List[str]:
        return self._validator.categories

    # =========================================================================
    # INPUT EVENTS
    # =========================================================================

    def set_field(self, field: str, value: str) -> None:
        """
        Update one draft field from its input control.

        Raises:
            KeyError: If the field is not a form field
        """
        if field not in FORM_FIELDS:
            raise KeyError(field)
        setattr(self._draft, field, value)

    def select_category(self, category: str) -> None:
        """Set the category from the selection control."""
        self.set_field("category", category)

    def begin_edit(self, product: Product) -> None:
        """Load a product into the draft and mark it as the editing target."""
        self._editing = product
        self._draft = ProductDraft.from_product(product)
        logger.debug(f"Editing product #{product.id}")

    def cancel_edit(self) -> None:
        """Leave edit mode and clear the draft."""
        self._editing = None
        self.reset()

    def reset(self) -> None:
        """Clear every draft field."""
        self._draft = ProductDraft()

    # =========================================================================
    # SUBMIT
    # =========================================================================

    def validate(self) -> ProductFields:
        """
        Validate the current draft.

        Raises:
            InvalidSubmission: If a required field is blank or stock is not numeric
        """
        fields, errors = self._validator.validate(self._draft)
        if errors:
            raise InvalidSubmission(errors, self._draft.as_dict())
        return fields

    def submit(self, store: ProductStore) -> Optional[Product]:
        """
        Commit the draft to the store.

        Updates the editing target when one is set, otherwise inserts a new
        product. The draft is reset and edit mode left afterwards.

        Returns:
            The stored product, or None if the editing target vanished

        Raises:
            InvalidSubmission: Draft is left untouched
        """
        fields = self.validate()

        if self._editing is not None:
            product = store.update(self._editing.id, fields)
        else:
            product = store.insert(fields)

        self._editing = None
        self.reset()
        return product
