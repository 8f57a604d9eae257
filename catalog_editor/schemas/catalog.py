"""
==============================================================================
Catalog Schemas Module
==============================================================================

Snapshot and event payload schemas for the catalog editor.

Snapshot Layout:
---------------
- products:          rows for the table (displayed list)
- total:             size of the authoritative list
- query:             current search text
- form:              draft values, editing id and dialog mode
- pending_delete_id: id shown in the delete dialog, or null
- categories:        options for the category selection control

==============================================================================
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from catalog_editor.catalog.models import Product


FormField = Literal["name", "category", "price", "stock"]


class FormSnapshot(BaseModel):
    """Form dialog state."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    price: str
    stock: str
    editing_id: Optional[int] = None
    mode: Literal["create", "edit"] = "create"

    @computed_field
    @property
    def title(self) -> str:
        """Dialog title."""
        return "Edit product" if self.mode == "edit" else "New product"

    @computed_field
    @property
    def submit_label(self) -> str:
        """Submit button label."""
        return "Save" if self.mode == "edit" else "Add"


class CatalogSnapshot(BaseModel):
    """Immutable view of the whole editor state."""

    model_config = ConfigDict(frozen=True)

    products: List[Product]
    total: int = Field(ge=0)
    query: str = ""
    form: FormSnapshot
    pending_delete_id: Optional[int] = None
    categories: List[str]


class SearchRequest(BaseModel):
    """Search box change."""
    query: str = ""


class FieldUpdate(BaseModel):
    """Controlled input change."""
    value: str = ""


class SubmitResponse(BaseModel):
    """Result of a form submit."""
    success: bool = Field(default=True)
    committed: bool
    snapshot: CatalogSnapshot


class CategoryListResponse(BaseModel):
    """Category selection options."""
    success: bool = Field(default=True)
    locale: str
    categories: List[str]
