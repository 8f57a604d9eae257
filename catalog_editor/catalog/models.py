"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products and the editor form draft.

==============================================================================
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ProductFields(BaseModel):
    """
    Validated, editable product fields.

    Produced by the form controller once a draft passes validation and
    consumed by the product store for inserts and updates.

    Attributes:
        name: Product display name
        price: Free-text price, kept exactly as typed
        category: Category label from the configured locale
        stock: Quantity in stock
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Product name")
    price: str = Field(..., min_length=1, description="Price as entered")
    category: str = Field(..., min_length=1, description="Category label")
    stock: float = Field(..., description="Quantity in stock")


class Product(ProductFields):
    """
    Product model for catalog items.

    Records are immutable; an edit replaces the record holding the same id.

    Attributes:
        id: Sequential identifier assigned by the product store
    """

    id: int = Field(..., ge=1, description="Product identifier")

    def with_fields(self, fields: ProductFields) -> "Product":
        """Return a copy carrying the same id and the given field values."""
        return Product(id=self.id, **fields.model_dump())


class ProductDraft(BaseModel):
    """
    Transient form input state.

    Mirrors the editable product fields as raw strings. Nothing here is
    validated until the form is submitted.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    category: str = ""
    price: str = ""
    stock: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        """Fill a draft from an existing product."""
        return cls(
            name=product.name,
            category=product.category,
            price=product.price,
            stock=format_stock(product.stock),
        )

    def as_dict(self) -> Dict[str, str]:
        """Get the raw field values."""
        return self.model_dump()


def format_stock(stock: float) -> str:
    """Render a stock number the way a number input shows it ("5", "2.5")."""
    if float(stock).is_integer():
        return str(int(stock))
    return repr(float(stock))
