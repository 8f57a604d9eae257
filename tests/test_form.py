"""
==============================================================================
Form Controller Tests
==============================================================================

Tests for draft validation, edit mode and submit commits.

==============================================================================
"""

import pytest

from catalog_editor.catalog.categories import category_options
from catalog_editor.catalog.models import Product, ProductDraft
from catalog_editor.catalog.store import ProductStore
from catalog_editor.core.exceptions import InvalidSubmission
from catalog_editor.state.form import DraftValidator, FormController, parse_stock


@pytest.fixture
def form() -> FormController:
    return FormController(category_options("en"))


def type_chair(form: FormController) -> None:
    form.set_field("name", "Chair")
    form.select_category("Furniture")
    form.set_field("price", "99.90")
    form.set_field("stock", "5")


class TestParseStock:
    """Tests for stock parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("5", 5.0),
        (" 12 ", 12.0),
        ("2.5", 2.5),
        ("-1", -1.0),
        ("+3", 3.0),
        (".5", 0.5),
        ("4.", 4.0),
        ("1e3", 1000.0),
    ])
    def test_numbers(self, text, expected):
        assert parse_stock(text) == expected

    @pytest.mark.parametrize("text", [
        "", "   ", "five", "5 units", "nan", "inf", "1e999", "1_000", "١٢", "0x10",
    ])
    def test_not_numbers(self, text):
        assert parse_stock(text) is None


class TestDraftValidator:
    """Tests for draft validation rules."""

    def test_valid_draft(self):
        validator = DraftValidator(["Furniture"])
        draft = ProductDraft(name="Chair", category="Furniture", price="99.90", stock="5")
        fields, errors = validator.validate(draft)
        assert errors == []
        assert fields.stock == 5.0
        assert fields.price == "99.90"

    def test_all_blank(self):
        """Test every field is reported on an empty draft."""
        fields, errors = DraftValidator(["Furniture"]).validate(ProductDraft())
        assert fields is None
        assert errors == ["name", "category", "price", "stock"]

    def test_whitespace_counts_as_empty(self):
        draft = ProductDraft(name="  ", category="Furniture", price="\t", stock="1")
        _, errors = DraftValidator(["Furniture"]).validate(draft)
        assert errors == ["name", "price"]

    def test_unknown_category(self):
        draft = ProductDraft(name="Chair", category="Spaceships", price="1", stock="1")
        assert not DraftValidator(["Furniture"]).is_valid(draft)

    def test_price_not_numerically_validated(self):
        draft = ProductDraft(name="Chair", category="Furniture", price="cheap", stock="1")
        assert DraftValidator(["Furniture"]).is_valid(draft)


class TestFormController:
    """Tests for form state transitions."""

    def test_starts_empty_in_create_mode(self, form: FormController):
        assert form.draft == ProductDraft()
        assert form.editing is None
        assert form.mode == "create"

    def test_unknown_field_rejected(self, form: FormController):
        with pytest.raises(KeyError):
            form.set_field("colour", "red")

    def test_begin_edit_copies_fields(self, form: FormController, book: Product):
        """Test editing loads the product into the draft."""
        form.begin_edit(book)
        assert form.mode == "edit"
        assert form.editing == book
        assert form.draft == ProductDraft(
            name="Book", category="Books", price="39.90", stock="3"
        )

    def test_cancel_edit_resets(self, form: FormController, book: Product):
        form.begin_edit(book)
        form.cancel_edit()
        assert form.editing is None
        assert form.draft == ProductDraft()

    def test_submit_inserts(self, form: FormController, store: ProductStore):
        """Test Chair is appended as id 3 after two products."""
        type_chair(form)
        product = form.submit(store)
        assert product.id == 3
        assert product.name == "Chair"
        assert product.category == "Furniture"
        assert product.price == "99.90"
        assert product.stock == 5
        assert form.draft == ProductDraft()

    def test_submit_updates_editing_target(self, form: FormController, store: ProductStore, pen: Product):
        """Test an edit submit replaces only the edited record."""
        form.begin_edit(store.get(2))
        form.set_field("stock", "7.5")
        product = form.submit(store)

        assert product.id == 2
        assert product.stock == 7.5
        assert store.products == [pen, product]
        assert form.mode == "create"
        assert form.draft == ProductDraft()

    @pytest.mark.parametrize("field,value", [
        ("name", ""),
        ("price", "  "),
        ("category", ""),
        ("stock", "abc"),
    ])
    def test_invalid_submit_mutates_nothing(self, form: FormController, store: ProductStore, products, field, value):
        """Test an invalid draft raises and leaves store and draft as they were."""
        type_chair(form)
        form.set_field(field, value)
        draft_before = form.draft

        with pytest.raises(InvalidSubmission) as exc_info:
            form.submit(store)

        assert exc_info.value.fields == [field]
        assert exc_info.value.code == "INVALID_SUBMISSION"
        assert store.products == products
        assert store.displayed == products
        assert form.draft == draft_before

    def test_invalid_edit_keeps_edit_mode(self, form: FormController, store: ProductStore, book: Product):
        form.begin_edit(book)
        form.set_field("name", "")
        with pytest.raises(InvalidSubmission):
            form.submit(store)
        assert form.editing == book
