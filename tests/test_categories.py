"""Tests for the category enumeration."""

import pytest

from catalog_editor.catalog.categories import CATEGORY_LABELS, Category, category_options


class TestCategories:
    """Tests for category options and labels."""

    def test_order(self):
        assert category_options("en") == [
            "Electronics", "Clothing", "Books", "Food", "Beverages",
            "Home & Garden", "Health & Beauty", "Sports & Fitness", "Automotive",
            "Toys", "Tools", "Furniture", "Stationery", "Musical Instruments",
            "Games & Video Games",
        ]

    def test_every_locale_labels_every_category(self):
        for labels in CATEGORY_LABELS.values():
            assert set(labels) == set(Category)

    def test_label(self):
        assert Category.FURNITURE.label() == "Furniture"
        assert Category.FURNITURE.label("pt-BR") == "Móveis"
        assert str(Category.TOYS) == "Toys"

    def test_unknown_locale(self):
        with pytest.raises(KeyError):
            category_options("de")
