"""Tests for the product search filter."""

from catalog_editor.catalog.models import Product
from catalog_editor.catalog.search import filter_products, matches


class TestSearchFilter:
    """Tests for id, name and category matching."""

    def test_name_match_ignores_case(self, products, book: Product):
        """Test "bo" finds Book only."""
        assert filter_products(products, "bo") == [book]
        assert filter_products(products, "BOOK") == [book]

    def test_category_match(self, products, pen: Product):
        """Test category text is searched."""
        assert filter_products(products, "station") == [pen]

    def test_id_match(self, products, book: Product):
        """Test the id is searched as decimal text."""
        assert filter_products(products, "2") == [book]

    def test_id_substring(self):
        """Test a query matches inside a multi-digit id."""
        product = Product(id=12, name="Mug", price="8", category="Home & Garden", stock=1)
        assert matches(product, "2")
        assert not matches(product, "3")

    def test_empty_query_returns_everything_in_order(self, products):
        """Test empty query yields the full list unchanged."""
        assert filter_products(products, "") == products

    def test_no_match(self, products):
        assert filter_products(products, "guitar") == []

    def test_idempotent(self, products):
        """Test filtering twice equals filtering once."""
        once = filter_products(products, "o")
        assert filter_products(once, "o") == once

    def test_returns_new_list(self, products):
        """Test the input list is never returned or modified."""
        result = filter_products(products, "")
        result.clear()
        assert len(products) == 2
