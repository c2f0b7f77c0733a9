"""Tests for product comparison summaries."""

import pytest

from showcase.comparison import (
    IDENTICAL_MESSAGE,
    SELECT_TWO_PROMPT,
    compare_products,
)
from showcase.schemas import Category, Product


class TestCompareProducts:
    """Tests for compare_products."""

    def test_missing_first_selection(self, lamp):
        assert compare_products(None, lamp) == SELECT_TWO_PROMPT

    def test_missing_second_selection(self, lamp):
        assert compare_products(lamp, None) == SELECT_TWO_PROMPT

    def test_missing_both(self):
        assert compare_products(None, None) == SELECT_TWO_PROMPT

    def test_same_product_is_identical(self, lamp):
        assert compare_products(lamp, lamp) == IDENTICAL_MESSAGE

    def test_equal_attributes_different_id_is_identical(self, lamp):
        """Only displayed attributes take part in the comparison."""
        twin = lamp.model_copy(update={"id": "99"})
        assert compare_products(lamp, twin) == IDENTICAL_MESSAGE

    def test_only_price_differs(self, lamp):
        pricier = lamp.model_copy(update={"price": 75})
        summary = compare_products(lamp, pricier)
        assert summary.splitlines() == ["Price: 50 RON vs 75 RON"]

    def test_currency_label(self, lamp):
        pricier = lamp.model_copy(update={"price": 75})
        summary = compare_products(lamp, pricier, currency="EUR")
        assert summary == "Price: 50 EUR vs 75 EUR\n"

    def test_all_attributes_differ_in_fixed_order(self, lamp, jacket):
        summary = compare_products(lamp, jacket)
        assert summary.splitlines() == [
            'Title: "Smart Lamp" vs "Pro Jacket"',
            "Category: Home vs Clothing",
            "Price: 50 RON vs 150 RON",
            "Stock: In stock vs Out of stock",
        ]

    def test_lines_are_newline_terminated(self, lamp, jacket):
        assert compare_products(lamp, jacket).endswith("\n")

    @pytest.mark.parametrize(
        "update, expected",
        [
            ({"title": "Smart Mug"}, 'Title: "Smart Lamp" vs "Smart Mug"'),
            ({"category": Category.BOOKS}, "Category: Home vs Books"),
            ({"in_stock": False}, "Stock: In stock vs Out of stock"),
        ],
    )
    def test_single_difference(self, lamp, update, expected):
        other = lamp.model_copy(update=update)
        assert compare_products(lamp, other).splitlines() == [expected]

    def test_reverse_order_swaps_sides(self, lamp):
        out_of_stock = Product(
            id="3",
            title=lamp.title,
            category=lamp.category,
            price=lamp.price,
            in_stock=False,
        )
        assert compare_products(out_of_stock, lamp) == (
            "Stock: Out of stock vs In stock\n"
        )
