"""Tests for the catalog filter engine."""

import pytest

from showcase.filters import (
    FilterRequest,
    filter_products,
    matches,
    parse_price_bound,
    results_label,
)
from showcase.generator import generate_products
from showcase.schemas import ANY_CATEGORY, Category, Product


@pytest.fixture
def catalog() -> list[Product]:
    return generate_products(100)


class TestParsePriceBound:
    """Tests for numeric bound coercion."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("100", 100.0),
            (" 42 ", 42.0),
            ("12.5", 12.5),
            ("0", 0.0),
            (0, 0.0),
            (75, 75.0),
        ],
    )
    def test_numeric_values(self, raw, expected):
        """Numeric text and numbers are accepted."""
        assert parse_price_bound(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12abc", "inf", "nan", True])
    def test_unusable_values_are_unbounded(self, raw):
        """Empty, non-numeric and non-finite input means no bound."""
        assert parse_price_bound(raw) is None

    def test_huge_int_is_kept_exact(self):
        """Integers too large for a float are returned unchanged."""
        assert parse_price_bound(10**400) == 10**400

    def test_huge_int_bounds_filter_without_error(self, small_catalog):
        wide = FilterRequest.from_raw(max_price=10**400)
        assert filter_products(small_catalog, wide) == small_catalog

        narrow = FilterRequest.from_raw(min_price=10**400)
        assert filter_products(small_catalog, narrow) == []

    @pytest.mark.parametrize("raw", ["1_000", "1e400", "Infinity", "-0x10", "0x"])
    def test_text_outside_browser_number_syntax_is_unbounded(self, raw):
        assert parse_price_bound(raw) is None

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0x10", 16),
            ("0X1f", 31),
            ("0o17", 15),
            ("0b101", 5),
            ("1e2", 100.0),
            (".5", 0.5),
        ],
    )
    def test_browser_number_forms(self, raw, expected):
        assert parse_price_bound(raw) == expected


class TestFilterRequest:
    """Tests for FilterRequest."""

    def test_default_request_is_default(self):
        assert FilterRequest().is_default is True

    def test_whitespace_text_is_default(self):
        """Whitespace-only search does not count as a constraint."""
        assert FilterRequest(text="   ").is_default is True

    @pytest.mark.parametrize(
        "request_",
        [
            FilterRequest(text="lamp"),
            FilterRequest(category=Category.HOME),
            FilterRequest(min_price=0),
            FilterRequest(max_price=10),
            FilterRequest(only_in_stock=True),
        ],
    )
    def test_any_constraint_is_not_default(self, request_):
        assert request_.is_default is False

    def test_from_raw_coerces_bounds(self):
        request = FilterRequest.from_raw(min_price="10", max_price="abc")
        assert request.min_price == 10.0
        assert request.max_price is None

    def test_from_raw_empty_category_means_any(self):
        assert FilterRequest.from_raw(category="").category == ANY_CATEGORY
        assert FilterRequest.from_raw(category=None).category == ANY_CATEGORY

    def test_query_is_trimmed_and_casefolded(self):
        assert FilterRequest(text="  PrO Lamp ").query == "pro lamp"


class TestFilterProducts:
    """Tests for filter_products."""

    def test_default_request_returns_catalog(self, catalog):
        """No constraints keep every product in order."""
        assert filter_products(catalog, FilterRequest()) == catalog

    def test_empty_catalog(self):
        assert filter_products([], FilterRequest(text="lamp")) == []

    def test_category_filter(self, catalog):
        result = filter_products(catalog, FilterRequest(category=Category.BOOKS))
        assert result
        assert all(p.category == Category.BOOKS for p in result)

    def test_category_filter_accepts_plain_string(self, catalog):
        by_enum = filter_products(catalog, FilterRequest(category=Category.HOME))
        by_name = filter_products(catalog, FilterRequest(category="Home"))
        assert by_enum == by_name

    def test_any_category_keeps_all_categories(self, catalog):
        result = filter_products(catalog, FilterRequest(category=ANY_CATEGORY))
        assert {p.category for p in result} == {p.category for p in catalog}

    def test_unknown_category_matches_nothing(self, catalog):
        assert filter_products(catalog, FilterRequest(category="Garden")) == []

    def test_price_bounds_are_inclusive(self, catalog):
        price = catalog[0].price
        result = filter_products(
            catalog, FilterRequest(min_price=price, max_price=price)
        )
        assert catalog[0] in result
        assert all(p.price == price for p in result)

    def test_min_price(self, catalog):
        result = filter_products(catalog, FilterRequest(min_price=100))
        assert all(p.price >= 100 for p in result)
        assert len(result) == sum(1 for p in catalog if p.price >= 100)

    def test_max_price(self, catalog):
        result = filter_products(catalog, FilterRequest(max_price=60))
        assert all(p.price <= 60 for p in result)
        assert len(result) == sum(1 for p in catalog if p.price <= 60)

    def test_only_in_stock(self, catalog):
        result = filter_products(catalog, FilterRequest(only_in_stock=True))
        assert all(p.in_stock for p in result)
        assert len(result) < len(catalog)

    def test_text_search_is_case_insensitive(self, catalog):
        lower = filter_products(catalog, FilterRequest(text="pro"))
        upper = filter_products(catalog, FilterRequest(text="PRO"))
        assert lower
        assert lower == upper
        assert all("pro" in p.title.lower() for p in lower)

    def test_text_search_matches_title_substring(self):
        lamp = Product(
            id="x", title="Pro Lamp", category=Category.HOME, price=10, in_stock=True
        )
        assert filter_products([lamp], FilterRequest(text="pro")) == [lamp]
        assert filter_products([lamp], FilterRequest(text="PRO")) == [lamp]
        assert filter_products([lamp], FilterRequest(text="o la")) == [lamp]
        assert filter_products([lamp], FilterRequest(text="desk")) == []

    def test_order_is_preserved(self, catalog):
        result = filter_products(catalog, FilterRequest(only_in_stock=True))
        positions = [catalog.index(p) for p in result]
        assert positions == sorted(positions)

    def test_idempotent(self, catalog):
        request = FilterRequest(text="e", category=Category.CLOTHING, max_price=150)
        once = filter_products(catalog, request)
        assert filter_products(once, request) == once

    def test_partition_matches_predicate(self, catalog):
        """Included products satisfy every constraint, excluded ones fail one."""
        request = FilterRequest(
            text="s", category=Category.ELECTRONICS, min_price=100, only_in_stock=True
        )
        result = filter_products(catalog, request)
        for product in catalog:
            assert matches(product, request) == (product in result)


class TestScenarios:
    """End-to-end filtering scenarios."""

    def test_home_in_stock_under_100(self, small_catalog, lamp):
        request = FilterRequest.from_raw(
            text="",
            category="Home",
            min_price=0,
            max_price=100,
            only_in_stock=True,
        )
        assert filter_products(small_catalog, request) == [lamp]

    def test_non_numeric_bound_is_unbounded(self, small_catalog):
        request = FilterRequest.from_raw(
            category=ANY_CATEGORY,
            max_price="abc",
            only_in_stock=False,
        )
        assert filter_products(small_catalog, request) == small_catalog


class TestResultsLabel:
    def test_singular(self):
        assert results_label(1) == "1 result"

    @pytest.mark.parametrize("count", [0, 2, 124])
    def test_plural(self, count):
        assert results_label(count) == f"{count} results"
