"""Tests for coercion of listing parameters."""

from decimal import Decimal

import pytest

from recordstore.application.query import (
    OrderQuery,
    RecordQuery,
    coerce_int,
    coerce_limit,
    coerce_page,
)
from recordstore.domain.model.record import RecordCategory, RecordFormat


class TestRecordQueryParams:

    def test_defaults(self):
        query = RecordQuery.from_params({})
        assert query == RecordQuery()
        assert query.sort().field == "lastModified"
        assert query.sort().descending is True

    @pytest.mark.parametrize("raw,expected", [
        (None, 1), ("", 1), ("0", 1), ("-4", 1), ("abc", 1), ("3", 3),
    ])
    def test_page(self, raw, expected):
        assert RecordQuery.from_params({"page": raw}).page == expected

    @pytest.mark.parametrize("raw,expected", [
        (None, 10), ("0", 10), ("-1", 10), ("x", 10), ("25", 25), ("500", 100),
    ])
    def test_limit(self, raw, expected):
        assert RecordQuery.from_params({"limit": raw}).limit == expected

    def test_enums_any_case_and_unknown_ignored(self):
        query = RecordQuery.from_params({"format": "CASSETTE", "category": "polka"})
        assert query.format is RecordFormat.CASSETTE
        assert query.category is None

    def test_prices_and_flags(self):
        query = RecordQuery.from_params({"minPrice": "10", "maxPrice": "cheap", "inStock": "Yes"})
        assert query.min_price == Decimal("10")
        assert query.max_price is None
        assert query.in_stock is True

    def test_sort_order(self):
        assert RecordQuery.from_params({"sortOrder": "ASC"}).sort().descending is False
        assert RecordQuery.from_params({"sortOrder": "sideways"}).sort().descending is True

    def test_blank_text_filters_ignored(self):
        query = RecordQuery.from_params({"artist": "  ", "album": " Blue "})
        assert query.artist is None
        assert query.album == "Blue"


class TestOrderQueryParams:

    def test_defaults(self):
        query = OrderQuery.from_params({})
        assert query.sort().field == "orderDate"
        assert query.page_request().limit == 10

    def test_direct_construction_clamps_paging(self):
        query = OrderQuery(page=0, limit=1000)
        assert (query.page, query.limit) == (1, 100)


class TestDirectConstruction:

    def test_non_positive_paging_defaults_instead_of_raising(self):
        page_request = RecordQuery(page=-1, limit=0).page_request()
        assert (page_request.page, page_request.limit) == (1, 10)

    def test_valid_paging_is_kept(self):
        query = RecordQuery(page=3, limit=25)
        assert (query.page, query.limit) == (3, 25)


class TestIntegerCoercion:

    @pytest.mark.parametrize("raw,expected", [
        ("7", 7), (" 7 ", 7), ("2.0", 2), ("1e2", 100), (5, 5),
    ])
    def test_accepted(self, raw, expected):
        assert coerce_int(raw) == expected

    @pytest.mark.parametrize("raw", ["1e5000000", "9" * 5000, "Infinity", "NaN", "1e19"])
    def test_huge_or_non_finite_values_are_unusable(self, raw):
        assert coerce_int(raw) is None

    def test_huge_exponent_falls_back_to_defaults(self):
        assert coerce_page("1e5000000") == 1
        assert coerce_limit("1e5000000") == 10
