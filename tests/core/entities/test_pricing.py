"""Unit tests for the selling-price table."""

import math

import pytest

from snackbooks.core.entities import DEFAULT_PRICES, PACKET_SIZES, PriceCategory, PricingTable
from snackbooks.core.entities.pricing import category_for, fallback_price, normalize_variant


class TestVariantHelpers:
    def test_normalize_strips_and_lowercases(self):
        assert normalize_variant("  Wholesale ") == "wholesale"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_normalize_blank_defaults_to_retail(self, value):
        assert normalize_variant(value) == "retail"

    def test_only_wholesale_maps_to_wholesale_category(self):
        assert category_for("wholesale") is PriceCategory.WHOLESALE
        assert category_for("WHOLESALE") is PriceCategory.WHOLESALE
        assert category_for("wholesale-bulk") is PriceCategory.RETAIL
        assert category_for("festival") is PriceCategory.RETAIL

    def test_fallback_price_is_linear(self):
        assert fallback_price("retail", 400) == pytest.approx(100.0)
        assert fallback_price("wholesale", 400) == pytest.approx(80.0)

    def test_fallback_price_never_negative(self):
        assert fallback_price("retail", -50) == 0


class TestPricingTableDefaults:
    def test_with_defaults_copies_columns(self):
        table = PricingTable.with_defaults()
        assert table.prices == DEFAULT_PRICES

        table.prices["retail"][100] = 1.0
        assert DEFAULT_PRICES["retail"][100] == 25.0

    @pytest.mark.parametrize(
        ("variant", "size", "expected"),
        [
            ("retail", 50, 15.0),
            ("retail", 250, 70.0),
            ("retail", 1000, 250.0),
            ("wholesale", 100, 20.0),
            ("wholesale", 500, 80.0),
        ],
    )
    def test_default_prices(self, variant, size, expected):
        assert PricingTable().get_price(variant, size) == expected

    def test_empty_table_prices_every_size(self):
        table = PricingTable()
        for variant in ("retail", "wholesale", "festival"):
            for size in PACKET_SIZES:
                price = table.get_price(variant, size)
                assert math.isfinite(price)
                assert price >= 0


class TestPriceResolution:
    def test_stored_override_wins(self):
        table = PricingTable(prices={"retail": {100: 30.0}})
        assert table.get_price("retail", 100) == 30.0

    def test_zero_stored_price_means_absent(self):
        table = PricingTable(prices={"retail": {100: 0.0}})
        assert table.stored_price("retail", 100) is None
        assert table.get_price("retail", 100) == 25.0

    def test_unknown_variant_uses_linear_fallback(self):
        table = PricingTable()
        assert table.get_price("festival", 200) == pytest.approx(50.0)

    def test_unknown_size_uses_category_rate(self):
        table = PricingTable()
        assert table.get_price("wholesale", 750) == pytest.approx(150.0)

    def test_variant_lookup_is_case_insensitive(self):
        table = PricingTable(prices={"Wholesale": {100: 18.0}})
        assert table.get_price("WHOLESALE", 100) == 18.0


class TestSetPrice:
    def test_set_price_stores_override(self):
        table = PricingTable()
        assert table.set_price("retail", 100, 27.5) is True
        assert table.get_price("retail", 100) == 27.5

    def test_set_zero_restores_default(self):
        table = PricingTable(prices={"retail": {100: 40.0}})
        assert table.set_price("retail", 100, 0) is True
        assert table.get_price("retail", 100) == 25.0

    @pytest.mark.parametrize("price", [-1.0, float("nan"), float("inf")])
    def test_invalid_price_is_ignored(self, price):
        table = PricingTable(prices={"retail": {100: 40.0}})
        assert table.set_price("retail", 100, price) is False
        assert table.get_price("retail", 100) == 40.0

    def test_non_positive_size_is_ignored(self):
        table = PricingTable()
        assert table.set_price("retail", 0, 10.0) is False
        assert table.prices == {}

    def test_custom_variant_column_is_created(self):
        table = PricingTable()
        table.set_price("Festival", 500, 120.0)
        assert table.prices["festival"] == {500: 120.0}
        assert "festival" in table.variants()


class TestFromRaw:
    def test_invalid_entries_are_dropped(self):
        raw = {
            "retail": {"100": "30", "250": "abc", "-5": 10, "500": -2},
            "wholesale": "not a column",
        }
        table, problems = PricingTable.from_raw(raw)

        assert table.prices == {"retail": {100: 30.0}}
        assert len(problems) == 4

    def test_non_mapping_gives_empty_table(self):
        table, problems = PricingTable.from_raw(["retail", 100, 25])
        assert table.prices == {}
        assert problems

    def test_constructor_cleans_prices(self):
        table = PricingTable(prices={"retail": {100: float("nan"), 250: 65.0}})
        assert table.prices == {"retail": {250: 65.0}}


class TestResolvedColumns:
    def test_resolved_lists_defaults_then_custom(self):
        table = PricingTable(prices={"festival": {100: 35.0}})
        resolved = table.resolved()

        assert list(resolved) == ["retail", "wholesale", "festival"]
        assert resolved["festival"][100] == 35.0
        assert resolved["festival"][250] == pytest.approx(62.5)

    def test_column_honours_requested_sizes(self):
        column = PricingTable().column("retail", sizes=(100, 200))
        assert column == {100: 25.0, 200: pytest.approx(50.0)}
