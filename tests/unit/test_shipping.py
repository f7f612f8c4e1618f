"""Tests for shipment grouping and the shipment notice."""

import pytest

from storefront.core.output import BufferedSink
from storefront.services.shipping import ShippingService, hash_table_order, string_hash


@pytest.fixture
def mixed_units(cheese, biscuits):
    return [cheese, cheese, biscuits]


class TestShippingService:
    """Test notice output in both weighing modes."""

    def test_empty_package_writes_nothing(self, sink):
        """Should stay silent and return None for an empty sequence."""
        service = ShippingService(sink, use_first_item_weight=True)

        assert service.ship([]) is None
        assert service.ship(iter(())) is None
        assert sink.lines == []

    def test_historical_notice(self, sink, mixed_units):
        """Should weigh every group by the first unit and list groups in hash table order."""
        ShippingService(sink, use_first_item_weight=True, legacy_group_order=True).ship(mixed_units)

        assert sink.lines == [
            "** Shipment notice **",
            "1x Biscuits 200.0g",
            "2x Cheese 400.0g",
            "Total package weight 1.1kg",
        ]

    def test_own_weight_mode_in_cart_order(self, sink, mixed_units):
        """Should weigh every group by its own unit weight when the quirk is off."""
        ShippingService(sink, use_first_item_weight=False, legacy_group_order=False).ship(mixed_units)

        assert sink.lines == [
            "** Shipment notice **",
            "2x Cheese 400.0g",
            "1x Biscuits 700.0g",
            "Total package weight 1.1kg",
        ]

    def test_total_weight_is_true_sum_in_both_modes(self, mixed_units):
        for flag in (True, False):
            summary = ShippingService(BufferedSink(), use_first_item_weight=flag).summarize(mixed_units)
            assert summary.total_weight_grams == 1100.0
            assert summary.total_weight_kg == pytest.approx(1.1)

    def test_groups_follow_first_appearance(self, sink, cheese, tv):
        service = ShippingService(sink, use_first_item_weight=False, legacy_group_order=False)
        summary = service.summarize([tv, cheese, tv])

        assert [(line.name, line.count) for line in summary.lines] == [("TV", 2), ("Cheese", 1)]
        assert summary.lines[0].weight == 20000.0

    def test_first_item_weight_ignores_group_order(self, sink, mixed_units):
        """Should take the reference weight from the first unit, not the first listed group."""
        summary = ShippingService(sink, use_first_item_weight=True, legacy_group_order=True).summarize(mixed_units)

        assert [line.name for line in summary.lines] == ["Biscuits", "Cheese"]
        assert [line.weight for line in summary.lines] == [200.0, 400.0]

    def test_single_product_package(self, sink, tv):
        ShippingService(sink, use_first_item_weight=True).ship([tv, tv])

        assert sink.lines[1] == "2x TV 20000.0g"
        assert sink.lines[2] == "Total package weight 20.0kg"

    def test_large_group_weight_uses_scientific_notation(self, sink, tv):
        ShippingService(sink, use_first_item_weight=True).ship([tv] * 1000)

        assert sink.lines[1] == "1000x TV 1.0E7g"
        assert sink.lines[2] == "Total package weight 10000.0kg"

    def test_returns_summary(self, sink, mixed_units):
        summary = ShippingService(sink, use_first_item_weight=True, legacy_group_order=False).ship(mixed_units)

        assert [line.weight for line in summary.lines] == [400.0, 200.0]


class TestHashTableOrder:
    """Test the historical group ordering."""

    def test_string_hash(self):
        assert string_hash("") == 0
        assert string_hash("a") == 97
        assert string_hash("Cheese") == 2017308919

    def test_string_hash_wraps_to_32_bits(self):
        assert 0 <= string_hash("Biscuits") <= 0xFFFFFFFF
        assert string_hash("Biscuits") == 1147342218

    def test_orders_by_bucket(self):
        """Should list Biscuits (bucket 9) before Cheese (bucket 10)."""
        assert hash_table_order(["Cheese", "Biscuits"]) == ["Biscuits", "Cheese"]

    def test_colliding_names_keep_insertion_order(self):
        """Should keep insertion order for names sharing a bucket."""
        assert string_hash("Aa") == string_hash("BB")
        assert hash_table_order(["BB", "Aa"]) == ["BB", "Aa"]
        assert hash_table_order(["Aa", "BB"]) == ["Aa", "BB"]
