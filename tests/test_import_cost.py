"""Import cost allocator tests."""

import math

import pytest

from utils.errors import ValidationError
from utils.import_cost import (
    ImportItem, ImportRates, allocation_shares, calculate_import_cost, international_shipping, weight_status,
)


class TestInternationalShipping:

    def test_one_kilogram_pays_only_base_rate(self):
        assert international_shipping(1000) == pytest.approx(24.46)

    def test_any_fraction_over_one_kilogram_is_charged(self):
        assert international_shipping(1001) == pytest.approx(24.46 + 9.08)

    def test_exact_kilograms(self):
        assert international_shipping(3000) == pytest.approx(24.46 + 2 * 9.08)

    def test_empty_shipment_still_pays_first_kilogram(self):
        assert international_shipping(0) == pytest.approx(24.46)

    def test_custom_rates(self):
        rates = ImportRates(base_rate=20, extra_kg_rate=10)
        assert international_shipping(2500, rates) == pytest.approx(40)


class TestShipmentTotals:

    def test_reference_example(self):
        calc = calculate_import_cost([
            ImportItem(price=20, internal_shipping=1, weight_grams=200),
            ImportItem(price=30, internal_shipping=1, weight_grams=300),
        ])
        assert calc.total_product_cost == pytest.approx(52)
        assert calc.total_weight_grams == 500
        assert calc.international_shipping == pytest.approx(24.46)
        assert calc.recharge_commission == pytest.approx(2.08)
        assert calc.service_charge == pytest.approx(4)
        assert calc.total_cost == pytest.approx(82.54)
        assert calc.cost_per_item == pytest.approx(41.27)
        assert calc.items[0].share == pytest.approx(21 / 52)
        assert calc.items[1].share == pytest.approx(31 / 52)
        assert sum(i.landed_cost for i in calc.items) == pytest.approx(82.54)

    def test_empty_item_list_is_rejected(self):
        with pytest.raises(ValidationError):
            calculate_import_cost([])

    def test_negative_weight_is_rejected(self):
        with pytest.raises(ValidationError):
            calculate_import_cost([ImportItem(price=5, weight_grams=-1)])

    @pytest.mark.parametrize("internal_shipping", [0, 0.75, 3.0, 7.25])
    def test_internal_shipping_outside_options_is_rejected(self, internal_shipping):
        with pytest.raises(ValidationError) as exc:
            calculate_import_cost([ImportItem(price=10, internal_shipping=internal_shipping)])
        assert exc.value.context["options"] == [0.5, 1.0, 1.5]

    @pytest.mark.parametrize("internal_shipping", [0.5, 1, 1.5])
    def test_every_internal_shipping_option_is_accepted(self, internal_shipping):
        calc = calculate_import_cost([ImportItem(price=10, internal_shipping=internal_shipping)])
        assert calc.total_product_cost == pytest.approx(10 + internal_shipping)


class TestAllocation:

    @pytest.mark.parametrize("items", [
        [ImportItem(12.5, 0.5, 150)],
        [ImportItem(3, 1, 900), ImportItem(45.2, 1.5, 1200), ImportItem(0, 0.5, 10)],
        [ImportItem(p, 1, 333) for p in (1, 2, 3, 5, 8, 13, 21, 34)],
    ])
    def test_landed_costs_exhaust_total(self, items):
        calc = calculate_import_cost(items)
        assert math.isclose(sum(i.landed_cost for i in calc.items), calc.total_cost, rel_tol=1e-9)

    def test_free_item_still_carries_its_internal_shipping_share(self):
        calc = calculate_import_cost([ImportItem(price=0, internal_shipping=0.5), ImportItem(price=9.5, internal_shipping=0.5)])
        assert calc.items[0].share == pytest.approx(0.5 / 10.5)
        assert math.isclose(sum(i.landed_cost for i in calc.items), calc.total_cost, rel_tol=1e-9)

    def test_shares_follow_costs(self):
        assert allocation_shares([1, 3]) == pytest.approx([0.25, 0.75])

    def test_all_zero_costs_split_evenly(self):
        shares = allocation_shares([0, 0, 0, 0])
        assert shares == pytest.approx([0.25] * 4)
        assert all(math.isfinite(s) for s in shares)


class TestWeightStatus:

    def test_under_optimal_weight(self):
        status = weight_status(5000)
        assert status.status == "good"
        assert status.remaining_grams == 999

    def test_over_optimal_weight(self):
        status = weight_status(6500)
        assert status.status == "warning"
        assert status.excess_grams == 501

    def test_status_does_not_change_costs(self):
        light = calculate_import_cost([ImportItem(10, 1, 5999)])
        assert light.weight_status.status == "good"
        assert light.international_shipping == pytest.approx(24.46 + 5 * 9.08)
