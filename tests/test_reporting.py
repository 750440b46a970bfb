from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from utils.reporting import category_stock, inventory_summary, period_start, purchase_stats, sales_stats


def _product(category, stock, cost=10.0, sale=15.0, min_stock=5):
    return SimpleNamespace(category=category, stock=stock, cost_price=cost, sale_price=sale, min_stock=min_stock)


NOW = datetime(2025, 3, 18, 15, 42, 7, tzinfo=timezone.utc)


class TestPeriods:

    def test_day_starts_at_midnight(self):
        assert period_start("day", NOW) == datetime(2025, 3, 18, tzinfo=timezone.utc)

    def test_week_is_last_seven_days(self):
        assert period_start("week", NOW) == datetime(2025, 3, 11, 15, 42, 7, tzinfo=timezone.utc)

    def test_month_starts_on_the_first(self):
        assert period_start("month", NOW) == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_unknown_period(self):
        with pytest.raises(ValueError):
            period_start("year", NOW)


class TestLedgerStats:

    def test_sales_stats_are_rebuilt_from_source_fields(self):
        remera = SimpleNamespace(cost_price=10.0)
        sales = [
            # stored totals are stale and must be ignored
            SimpleNamespace(quantity=2, unit_price=15.0, commission_percent=0, product=remera, total=999.0, net_profit=None),
            SimpleNamespace(quantity=1, unit_price=15.0, commission_percent=10, product=remera, total=None, net_profit=None),
        ]
        stats = sales_stats(sales)
        assert stats["total_sales"] == 2
        assert stats["units_sold"] == 3
        assert stats["revenue"] == pytest.approx(45.0)
        # 10 + (15 - 1.5 - 10)
        assert stats["net_profit"] == pytest.approx(13.5)

    def test_empty_stats(self):
        assert sales_stats([])["revenue"] == 0
        assert purchase_stats([]) == {"total_purchases": 0, "units_bought": 0, "total_spent": 0.0}

    def test_purchase_stats(self):
        purchases = [SimpleNamespace(quantity=5, unit_price=10.0, total=0), SimpleNamespace(quantity=3, unit_price=12.0, total=0)]
        assert purchase_stats(purchases)["units_bought"] == 8
        assert purchase_stats(purchases)["total_spent"] == pytest.approx(86.0)


class TestInventory:

    def test_summary(self):
        products = [_product("Remeras", 10), _product("Remeras", 0), _product("Buzos", 5, cost=20, sale=35)]
        summary = inventory_summary(products)

        assert summary["total_products"] == 3
        assert summary["total_stock"] == 15
        assert summary["inventory_cost_value"] == pytest.approx(200)
        assert summary["inventory_sale_value"] == pytest.approx(325)
        # stock <= min_stock counts as low
        assert summary["low_stock_products"] == 2
        assert summary["out_of_stock_products"] == 1

    def test_categories_sorted_by_stock(self):
        products = [_product("Buzos", 3), _product("Remeras", 10), _product("Remeras", 2)]
        rows = category_stock(products)

        assert [r["category"] for r in rows] == ["Remeras", "Buzos"]
        assert rows[0]["total_stock"] == 12
        assert rows[0]["product_count"] == 2
        assert rows[0]["low_stock_count"] == 1
