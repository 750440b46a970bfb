import pytest

from utils.derived import margin_percent, net_profit, purchase_total, sale_total


def test_margin_percent():
    assert margin_percent(10, 15) == pytest.approx(50.0)


def test_margin_undefined_for_zero_cost():
    assert margin_percent(0, 15) is None


def test_sale_total():
    assert sale_total(3, 12.5) == pytest.approx(37.5)


def test_net_profit_subtracts_commission_and_cost():
    # 2 x 100 = 200, 10% commission = 20, cost 2 x 60 = 120
    assert net_profit(2, 100, 10, 60) == pytest.approx(60)


def test_net_profit_without_commission():
    assert net_profit(1, 15, None, 10) == pytest.approx(5)


def test_purchase_total():
    assert purchase_total(4, 7.25) == pytest.approx(29)
