# backend/utils/derived.py
from typing import Optional


# Margin over cost, in percent; None when the cost is zero
def margin_percent(cost_price: float, sale_price: float) -> Optional[float]:
    if not cost_price:
        return None
    return (sale_price - cost_price) / cost_price * 100


def sale_total(quantity: int, unit_price: float) -> float:
    return quantity * unit_price


def net_profit(quantity: int, unit_price: float, commission_percent: float, cost_price: float) -> float:
    total = sale_total(quantity, unit_price)
    commission = total * (commission_percent or 0) / 100
    return total - commission - quantity * cost_price


def purchase_total(quantity: int, unit_price: float) -> float:
    return quantity * unit_price
