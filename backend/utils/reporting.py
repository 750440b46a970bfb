# backend/utils/reporting.py
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from utils.derived import net_profit, purchase_total, sale_total


def period_start(period: str, now: Optional[datetime] = None) -> datetime:
    """Start of the current day, of the last 7 days, or of the current month (UTC)."""
    now = now or datetime.now(timezone.utc)
    if period == "day":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        return now - timedelta(days=7)
    if period == "month":
        return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    raise ValueError(f"Unknown period: {period}")


def sales_stats(sales: Iterable) -> Dict[str, float]:
    stats = {"total_sales": 0, "units_sold": 0, "revenue": 0.0, "net_profit": 0.0}
    for s in sales:
        stats["total_sales"] += 1
        stats["units_sold"] += s.quantity
        stats["revenue"] += sale_total(s.quantity, s.unit_price)
        stats["net_profit"] += net_profit(s.quantity, s.unit_price, s.commission_percent, s.product.cost_price)
    return stats


def purchase_stats(purchases: Iterable) -> Dict[str, float]:
    stats = {"total_purchases": 0, "units_bought": 0, "total_spent": 0.0}
    for p in purchases:
        stats["total_purchases"] += 1
        stats["units_bought"] += p.quantity
        stats["total_spent"] += purchase_total(p.quantity, p.unit_price)
    return stats


def _is_low(product) -> bool:
    return product.stock <= (product.min_stock if product.min_stock is not None else 5)


# Headline numbers for the inventory dashboard
def inventory_summary(products: List) -> Dict[str, float]:
    return {
        "total_products": len(products),
        "total_stock": sum(p.stock for p in products),
        "inventory_cost_value": sum(p.stock * p.cost_price for p in products),
        "inventory_sale_value": sum(p.stock * p.sale_price for p in products),
        "low_stock_products": sum(1 for p in products if _is_low(p)),
        "out_of_stock_products": sum(1 for p in products if p.stock == 0),
    }


# Stock and value per category, biggest stock first
def category_stock(products: Iterable) -> List[Dict[str, float]]:
    stats: Dict[str, Dict[str, float]] = {}
    for p in products:
        row = stats.setdefault(p.category, {
            "category": p.category, "total_stock": 0, "product_count": 0,
            "total_cost_value": 0.0, "total_sale_value": 0.0, "low_stock_count": 0,
        })
        row["total_stock"] += p.stock
        row["product_count"] += 1
        row["total_cost_value"] += p.stock * p.cost_price
        row["total_sale_value"] += p.stock * p.sale_price
        if _is_low(p):
            row["low_stock_count"] += 1
    return sorted(stats.values(), key=lambda r: r["total_stock"], reverse=True)
