# backend/utils/pricing.py
from dataclasses import dataclass, asdict
from typing import Dict

# Quick-pick values offered next to the calculator inputs
MARGIN_PRESETS = [
    {"label": "Bajo (30%)", "value": 30.0},
    {"label": "Medio (50%)", "value": 50.0},
    {"label": "Alto (70%)", "value": 70.0},
    {"label": "Premium (100%)", "value": 100.0},
]

PLATFORM_COMMISSIONS = [
    {"label": "MercadoLibre", "value": 11.5},
    {"label": "Tiendanube", "value": 3.5},
    {"label": "Shopify", "value": 2.9},
    {"label": "Instagram Shop", "value": 5.0},
]


@dataclass
class PriceBreakdown:
    cost: float
    tax: float
    shipping: float
    profit: float
    commission: float

    def total(self) -> float:
        return self.cost + self.tax + self.shipping + self.profit + self.commission


@dataclass
class PriceCalculation:
    base_cost: float
    import_tax_percent: float
    shipping_percent: float
    profit_margin_percent: float
    platform_commission_percent: float
    subtotal: float
    price_before_commission: float
    final_price: float
    breakdown: PriceBreakdown

    def share_of_total(self, amount: float) -> float:
        """Percentage of the final price represented by ``amount``."""
        if self.final_price == 0:
            return 0.0
        return amount / self.final_price * 100

    def shares(self) -> Dict[str, float]:
        return {k: self.share_of_total(v) for k, v in asdict(self.breakdown).items()}

    def converted(self, rate: float) -> Dict[str, float]:
        """Money values re-expressed in another currency (e.g. USD -> ARS)."""
        values = {
            "subtotal": self.subtotal,
            "price_before_commission": self.price_before_commission,
            "final_price": self.final_price,
        }
        values.update(asdict(self.breakdown))
        return {k: v * rate for k, v in values.items()}


def calculate_price(
    base_cost: float,
    import_tax_percent: float = 0,
    shipping_percent: float = 0,
    profit_margin_percent: float = 0,
    platform_commission_percent: float = 0,
) -> PriceCalculation:
    """Suggested sale price for an imported product.

    Tax and freight are charged on the base cost, the margin on the landed
    subtotal and the platform commission on the price that already includes
    the margin, so the breakdown adds up to the final price.
    """
    base_cost = base_cost or 0
    tax = base_cost * (import_tax_percent or 0) / 100
    shipping = base_cost * (shipping_percent or 0) / 100
    subtotal = base_cost + tax + shipping

    profit = subtotal * (profit_margin_percent or 0) / 100
    price_before_commission = subtotal + profit

    commission = price_before_commission * (platform_commission_percent or 0) / 100
    final_price = price_before_commission + commission

    return PriceCalculation(
        base_cost=base_cost,
        import_tax_percent=import_tax_percent or 0,
        shipping_percent=shipping_percent or 0,
        profit_margin_percent=profit_margin_percent or 0,
        platform_commission_percent=platform_commission_percent or 0,
        subtotal=subtotal,
        price_before_commission=price_before_commission,
        final_price=final_price,
        breakdown=PriceBreakdown(
            cost=base_cost, tax=tax, shipping=shipping, profit=profit, commission=commission
        ),
    )
