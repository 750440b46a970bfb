# backend/utils/import_cost.py
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config import settings
from utils.errors import ValidationError

# Domestic (in-China) shipping options per item, USD
INTERNAL_SHIPPING_OPTIONS = (0.5, 1.0, 1.5)


@dataclass
class ImportItem:
    price: float
    internal_shipping: float = 1.0
    weight_grams: float = 200

    @property
    def product_cost(self) -> float:
        return self.price + self.internal_shipping


@dataclass
class ImportRates:
    base_rate: float = settings.IMPORT_BASE_RATE
    extra_kg_rate: float = settings.IMPORT_EXTRA_KG_RATE
    service_charge: float = settings.IMPORT_SERVICE_CHARGE
    recharge_rate: float = settings.IMPORT_RECHARGE_RATE
    optimal_weight_grams: float = settings.IMPORT_OPTIMAL_WEIGHT_GRAMS


@dataclass
class ItemAllocation:
    price: float
    internal_shipping: float
    weight_grams: float
    share: float
    allocated_shipping: float
    allocated_commission: float
    landed_cost: float


@dataclass
class WeightStatus:
    status: str
    optimal_weight_grams: float
    remaining_grams: float = 0
    excess_grams: float = 0


@dataclass
class ImportCostCalculation:
    total_product_cost: float
    total_weight_grams: float
    recharge_commission: float
    international_shipping: float
    service_charge: float
    total_cost: float
    cost_per_item: float
    weight_status: WeightStatus
    items: List[ItemAllocation] = field(default_factory=list)


def international_shipping(total_weight_grams: float, rates: Optional[ImportRates] = None) -> float:
    """First kilogram at the base rate, every started kilogram after it at the extra rate."""
    rates = rates or ImportRates()
    weight_kg = total_weight_grams / 1000
    extra_kg = math.ceil(weight_kg - 1) if weight_kg > 1 else 0
    return rates.base_rate + extra_kg * rates.extra_kg_rate


def weight_status(total_weight_grams: float, rates: Optional[ImportRates] = None) -> WeightStatus:
    rates = rates or ImportRates()
    optimal = rates.optimal_weight_grams
    if total_weight_grams <= optimal:
        return WeightStatus(status="good", optimal_weight_grams=optimal,
                            remaining_grams=optimal - total_weight_grams)
    return WeightStatus(status="warning", optimal_weight_grams=optimal,
                        excess_grams=total_weight_grams - optimal)


def allocation_shares(costs: Sequence[float]) -> List[float]:
    """Fraction of the shared charges carried by each cost; all-zero costs split evenly."""
    total = sum(costs)
    if total > 0:
        return [c / total for c in costs]
    return [1 / len(costs)] * len(costs)


def _validate(items: Sequence[ImportItem]) -> None:
    if not items:
        raise ValidationError("Debe haber al menos un producto en el envío")
    for i, item in enumerate(items):
        if item.price < 0:
            raise ValidationError("El precio no puede ser negativo", item=i)
        if item.weight_grams < 0:
            raise ValidationError("El peso no puede ser negativo", item=i)
        if item.internal_shipping not in INTERNAL_SHIPPING_OPTIONS:
            raise ValidationError(
                "El envío interno debe ser 0.5, 1 o 1.5", item=i, options=list(INTERNAL_SHIPPING_OPTIONS)
            )


def calculate_import_cost(items: Sequence[ImportItem], rates: Optional[ImportRates] = None) -> ImportCostCalculation:
    """Landed cost of one consolidated shipment and its split across items.

    Shipment-level charges (international freight, service fee and the
    recharge commission) are attributed to each item in proportion to its
    own product cost.
    """
    _validate(items)
    rates = rates or ImportRates()

    total_product_cost = sum(item.product_cost for item in items)
    total_weight = sum(item.weight_grams for item in items)

    recharge_commission = total_product_cost * rates.recharge_rate
    shipping = international_shipping(total_weight, rates)
    service_charge = rates.service_charge

    total_cost = total_product_cost + recharge_commission + shipping + service_charge
    cost_per_item = total_cost / len(items)

    shared_charges = shipping + service_charge
    allocations = []
    shares = allocation_shares([item.product_cost for item in items])
    for item, share in zip(items, shares):
        allocated_shipping = shared_charges * share
        allocated_commission = recharge_commission * share
        allocations.append(ItemAllocation(
            price=item.price,
            internal_shipping=item.internal_shipping,
            weight_grams=item.weight_grams,
            share=share,
            allocated_shipping=allocated_shipping,
            allocated_commission=allocated_commission,
            landed_cost=item.product_cost + allocated_shipping + allocated_commission,
        ))

    return ImportCostCalculation(
        total_product_cost=total_product_cost,
        total_weight_grams=total_weight,
        recharge_commission=recharge_commission,
        international_shipping=shipping,
        service_charge=service_charge,
        total_cost=total_cost,
        cost_per_item=cost_per_item,
        weight_status=weight_status(total_weight, rates),
        items=allocations,
    )
