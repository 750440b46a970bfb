# backend/schemas/calculators.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class PriceRequest(BaseModel):
    base_cost: float = Field(0, ge=0, description="Costo base (USD)")
    import_tax_percent: float = 0
    shipping_percent: float = 0
    profit_margin_percent: float = 0
    platform_commission_percent: float = 0
    # When set, money values are also returned converted (USD -> ARS)
    exchange_rate: Optional[float] = Field(None, gt=0)


class PriceBreakdownOut(BaseModel):
    cost: float
    tax: float
    shipping: float
    profit: float
    commission: float


class PriceResponse(BaseModel):
    base_cost: float
    import_tax_percent: float
    shipping_percent: float
    profit_margin_percent: float
    platform_commission_percent: float
    subtotal: float
    price_before_commission: float
    final_price: float
    breakdown: PriceBreakdownOut
    shares: Dict[str, float]
    converted: Optional[Dict[str, float]] = None
    exchange_rate: Optional[float] = None


class ImportItemIn(BaseModel):
    price: float = Field(0, ge=0)
    internal_shipping: float = Field(1.0, description="Envío interno: 0.5, 1 o 1.5 USD")
    weight_grams: float = Field(200, ge=0)


class ImportCostRequest(BaseModel):
    items: List[ImportItemIn]
    exchange_rate: Optional[float] = Field(None, gt=0)


class ItemAllocationOut(BaseModel):
    price: float
    internal_shipping: float
    weight_grams: float
    share: float
    allocated_shipping: float
    allocated_commission: float
    landed_cost: float


class WeightStatusOut(BaseModel):
    status: str
    optimal_weight_grams: float
    remaining_grams: float = 0
    excess_grams: float = 0


class ImportCostResponse(BaseModel):
    total_product_cost: float
    total_weight_grams: float
    recharge_commission: float
    international_shipping: float
    service_charge: float
    total_cost: float
    cost_per_item: float
    weight_status: WeightStatusOut
    items: List[ItemAllocationOut]
    total_cost_converted: Optional[float] = None
    exchange_rate: Optional[float] = None


class Preset(BaseModel):
    label: str
    value: float


class CalculatorPresets(BaseModel):
    margins: List[Preset]
    platform_commissions: List[Preset]
    internal_shipping_options: List[float]
    default_exchange_rate: float
