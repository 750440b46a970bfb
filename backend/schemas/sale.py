# backend/schemas/sale.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Literal, Optional

from models.sale import PaymentMethod
from schemas.product import ProductSummary

StatsPeriod = Literal["day", "week", "month"]


class SaleCreate(BaseModel):
    product_id: int
    quantity: int = Field(1, description="Unidades vendidas")
    unit_price: float
    payment_method: PaymentMethod = PaymentMethod.EFECTIVO
    commission_percent: float = 0
    notes: Optional[str] = None


class SaleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: int
    unit_price: float
    payment_method: PaymentMethod
    commission_percent: float
    total: float
    net_profit: Optional[float] = None
    notes: Optional[str] = None
    date: Optional[datetime] = None
    product: Optional[ProductSummary] = None


class SaleList(BaseModel):
    items: List[SaleResponse]
    total: int


class SalesStats(BaseModel):
    period: StatsPeriod
    total_sales: int
    units_sold: int
    revenue: float
    net_profit: float


class PaymentMethodOption(BaseModel):
    value: str
    label: str
