# backend/schemas/purchase.py
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import List, Optional

from schemas.product import ProductSummary
from schemas.sale import StatsPeriod


class PurchaseCreate(BaseModel):
    product_id: int
    quantity: int = 1
    unit_price: float
    supplier: Optional[str] = None
    notes: Optional[str] = None


class PurchaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: int
    unit_price: float
    total: float
    supplier: Optional[str] = None
    notes: Optional[str] = None
    date: Optional[datetime] = None
    product: Optional[ProductSummary] = None


class PurchaseList(BaseModel):
    items: List[PurchaseResponse]
    total: int


class PurchaseStats(BaseModel):
    period: StatsPeriod
    total_purchases: int
    units_bought: int
    total_spent: float
