# backend/schemas/dashboard.py
from pydantic import BaseModel
from typing import List


# Headline inventory numbers
class InventorySummary(BaseModel):
    total_products: int
    total_stock: int
    inventory_cost_value: float
    inventory_sale_value: float
    low_stock_products: int
    out_of_stock_products: int


class CategoryStock(BaseModel):
    category: str
    total_stock: int
    product_count: int
    total_cost_value: float
    total_sale_value: float
    low_stock_count: int


class CategoryStockResponse(BaseModel):
    data: List[CategoryStock]
