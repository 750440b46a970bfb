# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional, List


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Product form; business rules (prices, sale > cost) are checked by utils.catalog
class ProductCreate(BaseModel):
    name: str = Field(..., description="Nombre del producto")
    category: str = Field(..., description="Categoría (Remeras, Zapatillas...)")
    size: str = Field(..., description="Talle")
    color: str
    cost_price: float = Field(..., description="Precio de costo (USD)")
    sale_price: float = Field(..., description="Precio de venta (USD)")
    stock: int = 0
    min_stock: Optional[int] = None


# Schema for partial product updates
class ProductEditRequest(BaseModel):
    """Schema for PATCH requests - all fields optional."""
    name: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    cost_price: Optional[float] = None
    sale_price: Optional[float] = None
    stock: Optional[int] = None
    min_stock: Optional[int] = None


class ProductResponse(ORMBase):
    id: int
    code: str
    name: str
    category: str
    size: str
    color: str
    cost_price: float
    sale_price: float
    margin_percent: Optional[float] = None
    stock: int
    min_stock: int
    low_stock: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Product fields embedded in sale / purchase listings
class ProductSummary(ORMBase):
    id: int
    code: str
    name: str
    category: str
    size: str
    color: str


class ProductList(BaseModel):
    items: List[ProductResponse]
    total: int
