# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

# Model Product
# A single catalog item (clothing, shoes, accessories) with its cost and
# sale price and the number of units currently held in stock.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False, index=True)

    category = Column(String, nullable=False, index=True)
    size = Column(String, nullable=False)
    color = Column(String, nullable=False)

    # Prices, guarded by constraints.
    cost_price = Column(Float, CheckConstraint("cost_price > 0"), nullable=False)
    sale_price = Column(Float, CheckConstraint("sale_price > 0"), nullable=False)
    # Snapshot only; readers recompute it from the prices.
    margin_percent = Column(Float, nullable=True)

    # Stock data.
    stock = Column(Integer, CheckConstraint("stock >= 0"), nullable=False, default=0)
    min_stock = Column(Integer, CheckConstraint("min_stock >= 0"), nullable=False, default=5)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    sales = relationship("Sale", back_populates="product", cascade="all, delete-orphan")
    purchases = relationship("Purchase", back_populates="product", cascade="all, delete-orphan")
