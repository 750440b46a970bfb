# backend/models/purchase.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

# Represents a restock: N units of a product bought from a supplier
class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    unit_price = Column(Float, CheckConstraint("unit_price > 0"), nullable=False)
    total = Column(Float, nullable=False)

    supplier = Column(String, nullable=True, index=True)
    notes = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    product = relationship("Product", back_populates="purchases")
