# backend/models/sale.py
import enum
from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Enum, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

# Payment methods accepted at the counter
class PaymentMethod(str, enum.Enum):
    EFECTIVO = "efectivo"
    TARJETA_DEBITO = "tarjeta_debito"
    TARJETA_CREDITO = "tarjeta_credito"
    TRANSFERENCIA = "transferencia"
    MERCADOPAGO = "mercadopago"
    OTRO = "otro"

# Represents one sale line: N units of a product sold at a unit price
class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    unit_price = Column(Float, CheckConstraint("unit_price > 0"), nullable=False)
    payment_method = Column(Enum(PaymentMethod), nullable=False, default=PaymentMethod.EFECTIVO)
    commission_percent = Column(
        Float, CheckConstraint("commission_percent >= 0 AND commission_percent <= 100"), nullable=False, default=0
    )

    # Totals computed by the backend at creation time
    total = Column(Float, nullable=False)
    net_profit = Column(Float, nullable=True)

    notes = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    product = relationship("Product", back_populates="sales")
