from sqlalchemy import Column, Integer, String, Float, Text, DateTime, JSON, CheckConstraint
from sqlalchemy.sql import func

from pos.database import Base


class Purchase(Base):
    """
    Purchase model representing a stock intake from a supplier.

    Line items are embedded as a JSON list, kept exactly as submitted:
    [{"productId", "productName", "quantity", "buyingPrice"}, ...]

    Attributes:
        id: Unique identifier assigned by the store
        supplier: Supplier name
        items: Ordered line items
        total_amount: Total paid to the supplier
        notes: Free-form notes
        created_at: Timestamp when the purchase was recorded
    """
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, index=True)
    supplier = Column(String(255), nullable=False, index=True)
    items = Column(JSON, nullable=False, default=list)
    total_amount = Column(Float, nullable=False, default=0.0)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    __table_args__ = (
        CheckConstraint('total_amount >= 0', name='check_total_amount_non_negative'),
    )

    def __repr__(self):
        return f"<Purchase(id={self.id}, supplier='{self.supplier}', items={len(self.items or [])})>"
