from sqlalchemy import Column, Integer, String, Float, DateTime, JSON
from sqlalchemy.sql import func

from pos.database import Base


class TransactionStatus:
    """Values of Transaction.status."""
    OPEN = 0
    PAID = 1


class Transaction(Base):
    """
    Sales transaction.

    Attributes:
        id: Unique identifier
        order: Till-side order number
        ref_number: Reference of a held order ("" when not on hold)
        customer: Customer id as text, "0" for walk-in sales
        status: TransactionStatus.OPEN or TransactionStatus.PAID
        items: Sold lines as JSON [{"id", "product_name", "sku", "price", "quantity"}]
        total: Amount due
        paid: Amount tendered
        date: When the sale was made
    """
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    order = Column(Integer, nullable=False, default=0)
    ref_number = Column(String(64), nullable=False, default="", index=True)
    discount = Column(Float, nullable=False, default=0.0)
    customer = Column(String(64), nullable=False, default="0")
    customer_name = Column(String(255), nullable=False, default="")
    status = Column(Integer, nullable=False, default=TransactionStatus.OPEN, index=True)
    subtotal = Column(Float, nullable=False, default=0.0)
    tax = Column(Float, nullable=False, default=0.0)
    order_type = Column(Integer, nullable=False, default=1)
    items = Column(JSON, nullable=False, default=list)
    date = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    payment_type = Column(String(64), nullable=False, default="")
    payment_info = Column(String(255), nullable=False, default="")
    total = Column(Float, nullable=False, default=0.0)
    paid = Column(Float, nullable=False, default=0.0)
    change = Column(Float, nullable=False, default=0.0)
    user_id = Column(Integer, nullable=False, default=0, index=True)
    user = Column(String(255), nullable=False, default="")
    till = Column(Integer, nullable=False, default=0, index=True)

    @property
    def is_fully_paid(self) -> bool:
        return self.paid >= self.total

    def __repr__(self):
        return f"<Transaction(id={self.id}, total={self.total}, paid={self.paid})>"
