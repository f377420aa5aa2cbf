from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from pos.database import Base


class Product(Base):
    """
    Product model representing items available for sale.

    Attributes:
        id: Unique identifier for the product
        name: Product name
        price: Selling price
        category: Reference to the product category (optional)
        quantity: Stock on hand (never negative); None when not counted
        stock_tracked: Whether sales and purchases should move the quantity
        image: Path of the product image (optional)
        sku: Stock keeping unit code
        barcode: Barcode value (optional)
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    price = Column(Float, nullable=False, default=0.0)
    category = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=True)
    stock_tracked = Column(Boolean, nullable=False, default=True)
    image = Column(String(255), nullable=True)
    sku = Column(String(64), nullable=False, default="", index=True)
    barcode = Column(String(64), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Stock can be missing (untracked) but never negative
    __table_args__ = (
        CheckConstraint('quantity IS NULL OR quantity >= 0', name='check_quantity_non_negative'),
        CheckConstraint('price >= 0', name='check_price_non_negative'),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity})>"
