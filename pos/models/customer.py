from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from pos.database import Base


class Customer(Base):
    """Customer that transactions can be billed to."""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    phone = Column(String(64), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    address = Column(String(512), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}')>"
