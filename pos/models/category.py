from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from pos.database import Base


class Category(Base):
    """Product category."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
