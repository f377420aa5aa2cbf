from sqlalchemy import Column, Integer, String, Boolean, Text

from pos.database import Base

SETTINGS_ID = 1


class Setting(Base):
    """
    Store settings. A single row with id SETTINGS_ID holds the whole configuration.
    """
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    app = Column(String(255), nullable=False, default="Standalone Point of Sale")
    store = Column(String(255), nullable=False, default="")
    address_one = Column(String(255), nullable=False, default="")
    address_two = Column(String(255), nullable=False, default="")
    contact = Column(String(255), nullable=False, default="")
    tax = Column(String(64), nullable=False, default="")
    symbol = Column(String(8), nullable=False, default="$")
    percentage = Column(String(16), nullable=False, default="0")
    charge_tax = Column(Boolean, nullable=False, default=False)
    footer = Column(Text, nullable=False, default="")
    img = Column(String(255), nullable=False, default="")

    def __repr__(self):
        return f"<Setting(store='{self.store}')>"
