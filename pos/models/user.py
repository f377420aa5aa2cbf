from sqlalchemy import Column, Integer, String, Boolean
from werkzeug.security import generate_password_hash, check_password_hash

from pos.database import Base


class User(Base):
    """
    Till operator. Permissions gate the management screens of the desktop client.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(80), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)  # never the plain password
    fullname = Column(String(255), nullable=False, default="")
    perm_products = Column(Boolean, nullable=False, default=False)
    perm_categories = Column(Boolean, nullable=False, default=False)
    perm_transactions = Column(Boolean, nullable=False, default=False)
    perm_users = Column(Boolean, nullable=False, default=False)
    perm_settings = Column(Boolean, nullable=False, default=False)
    is_admin = Column(Boolean, nullable=False, default=False)  # the built-in administrator
    status = Column(String(64), nullable=False, default="")

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
