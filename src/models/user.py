"""User model."""

from sqlalchemy import JSON, Column, Integer, String

from src.database import Base
from src.models.mixins import CreationDateMixin


class User(Base, CreationDateMixin):
    """Shopper account with an embedded cart."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    # {"<item id>": quantity}; replaced wholesale on every write
    cart_data = Column("cartData", JSON, nullable=False, default=dict)
