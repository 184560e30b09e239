"""Product model."""

from sqlalchemy import Boolean, Column, Float, Integer, String

from src.database import Base
from src.models.mixins import CreationDateMixin


class Product(Base, CreationDateMixin):
    """Catalog entry offered for sale.

    `id` is the public, sequentially assigned product number. The storage row
    key lives in `pk` and is never exposed.
    """

    __tablename__ = "products"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(Integer, unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    image = Column(String(1024), nullable=False)  # URL returned by /upload
    category = Column(String(100), nullable=False)
    new_price = Column(Float, nullable=False)
    old_price = Column(Float, nullable=False)
    available = Column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name!r})>"
