"""Catalog service for product management."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.exceptions import ProductIdConflict
from src.models.product import Product
from src.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for catalog-related operations."""

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def next_product_id(self) -> int:
        """Highest assigned product id plus one, or 1 for an empty catalog."""
        current = self.db.query(func.max(Product.id)).scalar()
        return (current or 0) + 1

    def add_product(self, product_data: ProductCreate) -> Product:
        """Persist a new product under the next sequential id.

        The id column is unique, so two concurrent calls that computed the same
        id cannot both succeed; the loser raises ProductIdConflict.
        """
        fields = product_data.model_dump(exclude_none=True)
        product = Product(id=self.next_product_id(), **fields)
        self.db.add(product)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ProductIdConflict() from None
        self.db.refresh(product)

        logger.info(f"Added product {product.id}: '{product.name}'")
        return product

    def list_all(self) -> list[Product]:
        """Get every product in the catalog."""
        return self.db.query(Product).order_by(Product.id).all()

    def list_recent(self, limit: int | None = None) -> list[Product]:
        """Get the newest products, newest first."""
        cap = self.settings.new_collection_limit
        limit = cap if limit is None else max(0, min(limit, cap))
        return (
            self.db.query(Product)
            .order_by(Product.date.desc(), Product.pk.desc())
            .limit(limit)
            .all()
        )

    def remove_product(self, product_id: int) -> bool:
        """Delete the product with the given public id.

        Returns whether anything was deleted; a missing id is not an error.
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            logger.info(f"Remove requested for unknown product {product_id}")
            return False

        self.db.delete(product)
        self.db.commit()
        logger.info(f"Removed product {product_id}")
        return True
