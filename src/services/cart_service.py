"""Cart service for per-user item counters."""

import logging

from sqlalchemy.orm import Session

from src.exceptions import AccountNotFound
from src.models.user import User
from src.schemas.auth import SessionIdentity
from src.schemas.cart import CartData

logger = logging.getLogger(__name__)


class CartService:
    """Service for mutating the cart embedded in a user record."""

    def __init__(self, db: Session):
        self.db = db

    def _lock_user(self, identity: SessionIdentity) -> User:
        # Row lock serializes concurrent increments on databases that support it
        user = (
            self.db.query(User)
            .filter(User.id == identity.id)
            .with_for_update()
            .first()
        )
        if user is None:
            raise AccountNotFound()
        return user

    def _apply(self, identity: SessionIdentity, item_id: str, delta: int) -> CartData:
        user = self._lock_user(identity)
        cart = dict(user.cart_data or {})
        if delta < 0 and item_id not in cart:
            # Nothing to decrement; keep unknown ids out of the cart
            self.db.rollback()
            return cart
        cart[item_id] = max(0, cart.get(item_id, 0) + delta)
        # Assign a new dict so the JSON column is marked dirty
        user.cart_data = cart
        self.db.commit()
        return cart

    def add_to_cart(self, identity: SessionIdentity, item_id: str) -> CartData:
        """Increment the quantity held for `item_id`.

        The item is not checked against the catalog.
        """
        cart = self._apply(identity, item_id, 1)
        logger.info(f"User {identity.id} cart[{item_id}] -> {cart[item_id]}")
        return cart

    def remove_from_cart(self, identity: SessionIdentity, item_id: str) -> CartData:
        """Decrement the quantity held for `item_id`, never below zero."""
        cart = self._apply(identity, item_id, -1)
        logger.info(f"User {identity.id} cart[{item_id}] -> {cart.get(item_id, 0)}")
        return cart
