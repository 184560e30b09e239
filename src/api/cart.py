"""Cart API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_account_service, get_cart_service, get_session_identity
from src.schemas.auth import SessionIdentity
from src.schemas.cart import CartData, CartItemRequest
from src.services.account_service import AccountService
from src.services.cart_service import CartService

router = APIRouter(tags=["cart"])


@router.post("/addToCart", response_class=PlainTextResponse)
def add_to_cart(
    body: CartItemRequest,
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
    carts: Annotated[CartService, Depends(get_cart_service)],
):
    """Increment the caller's quantity for one item."""
    carts.add_to_cart(identity, body.item_id)
    return "Added to cart"


@router.post("/removeFromCart", response_class=PlainTextResponse)
def remove_from_cart(
    body: CartItemRequest,
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
    carts: Annotated[CartService, Depends(get_cart_service)],
):
    """Decrement the caller's quantity for one item."""
    carts.remove_from_cart(identity, body.item_id)
    return "Removed from cart"


@router.post("/getCart", response_model=CartData)
def get_cart(
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Get the caller's cart."""
    return accounts.get_cart(identity)
