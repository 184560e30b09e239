"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import SessionIdentity, TokenResponse, UserLogin, UserSignup
from src.schemas.cart import CartData, CartItemRequest
from src.schemas.product import (
    ProductAdded,
    ProductCreate,
    ProductRemove,
    ProductResponse,
    SuccessResponse,
    UploadResponse,
)

__all__ = [
    "UserSignup",
    "UserLogin",
    "TokenResponse",
    "SessionIdentity",
    "CartData",
    "CartItemRequest",
    "ProductCreate",
    "ProductRemove",
    "ProductResponse",
    "ProductAdded",
    "SuccessResponse",
    "UploadResponse",
]
