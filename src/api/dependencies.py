"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.exceptions import InvalidToken, Unauthorized
from src.schemas.auth import SessionIdentity
from src.services.account_service import AccountService
from src.services.auth import verify_token
from src.services.cart_service import CartService
from src.services.catalog_service import CatalogService
from src.services.upload_service import UploadService

logger = logging.getLogger(__name__)

AuthTokenHeader = Annotated[str | None, Header(alias="auth-token")]


def get_session_identity(request: Request, auth_token: AuthTokenHeader = None) -> SessionIdentity:
    """Resolve the caller from the `auth-token` header.

    The identity is also attached to `request.state.user` for downstream use.
    """
    if not auth_token:
        raise Unauthorized("Access Denied")

    try:
        identity = verify_token(auth_token)
    except InvalidToken as e:
        logger.warning(f"Rejected session token: {e}")
        raise Unauthorized("Invalid Token") from None

    request.state.user = identity
    return identity


def require_catalog_writer(
    request: Request, auth_token: AuthTokenHeader = None
) -> SessionIdentity | None:
    """Guard catalog writes when PROTECT_CATALOG_WRITES is enabled; open otherwise."""
    if not get_settings().protect_catalog_writes:
        return None
    return get_session_identity(request, auth_token)


def get_account_service(
    db: Annotated[Session, Depends(get_db)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(db)


def get_catalog_service(
    db: Annotated[Session, Depends(get_db)],
) -> CatalogService:
    """Get catalog service with dependencies."""
    return CatalogService(db)


def get_cart_service(
    db: Annotated[Session, Depends(get_db)],
) -> CartService:
    """Get cart service with dependencies."""
    return CartService(db)


def get_upload_service() -> UploadService:
    """Get upload service instance."""
    return UploadService()
