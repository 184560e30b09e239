"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_account_service
from src.schemas.auth import TokenResponse, UserLogin, UserSignup
from src.services.account_service import AccountService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=TokenResponse)
def signup(
    user_data: UserSignup,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user with an empty cart."""
    token = accounts.signup(user_data.username, user_data.email, user_data.password)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email and password."""
    token = accounts.login(credentials.email, credentials.password)
    return TokenResponse(token=token)
