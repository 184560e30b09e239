"""Domain errors translated to HTTP responses at the request boundary."""

from fastapi import status


class StorefrontError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class Unauthorized(StorefrontError):
    """Raised when a protected route is called without a usable session token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access Denied"


class InvalidToken(Exception):
    """Raised by the token service when a token is malformed, forged or expired."""


class DuplicateAccount(StorefrontError):
    message = "User already exists"


class InvalidCredentials(StorefrontError):
    message = "Invalid Credentials"


class AccountNotFound(StorefrontError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class ProductIdConflict(StorefrontError):
    """Raised when a concurrent insert claimed the product id first."""

    status_code = status.HTTP_409_CONFLICT
    message = "Product id already taken, retry the request"
