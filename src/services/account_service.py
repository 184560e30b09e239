"""Account service for signup, login and cart lookup."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.exceptions import AccountNotFound, DuplicateAccount, InvalidCredentials
from src.models.user import User
from src.schemas.auth import SessionIdentity
from src.schemas.cart import CartData
from src.services.auth import get_password_hash, issue_token, verify_password

logger = logging.getLogger(__name__)


def empty_cart(size: int) -> CartData:
    """Build a cart with `size` zeroed slots keyed "0".."size-1"."""
    return {str(i): 0 for i in range(size)}


class AccountService:
    """Service for user registration and credential checks."""

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def get_user(self, identity: SessionIdentity) -> User:
        """Resolve the user behind a verified session identity."""
        user = self.db.get(User, identity.id)
        if user is None:
            raise AccountNotFound()
        return user

    def signup(self, name: str, email: str, password: str) -> str:
        """Register a new user and return a session token for it."""
        if self.get_user_by_email(email):
            raise DuplicateAccount()

        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            cart_data=empty_cart(self.settings.cart_size),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise DuplicateAccount() from None
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return issue_token(user.id, self.settings)

    def login(self, email: str, password: str) -> str:
        """Check credentials and return a session token."""
        user = self.get_user_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise InvalidCredentials()

        return issue_token(user.id, self.settings)

    def get_cart(self, identity: SessionIdentity) -> CartData:
        """Return the stored cart of the authenticated user."""
        return dict(self.get_user(identity).cart_data or {})
