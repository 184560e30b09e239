"""Token service and account API tests."""

import pytest
from jose import jwt

from src.config import get_settings
from src.exceptions import DuplicateAccount, InvalidToken
from src.models.user import User
from src.services.account_service import AccountService
from src.services.auth import issue_token, verify_token


def test_issue_token_carries_user_claim():
    """Test that tokens carry {"user": {"id": ...}} and an expiry."""
    settings = get_settings()
    token = issue_token(7)
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert payload["user"] == {"id": 7}
    assert "exp" in payload


def test_verify_token_round_trip():
    """Test that a fresh token verifies to the same identity."""
    assert verify_token(issue_token(42)).id == 42


def test_verify_expired_token():
    """Test that an expired token fails verification."""
    expired = get_settings().model_copy(update={"jwt_expiration_minutes": -1})
    token = issue_token(42, expired)
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_verify_token_wrong_secret():
    """Test that a token signed with another secret fails verification."""
    other = get_settings().model_copy(update={"jwt_secret": "someone-else"})
    with pytest.raises(InvalidToken):
        verify_token(issue_token(42, other))


def test_verify_token_without_user_claim():
    """Test that a validly signed token without the identity claim is rejected."""
    settings = get_settings()
    token = jwt.encode({"sub": "42"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_verify_malformed_token():
    with pytest.raises(InvalidToken):
        verify_token("not-a-token")


def test_signup_creates_zeroed_cart(client, db):
    """Test that signup initializes 300 zeroed cart slots."""
    response = client.post(
        "/signup",
        json={"username": "Ada", "email": "ada@example.com", "password": "secret"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert verify_token(data["token"])

    user = db.query(User).filter(User.email == "ada@example.com").one()
    assert user.name == "Ada"
    assert len(user.cart_data) == 300
    assert set(user.cart_data) == {str(i) for i in range(300)}
    assert all(quantity == 0 for quantity in user.cart_data.values())


def test_signup_hashes_password(client, db):
    """Test that the stored password is not the plaintext."""
    client.post(
        "/signup",
        json={"username": "Ada", "email": "ada@example.com", "password": "secret"},
    )
    user = db.query(User).filter(User.email == "ada@example.com").one()
    assert user.password_hash != "secret"


def test_signup_duplicate_email(client, db, auth_headers):
    """Test registration with duplicate email fails without a second record."""
    response = client.post(
        "/signup",
        json={"username": "Again", "email": auth_headers.email, "password": "other"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "User already exists"}
    assert db.query(User).filter(User.email == auth_headers.email).count() == 1


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert verify_token(data["token"]).id == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password issues no token."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "wrongpass"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid Credentials"}


def test_login_unknown_email(client):
    """Test login for an email nobody registered."""
    response = client.post("/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert response.status_code == 400
    assert "token" not in response.json()


def test_signup_email_race_maps_to_duplicate(db, monkeypatch):
    """Test that losing the unique-email race still reports a duplicate account."""
    accounts = AccountService(db)
    accounts.signup("First", "race@example.com", "secret")

    monkeypatch.setattr(accounts, "get_user_by_email", lambda email: None)
    with pytest.raises(DuplicateAccount):
        accounts.signup("Second", "race@example.com", "secret")
    assert db.query(User).filter(User.email == "race@example.com").count() == 1
