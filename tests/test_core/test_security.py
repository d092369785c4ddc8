"""Tests for token signing and password hashing."""

from booking_api.app.core import security
from booking_api.app.core.config import settings
from booking_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from booking_api.app.schemas.user import Role


def test_token_round_trip():
    token = create_access_token({"sub": "alice"})
    payload = decode_access_token(token)
    assert payload["sub"] == "alice"
    assert "exp" in payload


def test_expired_token_is_rejected(monkeypatch):
    token = create_access_token({"sub": "alice"}, expires_delta=10)
    now = security.time.time()
    monkeypatch.setattr(security.time, "time", lambda: now + 60)
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "alice"}).split(".")
    forged = create_access_token({"sub": "admin"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None


def test_token_signed_with_other_secret_is_rejected(monkeypatch):
    token = create_access_token({"sub": "alice"})
    monkeypatch.setattr(settings, "secret_key", "another-secret")
    assert decode_access_token(token) is None


def test_malformed_tokens_are_rejected():
    assert decode_access_token("") is None
    assert decode_access_token("a.b") is None
    assert decode_access_token("a.b.c") is None


def test_password_hashing():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert hash_password("s3cret") != hashed


def test_verify_password_with_corrupt_hash():
    assert verify_password("x", "not-a-hash") is False


def test_role_restriction():
    assert Role.USER.is_restricted
    assert not Role.ADMIN.is_restricted
