"""Credential store, token service and settings tests."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt
from pydantic import ValidationError

from artzy.config import Settings, get_settings
from artzy.services.auth import (
    TokenPurpose,
    create_reset_token,
    create_session_token,
    create_token,
    decode_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted_bcrypt():
    """Hashes use bcrypt with 10 rounds and never equal the plaintext."""
    first = get_password_hash("s3cret-pass")
    second = get_password_hash("s3cret-pass")
    assert first.startswith("$2b$10$")
    assert first != second
    assert "s3cret-pass" not in first


def test_verify_password():
    """Test matching and mismatching passwords."""
    hashed = get_password_hash("s3cret-pass")
    assert verify_password("s3cret-pass", hashed) is True
    assert verify_password("wrong-pass", hashed) is False


def test_verify_password_malformed_hash():
    """A malformed stored hash is a mismatch, not an exception."""
    assert verify_password("anything", "not-a-bcrypt-hash") is False
    assert verify_password("anything", "") is False


def test_session_token_round_trip():
    """Test a session token decodes to its user id."""
    token = create_session_token(42)
    assert decode_token(token) == 42
    assert decode_token(token, TokenPurpose.SESSION) == 42


def test_token_purposes_do_not_mix():
    """Reset tokens are not session tokens and vice versa."""
    assert decode_token(create_reset_token(7), TokenPurpose.SESSION) is None
    assert decode_token(create_session_token(7), TokenPurpose.RESET) is None
    assert decode_token(create_reset_token(7), TokenPurpose.RESET) == 7


def test_token_lifetimes():
    """Session tokens last seven days, reset tokens fifteen minutes."""
    secret = get_settings().jwt_secret
    now = datetime.now(UTC).timestamp()

    session_claims = jwt.decode(create_session_token(1), secret, algorithms=["HS256"])
    reset_claims = jwt.decode(create_reset_token(1), secret, algorithms=["HS256"])

    assert session_claims["exp"] - now == pytest.approx(7 * 24 * 3600, abs=60)
    assert reset_claims["exp"] - now == pytest.approx(15 * 60, abs=60)
    assert session_claims["sub"] == "1"


def test_expired_token_is_invalid():
    """Test an expired token."""
    token = create_token(3, TokenPurpose.SESSION, timedelta(minutes=-1))
    assert decode_token(token) is None


def test_tampered_and_malformed_tokens_are_invalid():
    """Bad signatures and garbage both give the same single failure."""
    foreign = jwt.encode(
        {"sub": "3", "type": "session", "exp": datetime.now(UTC) + timedelta(days=1)},
        "some-other-secret",
        algorithm="HS256",
    )
    assert decode_token(foreign) is None
    assert decode_token("garbage") is None
    assert decode_token("") is None

    token = create_session_token(3)
    header, payload, signature = token.split(".")
    flipped = "A" if signature[0] != "A" else "B"
    assert decode_token(f"{header}.{payload}.{flipped}{signature[1:]}") is None


def test_token_without_numeric_subject_is_invalid():
    """Test a correctly signed token whose subject is not a user id."""
    token = jwt.encode(
        {"sub": "alice", "type": "session", "exp": datetime.now(UTC) + timedelta(days=1)},
        get_settings().jwt_secret,
        algorithm="HS256",
    )
    assert decode_token(token) is None


def test_settings_require_jwt_secret(monkeypatch):
    """Startup fails when no signing secret is configured."""
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("JWT_SECRET", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_production_settings_validation(monkeypatch):
    """Production rejects short secrets and localhost databases."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("JWT_SECRET", "short")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db.internal:5432/artzy")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("JWT_SECRET", "x" * 40)
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/artzy")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db.internal:5432/artzy")
    assert Settings(_env_file=None).is_production


def test_default_database_url_names_installed_driver(monkeypatch):
    """The default URL pins the psycopg2 driver declared in the dependencies."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert Settings(_env_file=None).database_url.startswith("postgresql+psycopg2://")
