"""Tests for password hashing and access tokens."""
import pytest

from estatebot.core.security import decode_token, hash_password, issue_token, verify_password


def test_password_hash_round_trip():
    stored = hash_password("s3cret!")
    assert stored.startswith("pbkdf2_sha256$")
    assert "s3cret!" not in stored
    assert verify_password("s3cret!", stored)
    assert not verify_password("wrong", stored)


def test_password_hash_is_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_rejects_unknown_formats():
    assert not verify_password("x", "c2VjcmV0")  # legacy base64 blob
    assert not verify_password("x", "md5$1$a$b")


def test_token_round_trip():
    claims = decode_token(issue_token("u1", "a@example.com", "admin"))
    assert claims["id"] == "u1"
    assert claims["email"] == "a@example.com"
    assert claims["role"] == "admin"
    assert "exp" in claims


def test_bad_token_is_anonymous():
    assert decode_token("not-a-token") is None
    tampered = issue_token("u1", "a@example.com", "user").rsplit(".", 1)[0] + ".forged-signature"
    assert decode_token(tampered) is None


@pytest.mark.parametrize("stored", [
    "pbkdf2_sha256$many$c2FsdA==$aGFzaA==",    # iteration count not a number
    "pbkdf2_sha256$0$c2FsdA==$aGFzaA==",       # zero iterations
    "pbkdf2_sha256$1000$not*base64$aGFzaA==",  # corrupt salt
    "pbkdf2_sha256$1000$c2FsdA==$%%%",         # corrupt hash
])
def test_verify_rejects_corrupt_records(stored):
    assert verify_password("anything", stored) is False
