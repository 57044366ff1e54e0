"""Unit tests for security/password.py"""

from jotter.security.password import hash_password, verify_password


def test_hash_and_verify_roundtrip():
    pwd = "StrongPassw0rd!"
    h = hash_password(pwd)
    assert h != pwd
    assert verify_password(pwd, h) is True
    assert verify_password("wrong", h) is False


def test_hashes_are_salted():
    assert hash_password("same-password") != hash_password("same-password")


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    h = hash_password(base + "a")
    assert verify_password(base + "a", h) is True
    assert verify_password(base + "b", h) is False


def test_malformed_hash_never_verifies():
    assert verify_password("anything", "not-a-hash") is False
