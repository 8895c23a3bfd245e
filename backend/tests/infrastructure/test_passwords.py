"""Tests for password hashing — pbkdf2_sha256 via passlib."""

from slate.infrastructure.passwords import hash_password, verify_password


def test_hash_is_not_the_plaintext():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert hashed.startswith("$pbkdf2-sha256$")


def test_verify_accepts_matching_password():
    assert verify_password("correct horse", hash_password("correct horse"))


def test_verify_rejects_wrong_password():
    assert not verify_password("wrong", hash_password("correct horse"))


def test_verify_rejects_garbage_hash():
    assert not verify_password("anything", "not-a-hash")
