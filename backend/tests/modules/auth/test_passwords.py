"""Tests for password hashing and Gravatar URLs."""

import hashlib

from modules.auth.passwords import hash_password, verify_password, gravatar_url


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1", rounds=4)
        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)

    def test_uses_requested_cost(self):
        assert hash_password("secret1", rounds=5).split("$")[2] == "05"

    def test_verify(self):
        hashed = hash_password("secret1", rounds=4)
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_verify_rejects_non_bcrypt_hash(self):
        assert not verify_password("secret1", "plain-text")

    def test_verify_rejects_overlong_password(self):
        hashed = hash_password("secret1", rounds=4)
        assert not verify_password("x" * 100, hashed)


class TestGravatarUrl:
    def test_url_format(self):
        digest = hashlib.md5(b"dev@example.com").hexdigest()
        assert gravatar_url("dev@example.com") == (
            f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"
        )

    def test_normalizes_email(self):
        assert gravatar_url("  Dev@Example.COM ") == gravatar_url("dev@example.com")
