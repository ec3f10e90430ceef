"""Tests for access tokens and password hashing."""

from jose import jwt

from enrollment_approvals.core.config import settings
from enrollment_approvals.core.security import hash_password, verify_and_maybe_upgrade, verify_password
from enrollment_approvals.core.tokens import create_access_token, decode_access


class TestAccessToken:
    def test_roundtrip_claims(self):
        payload = decode_access(create_access_token(sub="admin@test.local", role="Administrador"))

        assert payload["sub"] == "admin@test.local"
        assert payload["role"] == "Administrador"
        assert payload["type"] == "access"

    def test_expired_token_is_rejected(self):
        token = create_access_token(sub="a@test.local", role="Administrador", expires_minutes=-1)

        assert decode_access(token) is None

    def test_garbage_token(self):
        assert decode_access("not-a-jwt") is None

    def test_wrong_type_is_rejected(self):
        token = jwt.encode({"type": "refresh", "sub": "a@test.local"}, settings.SECRET_KEY,
                           algorithm=settings.ALGORITHM)

        assert decode_access(token) is None


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("s3nha-forte")

        assert hashed != "s3nha-forte"
        assert verify_password("s3nha-forte", hashed)
        assert not verify_password("errada", hashed)

    def test_verify_and_maybe_upgrade(self):
        ok, new_hash = verify_and_maybe_upgrade("s3nha-forte", hash_password("s3nha-forte"))

        assert ok is True
        assert new_hash is None

        ok, new_hash = verify_and_maybe_upgrade("errada", hash_password("s3nha-forte"))
        assert (ok, new_hash) == (False, None)
