"""
Credential hasher tests — round-trip, salt uniqueness and failure handling.
"""
import pytest

from blog_api.errors import InternalError
from blog_api.security import PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


def test_verify_accepts_original_password(hasher: PasswordHasher):
    hashed = hasher.hash("longenough1")
    assert hasher.verify("longenough1", hashed) is True


def test_verify_rejects_wrong_password(hasher: PasswordHasher):
    hashed = hasher.hash("longenough1")
    assert hasher.verify("longenough2", hashed) is False


def test_same_password_hashes_differently(hasher: PasswordHasher):
    """A fresh salt per call means no two hashes of one password are equal."""
    first = hasher.hash("longenough1")
    second = hasher.hash("longenough1")
    assert first != second
    assert hasher.verify("longenough1", first)
    assert hasher.verify("longenough1", second)


def test_hash_is_self_describing(hasher: PasswordHasher):
    hashed = hasher.hash("longenough1")
    assert hashed.startswith("$2b$04$")
    assert "longenough1" not in hashed


def test_verify_does_not_depend_on_hasher_cost():
    """Cost and salt are read from the stored hash, not the hasher instance."""
    hashed = PasswordHasher(rounds=5).hash("longenough1")
    assert PasswordHasher(rounds=4).verify("longenough1", hashed) is True


@pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short"])
def test_malformed_hash_raises_internal_error(hasher: PasswordHasher, bad_hash: str):
    with pytest.raises(InternalError):
        hasher.verify("longenough1", bad_hash)


def test_unicode_password_round_trip(hasher: PasswordHasher):
    hashed = hasher.hash("pässwörd-ünïcode")
    assert hasher.verify("pässwörd-ünïcode", hashed)
    assert not hasher.verify("passwort-unicode", hashed)
