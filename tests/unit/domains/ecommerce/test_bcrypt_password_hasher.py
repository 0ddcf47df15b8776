"""
Unit tests for the bcrypt password hasher.

Uses the minimum cost factor to keep the suite fast.
"""

import pytest

from storefront.domains.ecommerce.infrastructure.services import BcryptPasswordHasher

pytestmark = pytest.mark.unit


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.mark.asyncio
async def test_hash_and_compare(hasher):
    hashed = await hasher.hash("correct horse")

    assert hashed != "correct horse"
    assert hashed.startswith("$2b$04$")
    assert await hasher.compare("correct horse", hashed) is True
    assert await hasher.compare("wrong horse", hashed) is False


@pytest.mark.asyncio
async def test_hashes_are_salted(hasher):
    assert await hasher.hash("same") != await hasher.hash("same")


@pytest.mark.parametrize("plain,hashed", [("", "$2b$04$abc"), ("secret", ""), ("secret", None)])
def test_compare_empty_input_is_false(hasher, plain, hashed):
    assert hasher.compare_sync(plain, hashed) is False


def test_compare_malformed_hash_is_false(hasher):
    assert hasher.compare_sync("secret", "not-a-bcrypt-hash") is False
