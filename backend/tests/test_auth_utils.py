"""
Token issue/verify.

- decode_token(create_access_token(claims)) gives back the claims
- tampered, foreign-key, expired, missing or garbage tokens raise InvalidToken
"""

from datetime import timedelta

import jwt
import pytest

from app.utils.auth_utils import InvalidToken, create_access_token, decode_token
from thrive.core.config import settings


@pytest.mark.parametrize(
    "claims",
    [
        {"email": "alice@example.com"},
        {"email": "bob@example.com", "name": "Bob", "role": "provider"},
    ],
)
def test_roundtrip_returns_original_claims(claims):
    assert decode_token(create_access_token(claims)) == claims


def test_token_carries_seven_day_expiry():
    token = create_access_token({"email": "alice@example.com"})
    raw = jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])
    assert raw["exp"] - raw["iat"] == int(timedelta(days=7).total_seconds())


def test_caller_supplied_exp_is_replaced():
    token = create_access_token({"email": "alice@example.com", "exp": 1})
    assert decode_token(token) == {"email": "alice@example.com"}


def test_altered_signature_fails():
    token = create_access_token({"email": "alice@example.com"})
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    with pytest.raises(InvalidToken):
        decode_token(".".join([header, payload, flipped]))


def test_token_from_other_secret_fails():
    token = jwt.encode({"email": "alice@example.com"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_token(token)


def test_expired_token_fails():
    token = create_access_token({"email": "alice@example.com"}, expires_delta=timedelta(seconds=-10))
    with pytest.raises(InvalidToken):
        decode_token(token)


@pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
def test_missing_or_malformed_token_fails(token):
    with pytest.raises(InvalidToken):
        decode_token(token)
