from __future__ import annotations

from datetime import timedelta

import pytest

from leadbook.auth.jwt import ACCESS_TOKEN, REFRESH_TOKEN, create_token_pair, decode_jwt, encode_jwt
from leadbook.auth.user_context import UserContext, from_claims, require_user
from leadbook.core.exceptions import AuthenticationError

SECRET = "test-secret"


def test_token_pair_carries_user_claims():
    pair = create_token_pair("user-1", secret=SECRET, email="owner@example.com")

    access = decode_jwt(pair.access_token, secret=SECRET, expected_use=ACCESS_TOKEN)
    refresh = decode_jwt(pair.refresh_token, secret=SECRET, expected_use=REFRESH_TOKEN)

    assert access["sub"] == "user-1"
    assert access["email"] == "owner@example.com"
    assert refresh["sub"] == "user-1"
    assert refresh["exp"] > access["exp"]
    assert pair.token_type == "bearer"


def test_token_use_is_enforced():
    pair = create_token_pair("user-1", secret=SECRET)

    with pytest.raises(AuthenticationError):
        decode_jwt(pair.refresh_token, secret=SECRET, expected_use=ACCESS_TOKEN)


def test_wrong_secret_is_rejected():
    token = encode_jwt({"sub": "user-1"}, secret=SECRET, ttl=timedelta(minutes=5))

    with pytest.raises(AuthenticationError):
        decode_jwt(token, secret="other-secret")


def test_expired_token_is_rejected():
    token = encode_jwt({"sub": "user-1"}, secret=SECRET, ttl=timedelta(minutes=-5))

    with pytest.raises(AuthenticationError):
        decode_jwt(token, secret=SECRET)
    assert decode_jwt(token, secret=SECRET, verify_exp=False)["sub"] == "user-1"


@pytest.mark.parametrize("token", ["", "abc", "a.b"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(AuthenticationError):
        decode_jwt(token, secret=SECRET)


def test_missing_secret_is_rejected():
    with pytest.raises(AuthenticationError):
        encode_jwt({"sub": "user-1"}, secret="", ttl=timedelta(minutes=5))


def test_user_context_from_claims():
    assert from_claims({"sub": "user-1", "email": "a@example.com"}) == UserContext("user-1", "a@example.com")
    assert from_claims({"sub": "user-1"}).email is None

    with pytest.raises(AuthenticationError):
        from_claims({"email": "a@example.com"})
    with pytest.raises(AuthenticationError):
        from_claims({"sub": "  "})


def test_require_user_rejects_missing_context():
    with pytest.raises(AuthenticationError):
        require_user(None)
    with pytest.raises(AuthenticationError):
        require_user(UserContext(user_id=""))
