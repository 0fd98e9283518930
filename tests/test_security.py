import re
import time

import jwt

from stayhub.core.security import (
    decode_token,
    generate_idempotency_key,
    is_token_expired,
    is_valid_token_format,
    user_id_from_token,
)
from tests.conftest import make_token


def test_idempotency_key_format():
    key = generate_idempotency_key("payment", clock=lambda: 1704067200.123)

    assert re.fullmatch(r"payment_1704067200123_[0-9a-z]{9}", key)


def test_idempotency_keys_differ():
    keys = {generate_idempotency_key("booking") for _ in range(50)}

    assert len(keys) == 50


def test_token_format():
    assert is_valid_token_format(make_token())
    assert not is_valid_token_format("opaque-token")
    assert not is_valid_token_format("a..c")
    assert not is_valid_token_format(None)


def test_decode_ignores_signature():
    token = jwt.encode({"userId": 9}, "some-other-key", algorithm="HS256")

    assert decode_token(token) == {"userId": 9}


def test_decode_garbage_returns_none():
    assert decode_token("aaa.bbb.ccc") is None


def test_expiry():
    assert not is_token_expired(make_token(expires_in=60))
    assert is_token_expired(make_token(expires_in=-60))
    assert is_token_expired(make_token(expires_in=None))
    assert is_token_expired(make_token(expires_in=60), now=time.time() + 120)


def test_user_id_claims():
    assert user_id_from_token(make_token(user_id=7)) == 7
    assert user_id_from_token(jwt.encode({"sub": "12"}, "k", algorithm="HS256")) == 12
    assert user_id_from_token(jwt.encode({"sub": "ada"}, "k", algorithm="HS256")) is None
    assert user_id_from_token("opaque") is None


def test_lenient_expiry_keeps_tokens_without_expiry():
    assert not is_token_expired("opaque-session-token", strict=False)
    assert not is_token_expired(make_token(expires_in=None), strict=False)
    assert is_token_expired(make_token(expires_in=-60), strict=False)
