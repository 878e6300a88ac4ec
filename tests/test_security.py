from datetime import datetime, timedelta, timezone

import jwt
import pytest

from utils.exceptions import InvalidToken
from utils.security import decode_token, hash_password, issue_token, verify_password


def test_verify_password_matches_only_the_hashed_one():
    hashed = hash_password("password123", rounds=4)
    assert verify_password("password123", hashed)
    assert not verify_password("password456", hashed)


def test_verify_password_with_broken_hash_is_mismatch():
    assert verify_password("password123", "not-a-bcrypt-hash") is False


def test_token_carries_identity_and_eight_hour_expiry(test_settings):
    now = datetime.now(timezone.utc).replace(microsecond=0)
    token = issue_token(7, "t@x.com", test_settings, now=now)

    payload = decode_token(token, test_settings)
    assert payload["id"] == 7
    assert payload["email"] == "t@x.com"
    assert payload["exp"] - payload["iat"] == 8 * 3600


def test_token_rejected_after_expiry(test_settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=8, minutes=1)
    token = issue_token(7, "t@x.com", test_settings, now=issued)

    with pytest.raises(InvalidToken):
        decode_token(token, test_settings)


def test_token_still_valid_just_before_expiry(test_settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=7, minutes=59)
    token = issue_token(7, "t@x.com", test_settings, now=issued)

    assert decode_token(token, test_settings)["id"] == 7


def test_token_signed_with_other_secret_is_rejected(test_settings):
    forged = jwt.encode(
        {"id": 1, "email": "t@x.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "another-secret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        decode_token(forged, test_settings)


def test_token_without_teacher_id_is_rejected(test_settings):
    token = jwt.encode(
        {"email": "t@x.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        test_settings.JWT_SECRET,
        algorithm=test_settings.JWT_ALGORITHM,
    )
    with pytest.raises(InvalidToken):
        decode_token(token, test_settings)


def test_garbage_token_is_rejected(test_settings):
    with pytest.raises(InvalidToken):
        decode_token("abc.def.ghi", test_settings)
