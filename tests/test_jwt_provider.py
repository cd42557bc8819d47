import base64
import json
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from helpdesk.core.exceptions import InvalidOrExpiredTokenError
from helpdesk.entities.user import AuthContext, Role
from helpdesk.infrastructure.security.jwt_provider import JwtProvider

from conftest import TEST_SECRET


def test_access_token_round_trips_typed_claims(jwt_provider):
    issued = jwt_provider.issue_access_token(user_id=5, role=Role.STUDENT)

    assert jwt_provider.validate_access_token(issued.token) == AuthContext(subject_id=5, role=Role.STUDENT)


def test_access_token_claims_and_lifetime(jwt_provider):
    now = datetime(2026, 3, 1, 8, 30, 0, tzinfo=timezone.utc)
    issued = jwt_provider.issue_access_token(user_id=7, role=Role.ADMIN, now=now)

    header = jwt.get_unverified_header(issued.token)
    claims = jwt.decode(issued.token, TEST_SECRET, algorithms=["HS256"], options={"verify_exp": False})

    assert header["alg"] == "HS256"
    assert claims["sub"] == "7"
    assert claims["role"] == "Admin"
    assert claims["exp"] - claims["iat"] == 3600
    assert issued.expires_at - now == timedelta(hours=1)


def test_expires_at_matches_exp_claim(jwt_provider):
    now = datetime(2026, 3, 1, 8, 30, 0, 999_999, tzinfo=timezone.utc)
    issued = jwt_provider.issue_access_token(user_id=7, role=Role.ADMIN, now=now)

    claims = jwt.decode(issued.token, TEST_SECRET, algorithms=["HS256"], options={"verify_exp": False})

    assert issued.expires_at == datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    assert issued.expires_at.microsecond == 0


def test_tampered_payload_is_rejected(jwt_provider):
    token = jwt_provider.issue_access_token(user_id=5, role=Role.STUDENT).token
    header, payload, signature = token.split(".")

    claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])
    claims["role"] = "Admin"
    forged = base64.urlsafe_b64encode(json.dumps(claims, separators=(",", ":")).encode()).rstrip(b"=").decode()

    with pytest.raises(InvalidOrExpiredTokenError):
        jwt_provider.validate_access_token(f"{header}.{forged}.{signature}")


def test_token_signed_with_other_secret_is_rejected(jwt_provider):
    other = JwtProvider("another-secret-0123456789abcdefghij")
    token = other.issue_access_token(user_id=5, role=Role.STUDENT).token

    with pytest.raises(InvalidOrExpiredTokenError):
        jwt_provider.validate_access_token(token)


def test_expired_token_is_rejected(jwt_provider):
    past = datetime.now(tz=timezone.utc) - timedelta(hours=2)
    token = jwt_provider.issue_access_token(user_id=5, role=Role.STUDENT, now=past).token

    with pytest.raises(InvalidOrExpiredTokenError):
        jwt_provider.validate_access_token(token)


def test_unknown_role_is_rejected(jwt_provider):
    now = int(datetime.now(tz=timezone.utc).timestamp())
    token = jwt.encode(
        {"sub": "5", "role": "Staff", "iat": now, "exp": now + 60, "typ": "access"},
        TEST_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidOrExpiredTokenError):
        jwt_provider.validate_access_token(token)


def test_garbage_is_rejected(jwt_provider):
    with pytest.raises(InvalidOrExpiredTokenError):
        jwt_provider.validate_access_token("not.a.token")


def test_refresh_tokens_are_opaque_and_random():
    a = JwtProvider.issue_refresh_token()
    b = JwtProvider.issue_refresh_token()

    assert a != b
    assert len(base64.urlsafe_b64decode(a)) == 64
    assert a.count(".") == 0


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JwtProvider("")
