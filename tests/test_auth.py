from datetime import datetime, timedelta, timezone

from conftest import PASSWORD, TEACHER_EMAIL
from utils.security import decode_token, issue_token


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert "X-Latency-Ms" in res.headers


def test_login_issues_token_for_stored_teacher(client, test_settings):
    res = client.post("/api/auth/login", json={"email": TEACHER_EMAIL, "password": PASSWORD})
    assert res.status_code == 200
    body = res.json()
    assert body["nombre"] == "Ana Rojas"
    assert body["id"] == 1

    claims = decode_token(body["token"], test_settings)
    assert claims["id"] == 1
    assert claims["email"] == TEACHER_EMAIL


def test_wrong_password_and_unknown_email_look_the_same(client):
    wrong_password = client.post("/api/auth/login", json={"email": TEACHER_EMAIL, "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "nadie@x.com", "password": PASSWORD})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json()["error"] == unknown_email.json()["error"]
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_login_requires_both_fields(client):
    res = client.post("/api/auth/login", json={"email": TEACHER_EMAIL, "password": ""})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MISSING_CREDENTIALS"

    res = client.post("/api/auth/login", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MISSING_CREDENTIALS"


def test_verify_returns_identity(client, auth_headers):
    res = client.get("/api/auth/verify", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is True
    assert body["user"]["id"] == 1
    assert body["user"]["email"] == TEACHER_EMAIL


def test_verify_without_token_is_unauthenticated(client):
    res = client.get("/api/auth/verify")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


def test_verify_with_non_bearer_scheme_is_unauthenticated(client):
    res = client.get("/api/auth/verify", headers={"Authorization": "Basic dDp4"})
    assert res.status_code == 401


def test_tampered_token_is_rejected(client, auth_headers):
    token = auth_headers["Authorization"].split(" ", 1)[1]
    head, payload, signature = token.split(".")
    tampered = f"{head}.{payload}.{signature[::-1]}"

    res = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {tampered}"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


def test_expired_token_is_rejected(client, test_settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=9)
    token = issue_token(1, TEACHER_EMAIL, test_settings, now=issued)

    res = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


def test_token_for_removed_teacher_is_rejected(client, test_settings):
    token = issue_token(99, "borrado@x.com", test_settings)

    res = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "UNKNOWN_SUBJECT"


def test_login_without_body_is_missing_credentials(client):
    res = client.post("/api/auth/login")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MISSING_CREDENTIALS"


def test_verify_returns_issued_and_expiry_claims(client, auth_headers):
    user = client.get("/api/auth/verify", headers=auth_headers).json()["user"]
    assert user["exp"] - user["iat"] == 8 * 3600
