# =============================================================================
# tests/test_auth_api.py - Registration, Login & Approval Tests
# =============================================================================
# Run with: pytest tests/test_auth_api.py -v
# =============================================================================

import time

import pytest

from app.auth.tokens import create_session_token, decode_session_token
from app.config import settings
from lib.passwords import verify_password
from tests.conftest import TEST_PASSWORD, auth_headers, user_row

REGISTRATION = {
    "username": "new.user@example.com",
    "password": "s3cret-pass",
    "first_name": "Sadia",
    "last_name": "Islam",
    "id_type": "nid",
    "id_number": "1990123456789",
    "building": "7",
    "street": "Lake Road",
    "thana": "Gulshan",
    "city": "Dhaka",
    "postal_code": "1212",
    "country": "Bangladesh",
    "mobile": "01711111111",
}


class TestRegister:

    def test_register_creates_pending_approval(self, client, fake_db):
        response = client.post("/api/auth/register", json=REGISTRATION)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Registration submitted for approval"

        pending = fake_db.get("pending_approvals", body["id"])
        assert pending["role"] == "citizen"
        assert pending["floor"] is None
        assert pending["password"] != REGISTRATION["password"]
        assert verify_password(REGISTRATION["password"], pending["password"])
        assert fake_db.rows("users") == []

    @pytest.mark.parametrize("field,message", [
        ("username", "Email already exists"),
        ("mobile", "Mobile already exists"),
        ("id_number", "ID number already exists"),
    ])
    def test_duplicate_of_existing_user(self, client, fake_db, citizen, field, message):
        response = client.post("/api/auth/register", json={**REGISTRATION, field: citizen[field]})

        assert response.status_code == 409
        assert response.json()["detail"] == message

    def test_duplicate_of_pending_registration(self, client):
        client.post("/api/auth/register", json=REGISTRATION)

        response = client.post(
            "/api/auth/register",
            json={**REGISTRATION, "username": "other@example.com", "id_number": "X-1"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Mobile already exists"

    def test_missing_field_is_rejected(self, client):
        payload = {k: v for k, v in REGISTRATION.items() if k != "thana"}

        assert client.post("/api/auth/register", json=payload).status_code == 422

    def test_invalid_id_type_is_rejected(self, client):
        response = client.post("/api/auth/register", json={**REGISTRATION, "id_type": "passport"})

        assert response.status_code == 422


class TestLogin:

    def test_login_sets_session_cookie(self, client, citizen):
        response = client.post(
            "/api/auth/login",
            json={"username": citizen["username"], "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": citizen["id"],
            "username": citizen["username"],
            "role": "citizen",
        }
        assert settings.SESSION_COOKIE_NAME in response.cookies
        assert "httponly" in response.headers["set-cookie"].lower()

        # The cookie alone authenticates follow-up requests
        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["username"] == citizen["username"]
        assert "password" not in me.json()

    def test_wrong_password(self, client, citizen):
        response = client.post(
            "/api/auth/login", json={"username": citizen["username"], "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_unknown_user(self, client, fake_db):
        response = client.post(
            "/api/auth/login", json={"username": "ghost@example.com", "password": "x"}
        )

        assert response.status_code == 401

    def test_role_mismatch_is_forbidden(self, client, citizen):
        response = client.post(
            "/api/auth/login",
            json={"username": citizen["username"], "password": TEST_PASSWORD, "role": "governmental"},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid role for this account"

    def test_matching_role(self, client, official):
        response = client.post(
            "/api/auth/login",
            json={"username": official["username"], "password": TEST_PASSWORD, "role": "governmental"},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "governmental"

    def test_logout_clears_cookie(self, client, citizen):
        client.post("/api/auth/login", json={"username": citizen["username"], "password": TEST_PASSWORD})

        response = client.post("/api/auth/logout")

        assert response.json() == {"ok": True}
        assert client.get("/api/auth/me").status_code == 401


class TestMe:

    def test_me_requires_login(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_me_with_bearer_token(self, client, citizen):
        response = client.get("/api/auth/me", headers=auth_headers(citizen))

        assert response.status_code == 200
        assert response.json()["thana"] == "Dhanmondi"

    def test_me_for_deleted_user(self, client, citizen, fake_db):
        headers = auth_headers(citizen)
        fake_db.tables["users"] = []

        assert client.get("/api/auth/me", headers=headers).status_code == 401

    def test_expired_token(self, client, citizen):
        token = create_session_token(citizen, expires_in=-10)

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_claims(self, citizen):
        payload = decode_session_token(create_session_token(citizen))

        assert payload.sub == citizen["id"]
        assert payload.role.value == "citizen"
        assert payload.exp > time.time()


class TestApprovals:

    def test_approve_moves_registration_to_users(self, client, fake_db, official):
        pending_id = client.post("/api/auth/register", json=REGISTRATION).json()["id"]
        headers = auth_headers(official)

        listing = client.get("/api/approvals", headers=headers)
        assert [p["id"] for p in listing.json()] == [pending_id]
        assert "password" not in listing.json()[0]

        response = client.post(f"/api/approvals/{pending_id}/approve", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Approved"}
        assert fake_db.rows("pending_approvals") == []

        login = client.post(
            "/api/auth/login",
            json={"username": REGISTRATION["username"], "password": REGISTRATION["password"]},
        )
        assert login.status_code == 200

    def test_approve_missing_is_404(self, official_client):
        response = official_client.post(
            "/api/approvals/00000000-0000-0000-0000-000000000000/approve"
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Not found"

    def test_approve_rechecks_users(self, official_client, fake_db):
        pending = fake_db.add("pending_approvals", user_row("late@example.com", mobile="0199"))
        fake_db.add("users", user_row("first@example.com", mobile="0199"))

        response = official_client.post(f"/api/approvals/{pending['id']}/approve")

        assert response.status_code == 409
        assert response.json()["detail"] == "Mobile already exists"
        assert len(fake_db.rows("pending_approvals")) == 1

    def test_reject_deletes_registration(self, official_client, fake_db):
        pending = fake_db.add("pending_approvals", user_row("nope@example.com"))

        response = official_client.delete(f"/api/approvals/{pending['id']}")

        assert response.json() == {"message": "Deleted"}
        assert fake_db.rows("pending_approvals") == []

    def test_citizen_cannot_review(self, citizen_client):
        assert citizen_client.get("/api/approvals").status_code == 403
