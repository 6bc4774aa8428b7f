"""
Signup, signin and token guard behaviour over HTTP.
"""
import pytest

from tests.fakes import STRONG_PASSWORD
from tests.integration.api_helpers import signup_payload

pytestmark = pytest.mark.integration


class TestSignup:
    @pytest.mark.parametrize("principal", ["user", "admin"])
    def test_signup_created(self, client, principal):
        response = client.post(f"/{principal}/signup", json=signup_payload("new@example.com"))

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert "signed up" in body["message"]
        assert "password" not in body

    def test_duplicate_email_conflict(self, client):
        client.post("/user/signup", json=signup_payload("twice@example.com"))
        response = client.post("/user/signup", json=signup_payload("Twice@Example.com "))

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    def test_same_email_allowed_in_both_classes(self, client):
        user = client.post("/user/signup", json=signup_payload("both@example.com"))
        admin = client.post("/admin/signup", json=signup_payload("both@example.com"))

        assert user.status_code == 201
        assert admin.status_code == 201

    def test_invalid_body_lists_errors(self, client):
        payload = signup_payload("not-an-email")
        payload["password"] = "weak"

        response = client.post("/user/signup", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        fields = {error["field"] for error in body["errors"]}
        assert {"email", "password"} <= fields


class TestSignin:
    def test_signin_returns_token_and_profile(self, client):
        client.post("/admin/signup", json=signup_payload("prof@example.com", "Grace", "Hopper"))

        response = client.post("/admin/signin", json={"email": "PROF@example.com", "password": STRONG_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["profile"]["email"] == "prof@example.com"
        assert body["profile"]["firstName"] == "Grace"
        assert body["profile"]["lastName"] == "Hopper"
        assert "hashedPassword" not in body["profile"]

    def test_failures_are_indistinguishable(self, client):
        client.post("/user/signup", json=signup_payload("known@example.com"))

        unknown = client.post("/user/signin", json={"email": "ghost@example.com", "password": STRONG_PASSWORD})
        wrong = client.post("/user/signin", json={"email": "known@example.com", "password": "Wr0ng!Passw0rd"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_admin_account_cannot_sign_in_as_user(self, client):
        client.post("/admin/signup", json=signup_payload("only-admin@example.com"))

        response = client.post("/user/signin", json={"email": "only-admin@example.com", "password": STRONG_PASSWORD})

        assert response.status_code == 401


class TestTokenGuard:
    def test_missing_token_rejected_without_side_effect(self, client, admin_token):
        response = client.post("/admin/course", json={"title": "Sneaky", "price": 1})
        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

        courses = client.get("/admin/course/bulk", headers={"token": admin_token}).json()["courses"]
        assert courses == []

    def test_user_token_rejected_on_admin_route(self, client, user_token):
        response = client.get("/admin/course/bulk", headers={"token": user_token})
        assert response.status_code == 401

    def test_admin_token_rejected_on_user_route(self, client, admin_token):
        response = client.get("/user/purchases", headers={"token": admin_token})
        assert response.status_code == 401

    def test_garbage_token_rejected(self, client):
        response = client.get("/user/purchases", headers={"token": "not.a.jwt"})
        assert response.status_code == 401

    def test_bearer_header_accepted(self, client, user_token):
        response = client.get("/user/purchases", headers={"Authorization": f"Bearer {user_token}"})
        assert response.status_code == 200
