from datetime import timedelta
from unittest import mock

from tests.api.base import *  # noqa: F401,F403

from petfoster.core.config import settings
from petfoster.core.security import decode_access_token, verify_password


class AuthApiTests(ApiTestBase):
    def _register(self, email="anna@example.com", password="pass-123"):
        return self.client.post(
            "/auth/register",
            json={"email": email, "password": password, "name": "Anna", "address": "Main st. 1", "phone": "0700"},
        )

    def test_register_creates_user_and_client(self):
        response = self._register()
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["email"], "anna@example.com")
        self.assertEqual(body["name"], "Anna")
        self.assertNotIn("password", body)
        self.assertNotIn("search_vector", body)

        with self.SessionLocal() as db:
            user = db.query(AuthUser).filter(AuthUser.email == "anna@example.com").one()
            self.assertNotEqual(user.password, "pass-123")
            self.assertTrue(verify_password("pass-123", user.password))
            client = db.query(Client).filter(Client.user_id == user.id).one()
            self.assertEqual(client.description, "Anna (0700)")

    def test_register_rejects_duplicate_email(self):
        self.assertEqual(self._register().status_code, 200)
        response = self._register(email="ANNA@example.com")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "User Already Exists")

    def test_register_race_on_unique_email_returns_400(self):
        self.assertEqual(self._register().status_code, 200)
        with mock.patch("petfoster.services.accounts.get_user_by_email", return_value=None):
            response = self._register()
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "User Already Exists")
        with self.SessionLocal() as db:
            self.assertEqual(db.query(AuthUser).count(), 1)
            self.assertEqual(db.query(Client).count(), 1)

    def test_login_returns_token_with_email_claim(self):
        self._register()
        response = self.client.post("/auth/login", json={"email": "anna@example.com", "password": "pass-123"})
        self.assertEqual(response.status_code, 200)
        token = response.json()["access_token"]
        claims = decode_access_token(token)
        self.assertEqual(claims["email"], "anna@example.com")
        self.assertEqual(claims["exp"] - claims["iat"], settings.JWT_TTL_MINUTES * 60)

    def test_login_rejects_wrong_password_and_unknown_user(self):
        self._register()
        wrong = self.client.post("/auth/login", json={"email": "anna@example.com", "password": "nope"})
        self.assertEqual(wrong.status_code, 401)
        unknown = self.client.post("/auth/login", json={"email": "ghost@example.com", "password": "pass-123"})
        self.assertEqual(unknown.status_code, 401)

    def test_protected_routes_require_bearer_token(self):
        for path in ["/users", "/pets", "/clients", "/foster", "/pets/1"]:
            response = self.client.get(path)
            self.assertEqual(response.status_code, 401, path)

        response = self.client.get("/pets", headers={"Authorization": "Bearer not-a-token"})
        self.assertEqual(response.status_code, 401)

        response = self.client.get("/pets", headers={"Authorization": "Basic abc"})
        self.assertEqual(response.status_code, 401)

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "1", "email": "a@example.com"}, timedelta(minutes=-5))
        response = self.client.get("/pets", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)

    def test_root_and_health_are_public(self):
        self.assertEqual(self.client.get("/").json()["status"], "ok")
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_user_crud_and_query(self):
        self._register()
        self._register(email="bob@example.com")
        headers = self._auth_headers()

        listed = self.client.get("/users", params={"email": "bob@example.com"}, headers=headers)
        self.assertEqual(listed.status_code, 200)
        self.assertEqual([u["email"] for u in listed.json()], ["bob@example.com"])
        user_id = listed.json()[0]["id"]

        patched = self.client.patch(f"/users/{user_id}", json={"address": "Second st. 2"}, headers=headers)
        self.assertEqual(patched.status_code, 200)
        self.assertEqual(patched.json()["address"], "Second st. 2")
        self.assertEqual(patched.json()["name"], "Anna")

        rejected = self.client.get("/users", params={"password": "x"}, headers=headers)
        self.assertEqual(rejected.status_code, 400)
        self.assertEqual(rejected.json()["error_code"], "InvalidFilterField")

        self.assertEqual(self.client.get("/users/999", headers=headers).status_code, 404)

    def test_order_by_non_filterable_field_is_ignored(self):
        self._register(password="zzz-999")
        self._register(email="bob@example.com", password="aaa-111")
        headers = self._auth_headers()

        by_id = self.client.get("/users", params={"order": "id"}, headers=headers).json()
        for order in ["password", "password__desc"]:
            response = self.client.get("/users", params={"order": order}, headers=headers)
            self.assertEqual(response.status_code, 200)
            self.assertEqual([u["id"] for u in response.json()], [u["id"] for u in by_id], order)

        by_email = self.client.get("/users", params={"order": "email__desc"}, headers=headers).json()
        self.assertEqual([u["email"] for u in by_email], ["bob@example.com", "anna@example.com"])


if __name__ == "__main__":
    unittest.main()
