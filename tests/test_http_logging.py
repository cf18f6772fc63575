import os
import unittest

from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from petfoster.main import app


class HttpLoggingTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()

    def test_health_has_request_id_and_no_store(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers.get("cache-control"), "no-store")
        self.assertRegex(str(response.headers.get("x-request-id")), r"^[A-Za-z0-9._-]{1,128}$")

    def test_valid_request_id_is_preserved(self):
        response = self.client.get("/health", headers={"X-Request-ID": "release-check-2024_09_19"})
        self.assertEqual(response.headers.get("x-request-id"), "release-check-2024_09_19")

    def test_invalid_request_id_is_replaced(self):
        response = self.client.get("/health", headers={"X-Request-ID": "bad id with spaces"})
        self.assertNotEqual(response.headers.get("x-request-id"), "bad id with spaces")

    def test_request_line_is_logged(self):
        with self.assertLogs("petfoster.http", level="INFO") as logs:
            self.client.get("/health")
        self.assertTrue(any("GET /health status=200" in line for line in logs.output))

    def test_unauthorized_response_still_carries_request_id(self):
        response = self.client.get("/pets")
        self.assertEqual(response.status_code, 401)
        self.assertTrue(bool(response.headers.get("x-request-id")))


if __name__ == "__main__":
    unittest.main()
