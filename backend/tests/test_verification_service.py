"""Tests for verification services and HTTP routes."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from app.main import app
from app.schemas.verification import VerificationErrorRead
from app.services.target_store import TargetNameStore
from app.services.verification import (
    NO_TARGET_MESSAGE,
    NoTargetConfiguredError,
    compare_names,
    get_target_store,
    verify_candidate,
    verify_candidate_result,
)
from app.verification.engine import VerificationEngine


class _StaticTarget:
    def __init__(self, name: str | None) -> None:
        self.name = name

    def get_latest(self) -> str | None:
        return self.name


class VerificationServiceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = VerificationEngine()

    def test_missing_target_raises(self) -> None:
        with self.assertRaises(NoTargetConfiguredError) as ctx:
            verify_candidate(_StaticTarget(None), "Anyone", self.engine)

        self.assertEqual(str(ctx.exception), "No target name has been generated yet")

    def test_missing_target_as_error_payload(self) -> None:
        result = verify_candidate_result(_StaticTarget(None), "Anyone", self.engine)

        self.assertIsInstance(result, VerificationErrorRead)
        self.assertEqual(result.model_dump(), {"error": True, "message": NO_TARGET_MESSAGE})

    def test_verifies_against_stored_target(self) -> None:
        result = verify_candidate(_StaticTarget("Elizabeth Turner"), "Liz Turner", self.engine)

        self.assertTrue(result.match)
        self.assertEqual(result.target_name, "Elizabeth Turner")
        self.assertEqual(result.candidate_name, "Liz Turner")

    def test_compare_is_stateless(self) -> None:
        result = compare_names("Fatima Zahra", "Zahra Fatima", self.engine)

        self.assertFalse(result.match)
        self.assertEqual(result.confidence, 30)


class VerificationRouteTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.store = TargetNameStore(Path(self._tmp.name) / "latest_name.json")
        app.dependency_overrides[get_target_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def test_health(self) -> None:
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_verify_without_target_returns_error(self) -> None:
        response = self.client.post("/verify", json={"candidate": "Tlyer Bilha"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], {"error": True, "message": NO_TARGET_MESSAGE})

    def test_target_lifecycle_and_verify(self) -> None:
        self.assertIsNone(self.client.get("/target").json()["data"])

        put_response = self.client.put("/target", json={"name": "Tyler Bliha"})
        self.assertEqual(put_response.status_code, 200)
        self.assertEqual(put_response.json()["data"]["latest_name"], "Tyler Bliha")
        self.assertEqual(self.client.get("/target").json()["data"]["latest_name"], "Tyler Bliha")

        verify_response = self.client.post("/verify", json={"candidate": "Tlyer Bilha"})
        self.assertEqual(verify_response.status_code, 200)
        data = verify_response.json()["data"]
        self.assertTrue(data["match"])
        self.assertEqual(data["target_name"], "Tyler Bliha")
        self.assertEqual(
            set(data),
            {"match", "confidence", "reason", "target_name", "candidate_name"},
        )

        self.assertEqual(self.client.delete("/target").status_code, 204)
        self.assertIsNone(self.store.get_latest())

    def test_blank_candidate_is_rejected(self) -> None:
        self.store.save("Tyler Bliha")

        self.assertEqual(self.client.post("/verify", json={"candidate": ""}).status_code, 422)
        self.assertEqual(self.client.post("/verify", json={"candidate": "   "}).status_code, 422)

    def test_corrupt_store_returns_service_unavailable(self) -> None:
        self.store.path.write_text("{", encoding="utf-8")

        verify_response = self.client.post("/verify", json={"candidate": "Tlyer Bilha"})
        target_response = self.client.get("/target")

        self.assertEqual(verify_response.status_code, 503)
        self.assertIn("Cannot read target record", verify_response.json()["detail"])
        self.assertEqual(target_response.status_code, 503)

    def test_compare_route(self) -> None:
        response = self.client.post("/compare", json={"target": "Ali Hassan", "candidate": "Hassan Ali"})

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["data"]["match"])
        self.assertIsNone(self.store.get_latest())


if __name__ == "__main__":
    unittest.main()
