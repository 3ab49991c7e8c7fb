"""Tests for the HTTP API using FastAPI's TestClient."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from emailseq.api.app import create_app
from emailseq.infrastructure.database.engine import create_db_engine, sqlite_url
from emailseq.infrastructure.repositories.sql import SqlSequenceRepository
from emailseq.services.sequence import SequenceService

ONBOARDING = {
    "name": "Onboarding",
    "openTrackingEnabled": True,
    "clickTrackingEnabled": False,
    "steps": [
        {"subject": "Welcome", "content": "Hi there"},
        {"subject": "Tips", "content": "Try this"},
    ],
}


def _create(client: TestClient, body: dict | None = None) -> int:
    response = client.post("/sequence", json=body or ONBOARDING)
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestHealth:
    def test_health(self, api_client: TestClient) -> None:
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestCreateSequence:
    def test_created(self, api_client: TestClient) -> None:
        response = api_client.post("/sequence", json=ONBOARDING)
        assert response.status_code == 201
        assert isinstance(response.json()["id"], int)

    def test_missing_name(self, api_client: TestClient) -> None:
        response = api_client.post("/sequence", json={**ONBOARDING, "name": ""})
        assert response.status_code == 400
        assert response.json() == {
            "code": "SEQUENCE_VALIDATION",
            "message": "sequence model is invalid: name is required",
        }

    def test_whitespace_name_is_blank(self, api_client: TestClient) -> None:
        response = api_client.post("/sequence", json={**ONBOARDING, "name": "   "})
        assert response.status_code == 400
        assert response.json()["message"] == "sequence model is invalid: name is required"

    def test_no_steps(self, api_client: TestClient) -> None:
        response = api_client.post("/sequence", json={"name": "Empty"})
        assert response.status_code == 400
        assert response.json()["message"] == "sequence model is invalid: steps are required"

    def test_invalid_step(self, api_client: TestClient) -> None:
        body = {"name": "x", "steps": [{"subject": "s", "content": " "}]}
        response = api_client.post("/sequence", json=body)
        assert response.status_code == 400
        assert response.json()["message"] == (
            "sequence model is invalid: step model is invalid: content is required"
        )

    def test_surrounding_whitespace_trimmed(self, api_client: TestClient) -> None:
        body = {"name": "  Padded  ", "steps": [{"subject": " S ", "content": " C "}]}
        seq_id = _create(api_client, body)
        fetched = api_client.get(f"/sequence/{seq_id}").json()
        assert fetched["name"] == "Padded"
        assert fetched["steps"][0]["subject"] == "S"
        assert fetched["steps"][0]["content"] == "C"

    def test_malformed_json(self, api_client: TestClient) -> None:
        response = api_client.post(
            "/sequence", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"

    def test_wrong_field_type(self, api_client: TestClient) -> None:
        response = api_client.post("/sequence", json={**ONBOARDING, "steps": "nope"})
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "BAD_REQUEST"
        assert "steps" in body["message"]


class TestGetSequence:
    def test_wire_shape(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        response = api_client.get(f"/sequence/{seq_id}")
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "name", "openTrackingEnabled", "clickTrackingEnabled", "steps"}
        assert body["id"] == seq_id
        assert body["openTrackingEnabled"] is True
        assert body["clickTrackingEnabled"] is False
        assert [s["subject"] for s in body["steps"]] == ["Welcome", "Tips"]
        assert set(body["steps"][0]) == {"id", "subject", "content"}

    def test_not_found(self, api_client: TestClient) -> None:
        response = api_client.get("/sequence/404")
        assert response.status_code == 404
        assert response.json() == {
            "code": "SEQUENCE_NOT_FOUND",
            "message": "No sequence found with ID: 404",
        }

    def test_non_numeric_id(self, api_client: TestClient) -> None:
        response = api_client.get("/sequence/abc")
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"

    def test_id_beyond_integer_range(self, api_client: TestClient) -> None:
        response = api_client.get("/sequence/100000000000000000000")
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"

    def test_negative_id(self, api_client: TestClient) -> None:
        response = api_client.get("/sequence/-1")
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"


class TestPatchSequence:
    def test_patch_flags(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        response = api_client.patch(
            f"/sequence/{seq_id}", json={"openTrackingEnabled": False, "clickTrackingEnabled": True}
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": seq_id,
            "fields_changed": ["open_tracking", "click_tracking"],
        }

        fetched = api_client.get(f"/sequence/{seq_id}").json()
        assert fetched["name"] == "Onboarding"
        assert fetched["openTrackingEnabled"] is False
        assert fetched["clickTrackingEnabled"] is True

    def test_patch_name_keeps_flags(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        api_client.patch(f"/sequence/{seq_id}", json={"name": "Renamed"})
        fetched = api_client.get(f"/sequence/{seq_id}").json()
        assert fetched["name"] == "Renamed"
        assert fetched["openTrackingEnabled"] is True

    def test_null_is_absent(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        response = api_client.patch(f"/sequence/{seq_id}", json={"name": None})
        assert response.status_code == 200
        assert response.json()["fields_changed"] == []

    def test_blank_name(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        response = api_client.patch(f"/sequence/{seq_id}", json={"name": "  "})
        assert response.status_code == 400
        assert response.json()["message"] == "sequence model is invalid: name cannot be empty"

    def test_id_zero(self, api_client: TestClient) -> None:
        response = api_client.patch("/sequence/0", json={"name": "x"})
        assert response.status_code == 400
        assert response.json()["message"] == "sequence model is invalid: id is required"

    def test_not_found(self, api_client: TestClient) -> None:
        response = api_client.patch("/sequence/999", json={"name": "x"})
        assert response.status_code == 404
        assert response.json()["code"] == "SEQUENCE_NOT_FOUND"


class TestUpdateStep:
    def test_update(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        step_id = api_client.get(f"/sequence/{seq_id}").json()["steps"][0]["id"]

        response = api_client.put(f"/step/{step_id}", json={"subject": "New", "content": "Body"})
        assert response.status_code == 200
        assert response.json() == {"id": step_id}

        step = api_client.get(f"/sequence/{seq_id}").json()["steps"][0]
        assert step == {"id": step_id, "subject": "New", "content": "Body"}

    def test_blank_subject(self, api_client: TestClient) -> None:
        response = api_client.put("/step/1", json={"subject": "", "content": "Body"})
        assert response.status_code == 400
        assert response.json() == {
            "code": "STEP_VALIDATION",
            "message": "step model is invalid: subject is required",
        }

    def test_id_zero(self, api_client: TestClient) -> None:
        response = api_client.put("/step/0", json={"subject": "s", "content": "c"})
        assert response.status_code == 400
        assert response.json()["message"] == "step model is invalid: id is required"

    def test_not_found(self, api_client: TestClient) -> None:
        response = api_client.put("/step/999", json={"subject": "s", "content": "c"})
        assert response.status_code == 404
        assert response.json() == {
            "code": "STEP_NOT_FOUND",
            "message": "No step found with ID: 999",
        }

    def test_id_beyond_integer_range(self, api_client: TestClient) -> None:
        response = api_client.put(
            "/step/100000000000000000000", json={"subject": "s", "content": "c"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"


class TestDeleteStep:
    def test_delete_is_idempotent(self, api_client: TestClient) -> None:
        seq_id = _create(api_client)
        step_id = api_client.get(f"/sequence/{seq_id}").json()["steps"][0]["id"]

        first = api_client.delete(f"/step/{step_id}")
        second = api_client.delete(f"/step/{step_id}")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 204

    def test_unknown_step(self, api_client: TestClient) -> None:
        assert api_client.delete("/step/12345").status_code == 204

    def test_id_beyond_integer_range(self, api_client: TestClient) -> None:
        response = api_client.delete("/step/100000000000000000000")
        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"


class TestStorageFailure:
    @pytest.fixture
    def broken_client(self, tmp_path: Path) -> TestClient:
        """App over a database with no tables."""
        engine = create_db_engine(sqlite_url(tmp_path / "empty.db"))
        return TestClient(create_app(SequenceService(SqlSequenceRepository(engine))))

    def test_get_returns_500(self, broken_client: TestClient) -> None:
        response = broken_client.get("/sequence/1")
        assert response.status_code == 500
        assert response.json() == {"code": "STORAGE_ERROR", "message": "failed to get sequence"}

    def test_delete_returns_500(self, broken_client: TestClient) -> None:
        response = broken_client.delete("/step/1")
        assert response.status_code == 500
        assert response.json()["code"] == "STORAGE_ERROR"
