"""Tests for the FastAPI surface."""

from fastapi.testclient import TestClient

from backend.app import main as api

client = TestClient(api.app)


def test_compute_endpoint():
    resp = client.post("/api/compute", json={"matrix": [["1", "2", "3"], [4, 5, 6.0]]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["rank"] == 2
    assert body["rref"]["display"] == [["1", "0", "-1"], ["0", "1", "2"]]
    assert body["null_space"]["dimension"] == 1
    assert body["summary"]["validation_status"] == "pass"
    assert body["operations"][0]["type"] == "swap"


def test_compute_without_operations():
    resp = client.post("/api/compute",
                       json={"matrix": [[1, 0], [0, 1]], "track_operations": False})
    assert resp.status_code == 200
    assert resp.json()["operations"] is None


def test_compute_rejects_large_matrix():
    resp = client.post("/api/compute", json={"matrix": [[1] * 6] * 6})
    assert resp.status_code == 400
    assert "5×5" in resp.json()["detail"]


def test_compute_rejects_bad_cell():
    resp = client.post("/api/compute", json={"matrix": [["1", "two"]]})
    assert resp.status_code == 400
    assert "position (1, 2)" in resp.json()["detail"]


def test_compute_rejects_flat_list():
    resp = client.post("/api/compute", json={"matrix": [1, 2, 3]})
    assert resp.status_code == 422


def test_compute_unexpected_error(monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(api, "compute_report", _boom)
    resp = client.post("/api/compute", json={"matrix": [[1]]})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Computation error: boom"


def test_examples_endpoint():
    resp = client.get("/api/examples")
    assert resp.status_code == 200
    names = [e["name"] for e in resp.json()["examples"]]
    assert "3×3 Identity" in names
