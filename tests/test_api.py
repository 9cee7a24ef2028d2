import pytest
from fastapi.testclient import TestClient

from api.main import app, get_validator
from models.settings import LoggingSettings, ValidatorSettings
from models.validation_model import InputValidator


@pytest.fixture
def client(tmp_path):
    validator = InputValidator(ValidatorSettings(logging=LoggingSettings(directory=str(tmp_path))))
    app.dependency_overrides[get_validator] = lambda: validator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_partial_address_rejection(client):
    resp = client.post("/validate/address", json={"value": "192.168.1.1/33"})

    assert resp.status_code == 200
    body = resp.json()
    assert body == {
        "valid": False,
        "message": "Invalid subnet",
        "kind": "invalid_subnet",
        "mode": "partial",
    }


def test_full_address_rejection(client):
    resp = client.post("/validate/address", json={"value": "192.168.1", "mode": "full"})

    body = resp.json()
    assert body["valid"] is False
    assert body["kind"] == "invalid_format"


def test_mac_partial_accepts_unfinished(client):
    resp = client.post("/validate/mac", json={"value": "AA-BB"})
    assert resp.json()["valid"] is True
    assert resp.json()["message"] == ""


def test_batch(client):
    resp = client.post(
        "/validate/batch",
        json={"values": ["10.0.0.1", "10.0.0.9-10.0.0.1"], "kind": "address", "mode": "partial"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert [d["valid"] for d in data] == [True, False]
    assert data[1]["error_kind"] == "range_order"


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/validate/address", {"value": "10.0.0.1", "mode": "eventually"}),
        ("/validate/address", {}),
        ("/validate/batch", {"values": ["10.0.0.1"], "kind": "fqdn"}),
    ],
)
def test_malformed_requests_are_422(client, path, payload):
    assert client.post(path, json=payload).status_code == 422
