"""Test the demo API."""
from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_demos():
    response = client.get("/api/demos", params={"pattern": "observer"})
    assert response.status_code == 200
    assert [d["variant"] for d in response.json()] == ["without", "with"]


def test_get_demo_not_found():
    response = client.get("/api/demos/visitor/with")
    assert response.status_code == 404


def test_run_demo_returns_transcript():
    response = client.post("/api/demos/decorator/with")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Stacked mixer decorators"
    assert "Added more ice: Whiskey, Ice, Coke, Lime, Ice = $6.50" in body["transcript"]


def test_run_demo_with_inputs():
    response = client.post(
        "/api/demos/abstract_factory/with", json={"region": "india", "channel": "whatsapp"}
    )
    assert response.status_code == 200
    assert "   [IndianWhatsApp] Sent WhatsApp OTP: 847291" in response.json()["transcript"]


def test_run_demo_invalid_selector():
    response = client.post("/api/demos/abstract_factory/with", json={"region": "mars"})
    assert response.status_code == 422
    assert "Unknown region" in response.json()["detail"]


def test_run_unknown_demo():
    response = client.post("/api/demos/strategy/sideways")
    assert response.status_code == 404


def test_run_demo_rejects_unknown_fields():
    response = client.post("/api/demos/simple_factory/with", json={"chanel": "email"})
    assert response.status_code == 422
