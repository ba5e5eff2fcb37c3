"""
END-TO-END TEST: HTTP boundary

Runs the real app (lifespan included) through FastAPI's TestClient:
1. Knowledge base and catalog are built on startup
2. Each advisory operation answers over HTTP
3. A critical symptom triggers an escalation notification
4. Triage never empties the recommendation list
"""
import threading

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from medadvisor.api.deps import get_db
from medadvisor.main import app
from medadvisor.services.dosage_advisor import INVALID_INPUT_MESSAGE
from medadvisor.services.notification_service import NotificationDispatcher


class RecordingSink:
    def __init__(self):
        self.received = []
        self._lock = threading.Lock()

    def __call__(self, notification):
        with self._lock:
            self.received.append(notification)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_recommend_medicines(client):
    resp = client.post("/recommendations/medicines", json={"symptoms": [" Headache ", "fever"]})
    assert resp.status_code == 200
    ids = [m["id"] for m in resp.json()]
    assert ids == ["M001", "M002", "M005"]


def test_null_symptoms_treated_as_empty(client):
    resp = client.post("/recommendations/medicines", json={"symptoms": None})
    assert resp.status_code == 200
    assert resp.json() == []

    resp = client.post("/recommendations/triage", json={})
    assert resp.json() == {"medical_attention_required": False, "critical_symptoms": []}


def test_consult_keeps_triage_and_recommendations_independent(client):
    resp = client.post("/recommendations/consult", json={"symptoms": ["chest pain", "headache", "itchy elbow"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["medical_attention_required"] is True
    assert body["critical_symptoms"] == ["chest pain"]
    assert [m["id"] for m in body["recommended_medicines"]] == ["M001", "M002", "M005"]
    assert body["unmatched_symptoms"] == ["itchy elbow"]
    assert "Seek emergency medical care immediately" in body["precautions"]
    assert body["specialists"]["Emergency Medicine"] == pytest.approx(1.0)


def test_critical_triage_sends_escalation(client):
    sink = RecordingSink()
    default_notifier = app.state.notifier
    app.state.notifier = NotificationDispatcher(max_workers=1, sink=sink)
    app.state.escalation_contact = "oncall@clinic.example"
    try:
        resp = client.post("/recommendations/triage", json={"symptoms": ["Seizure"]})
        assert resp.json() == {"medical_attention_required": True, "critical_symptoms": ["seizure"]}

        resp = client.post("/recommendations/triage", json={"symptoms": ["cough"]})
        assert resp.json()["medical_attention_required"] is False
    finally:
        app.state.notifier.shutdown(wait=True)
        app.state.notifier = default_notifier
        app.state.escalation_contact = ""

    assert len(sink.received) == 1
    assert sink.received[0].recipient == "oncall@clinic.example"
    assert "seizure" in sink.received[0].message


def test_precautions_and_specialists(client):
    resp = client.post("/recommendations/precautions", json={"symptoms": ["headache", "fever"]})
    precautions = resp.json()
    assert precautions[0] == "Get plenty of rest"
    assert len(precautions) == len(set(precautions))

    resp = client.post("/recommendations/specialists", json={"symptoms": ["headache", "fever"]})
    assert resp.json()["General Practitioner"] == pytest.approx(1.3)


def test_side_effects_and_interactions(client):
    resp = client.post("/recommendations/side-effects", json={"medicine_ids": ["M001", "nope"]})
    assert list(resp.json()) == ["M001"]

    resp = client.post("/recommendations/interactions", json={"medicine_ids": ["M005", "M015"]})
    report = resp.json()
    assert report["has_interactions"] is True
    assert report["interactions"][0]["severity"] == "major"

    resp = client.post("/recommendations/interactions", json={"medicine_ids": ["M005"]})
    assert resp.json() == {"interactions": [], "has_interactions": False}


def test_health_advice(client):
    assert client.get("/recommendations/advice/Cold").json()[0] == "Get plenty of rest"
    assert client.get("/recommendations/advice/unknown").json() == []


def test_dosage_bad_input_is_not_an_error(client):
    resp = client.get("/recommendations/dosage", params={"medicine_id": "X", "age": -1, "weight": 70})
    assert resp.status_code == 200
    assert resp.json()["recommendation"] == INVALID_INPUT_MESSAGE

    resp = client.get("/recommendations/dosage", params={"medicine_id": "M001", "age": 6, "weight": 20})
    assert "300 mg" in resp.json()["recommendation"]


def test_catalog_endpoints(client):
    resp = client.get("/medicines", params={"otc_only": True})
    assert resp.status_code == 200
    assert all(not m["requires_prescription"] for m in resp.json())

    resp = client.get("/medicines/M002")
    assert resp.json()["name"] == "Advil"

    resp = client.get("/medicines/M999")
    assert resp.status_code == 404

    resp = client.post("/medicines/resolve", json={"medicine_ids": ["M003", "M999", "M001"]})
    assert [m["id"] for m in resp.json()] == ["M003", "M001"]


def test_known_symptoms(client):
    symptoms = client.get("/recommendations/symptoms").json()
    assert "sore throat" in symptoms
    assert "chest pain" in symptoms


def test_comma_separated_symptom_text(client):
    resp = client.post("/recommendations/medicines", json={"text": "fever, Headache ,,"})
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == ["M001", "M002", "M005"]

    resp = client.post("/recommendations/triage", json={"text": "cough, chest pain"})
    assert resp.json()["critical_symptoms"] == ["chest pain"]


def test_stock_adjustment(client):
    before = client.get("/medicines/M006").json()["stock"]

    resp = client.post("/medicines/M006/stock", json={"delta": -2})
    assert resp.status_code == 200
    assert resp.json()["stock"] == before - 2

    resp = client.post("/medicines/M006/stock", json={"delta": -(before + 10)})
    assert resp.status_code == 400
    assert client.get("/medicines/M006").json()["stock"] == before - 2

    resp = client.post("/medicines/M999/stock", json={"delta": 1})
    assert resp.status_code == 404

    client.post("/medicines/M006/stock", json={"delta": 2})


class BrokenSession:
    """Session stand-in whose every query fails at the database."""

    def __init__(self):
        self.rolled_back = False

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    def rollback(self):
        self.rolled_back = True


def test_database_failure_returns_generic_500(client):
    session = BrokenSession()
    app.dependency_overrides[get_db] = lambda: session
    try:
        resp = client.post("/medicines/M001/stock", json={"delta": 1})
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert resp.status_code == 500
    assert "database is locked" not in resp.text
    assert session.rolled_back is True
