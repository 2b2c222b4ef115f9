import pytest
import requests
from fastapi.testclient import TestClient

from api.app import app
from api.services import generate_service


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class FakeResponse:
    def __init__(self, payload=None, error: Exception | None = None):
        self._payload = payload
        self._error = error

    def json(self):
        if self._error is not None:
            raise self._error
        return self._payload


def install_fake_session(monkeypatch: pytest.MonkeyPatch, response=None, error=None):
    calls = []

    class FakeSession:
        def __enter__(self):
            return self

        def __exit__(self, *exc_info):
            calls.append("closed")
            return None

        def post(self, url, params=None, json=None, timeout=None):
            calls.append({"url": url, "params": params, "json": json, "timeout": timeout})
            if error is not None:
                raise error
            return response

    monkeypatch.setattr(generate_service.requests, "Session", FakeSession)
    return calls


def test_index_lists_endpoints(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "/api/quiz" in response.json()["endpoints"]


def test_get_quiz(client: TestClient) -> None:
    response = client.get("/api/quiz")
    assert response.status_code == 200
    payload = response.json()
    assert len(payload["items"]) == 30
    assert payload["totalQuestions"] == 12
    assert payload["tolerances"]["cao2"] == 0.5
    first = payload["items"][0]
    assert first["type"] == "caseText"
    assert first["phase"] == "normal"


def test_get_item(client: TestClient) -> None:
    response = client.get("/api/quiz/items/1")
    assert response.status_code == 200
    payload = response.json()
    assert payload["type"] == "calc"
    assert payload["fields"] == [{"name": "pao2", "label": "PAO₂ (mmHg)", "tolerance": 5.0}]

    mc = client.get("/api/quiz/items/16").json()
    assert mc["type"] == "mc"
    assert mc["options"][0]["id"] == 0


@pytest.mark.parametrize("path", ["/api/quiz/items/30", "/api/quiz/items/-1", "/api/quiz/items/99/formula"])
def test_unknown_item_is_404(client: TestClient, path: str) -> None:
    response = client.get(path)
    assert response.status_code == 404
    assert response.json()["detail"] == "Quiz item not found"


def test_item_context(client: TestClient) -> None:
    response = client.get("/api/quiz/items/1/context")
    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == 1
    assert payload["values"]["FiO2"] == 0.21
    assert payload["values"]["Hb"] == 15


def test_item_formula(client: TestClient) -> None:
    response = client.get("/api/quiz/items/3/formula")
    assert response.status_code == 200
    payload = response.json()
    assert payload["field"] == "shunt"
    assert payload["result"] == "≈ 3.8 %"
    assert payload["cao2Source"] == "previous_question"


def test_formula_for_case_text_is_rejected(client: TestClient) -> None:
    response = client.get("/api/quiz/items/0/formula")
    assert response.status_code == 400


def test_grade(client: TestClient) -> None:
    response = client.post(
        "/api/quiz/grade",
        json={"answers": {"1": {"pao2": "100"}, "16": "2", "17": "0"}},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["score"] == 2
    assert payload["total"] == 12
    assert payload["feedback"]["1"] == "correct"
    assert payload["feedback"]["16"] == "correct"
    assert payload["feedback"]["17"] == "incorrect"
    assert payload["feedback"]["2"] == "incorrect"
    assert "0" not in payload["feedback"]


def test_grade_treats_null_and_odd_answers_as_incorrect(client: TestClient) -> None:
    response = client.post(
        "/api/quiz/grade",
        json={"answers": {"1": {"pao2": None}, "2": ["20.2"], "16": None, "17": {"choice": 2}}},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["score"] == 0
    assert payload["total"] == 12
    for index in ("1", "2", "16", "17"):
        assert payload["feedback"][index] == "incorrect"


def test_grade_accepts_decimal_comma(client: TestClient) -> None:
    response = client.post("/api/quiz/grade", json={"answers": {"2": {"cao2": "20,4"}}})
    assert response.json()["feedback"]["2"] == "correct"


def test_phases(client: TestClient) -> None:
    response = client.get("/api/phases")
    assert response.status_code == 200
    ids = [phase["id"] for phase in response.json()]
    assert ids == ["normal", "ards", "shock", "intervention", "acidosis", "ecmo"]

    shock = client.get("/api/phases/SHOCK").json()
    assert shock["button"] == "Phase 3: Bleeding"
    assert set(shock["nodes"]) == {"do2", "qt", "cao2", "vo2", "cvo2"}

    missing = client.get("/api/phases/hypoxia")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Phase not found"


def test_cheat_sheet(client: TestClient) -> None:
    payload = client.get("/api/cheatsheet").json()
    assert payload["formulas"][0]["symbol"] == "PAO₂"
    assert any(entry["symbol"] == "Qs/Qt" for entry in payload["legend"])


def test_generate_returns_text(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = install_fake_session(
        monkeypatch,
        response=FakeResponse(
            {"candidates": [{"content": {"parts": [{"text": "Hallo "}, {"text": "Welt"}]}}]}
        ),
    )
    response = client.post("/api/generate", json={"prompt": "Erkläre den Shunt"})
    assert response.status_code == 200
    assert response.json() == {"text": "Hallo Welt"}
    assert calls[0]["url"].endswith(":generateContent")
    assert calls[0]["json"]["contents"][0]["parts"][0]["text"] == "Erkläre den Shunt"
    assert calls[-1] == "closed"


def test_generate_reports_upstream_error(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    install_fake_session(
        monkeypatch, response=FakeResponse({"error": {"message": "API key not valid"}})
    )
    response = client.post("/api/generate", json={"prompt": "x"})
    assert response.status_code == 200
    assert response.json() == {"text": "Fehler: API key not valid"}


def test_generate_rejects_invalid_json(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = install_fake_session(monkeypatch, response=FakeResponse({}))
    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Ungültiges JSON"}
    assert calls == []


def test_generate_network_failure(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    install_fake_session(monkeypatch, error=requests.ConnectionError("connection refused"))
    response = client.post("/api/generate", json={"prompt": "x"})
    assert response.status_code == 500
    assert "connection refused" in response.json()["error"]


def test_generate_only_accepts_post(client: TestClient) -> None:
    assert client.get("/api/generate").status_code == 405


@pytest.mark.parametrize(
    "body, prompt",
    [
        ({"prompt": None}, ""),
        ({}, ""),
        ([], ""),
        ("text", ""),
        ({"prompt": 42}, "42"),
    ],
)
def test_generate_accepts_well_formed_bodies_without_prompt(
    client: TestClient, monkeypatch: pytest.MonkeyPatch, body, prompt: str
) -> None:
    calls = install_fake_session(
        monkeypatch, response=FakeResponse({"candidates": [{"content": {"parts": [{"text": "ok"}]}}]})
    )
    response = client.post("/api/generate", json=body)
    assert response.status_code == 200
    assert response.json() == {"text": "ok"}
    assert calls[0]["json"]["contents"][0]["parts"][0]["text"] == prompt
