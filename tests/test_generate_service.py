import pytest

from api import config
from api.models import GenerateRequest
from api.services import generate_service


def test_build_generate_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "GEMINI_API_BASE", "https://example.com/v1/models/")
    monkeypatch.setattr(config, "GEMINI_MODEL", "test-model")
    assert generate_service.build_generate_url() == "https://example.com/v1/models/test-model:generateContent"


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}, "ab"),
        ({"error": {"message": "quota"}}, "Fehler: quota"),
        ({"candidates": []}, ""),
        ({}, ""),
        ([], ""),
    ],
)
def test_extract_text(data, expected: str) -> None:
    assert generate_service.extract_text(data) == expected


class FakeSession:
    instances: list["FakeSession"] = []

    def __init__(self, response):
        self.response = response
        self.closed = False
        FakeSession.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return None

    def post(self, url, params=None, json=None, timeout=None):
        return self.response


def test_generate_text_closes_session(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeResponse:
        def json(self):
            return {"candidates": [{"content": {"parts": [{"text": "fertig"}]}}]}

    FakeSession.instances.clear()
    monkeypatch.setattr(generate_service.requests, "Session", lambda: FakeSession(FakeResponse()))
    assert generate_service.generate_text("x") == "fertig"
    assert [session.closed for session in FakeSession.instances] == [True]


def test_generate_text_wraps_bad_body(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeResponse:
        def json(self):
            raise ValueError("Expecting value")

    FakeSession.instances.clear()
    monkeypatch.setattr(generate_service.requests, "Session", lambda: FakeSession(FakeResponse()))
    with pytest.raises(generate_service.GenerateError):
        generate_service.generate_text("x")
    assert FakeSession.instances[0].closed


@pytest.mark.parametrize("raw, prompt", [(None, ""), (False, ""), (0, ""), (7, "7"), ("Hallo", "Hallo")])
def test_generate_request_prompt(raw, prompt: str) -> None:
    assert GenerateRequest.model_validate({"prompt": raw}).prompt == prompt
