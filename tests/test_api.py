from __future__ import annotations

from fastapi.testclient import TestClient

from app.api import main
from app.api.orfo_service import OrfoService
from app.spellcheck.dictionary import DictionaryEntry, DictionaryIndex
from app.spellcheck.script import Script


def _client(monkeypatch, rows=None, fail: bool = False) -> TestClient:
    entries = rows if rows is not None else [
        DictionaryEntry("salam", Script.LATIN, 100),
        DictionaryEntry("dunya", Script.LATIN, 100),
        DictionaryEntry("сәлем", Script.CYRILLIC, 90),
    ]

    def _loader() -> list[DictionaryEntry]:
        if fail:
            raise ConnectionError("store is down")
        return entries

    monkeypatch.setattr(main, "orfo_service", OrfoService(index=DictionaryIndex(_loader, ttl_s=60)))
    return TestClient(main.app)


def test_check_returns_results_and_statistics(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post("/check", json={"text": "salam salm"})

    assert response.status_code == 200
    body = response.json()
    assert [item["is_correct"] for item in body["results"]] == [True, False]
    assert body["results"][1]["suggestions"][0] == {"word": "salam", "distance": 1, "confidence": 75}
    assert body["statistics"]["total_words"] == 2
    assert body["statistics"]["incorrect_words"] == 1
    assert body["statistics"]["dictionary_size"] == 3
    assert body["stale_dictionary"] is False


def test_check_rejects_empty_text(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.post("/check", json={"text": ""}).status_code == 400
    assert client.post("/check", json={}).status_code == 400


def test_check_without_dictionary_is_unavailable(monkeypatch) -> None:
    client = _client(monkeypatch, fail=True)

    response = client.post("/check", json={"text": "salam"})

    assert response.status_code == 503


def test_auto_correct_endpoint(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post("/check/auto-correct", json={"text": "men salm aytaman"})

    assert response.status_code == 200
    body = response.json()
    assert body["corrected_text"] == "men salam aytaman"
    assert body["correction_count"] == 1
    assert body["corrections"] == [{"original": "salm", "corrected": "salam", "position": 4}]


def test_dictionary_stats_and_refresh(monkeypatch) -> None:
    client = _client(monkeypatch)

    stats = client.get("/check/stats").json()
    refreshed = client.post("/check/refresh-cache").json()

    assert stats["total_words"] == 3
    assert stats["latin"] == 2
    assert stats["cyrillic"] == 1
    assert stats["last_update"] is not None
    assert refreshed["total_words"] == 3
    assert refreshed["stale"] is False


def test_word_search(monkeypatch) -> None:
    client = _client(monkeypatch)

    body = client.get("/words/search", params={"q": "sal"}).json()

    assert body["results"][0] == {"word": "salam", "type": "exact", "score": 100}


def test_convert_uses_from_and_to_keys(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post("/convert", json={"text": "қарақалпақ", "mode": "auto"})

    assert response.status_code == 200
    body = response.json()
    assert body["converted"] == "qaraqalpaq"
    assert body["from"] == "cyrillic"
    assert body["to"] == "latin"
    assert body["confident"] is True


def test_convert_rejects_unknown_mode(monkeypatch) -> None:
    client = _client(monkeypatch)
    assert client.post("/convert", json={"text": "qala", "mode": "upside"}).status_code == 400


def test_detect_reports_script_shares(monkeypatch) -> None:
    client = _client(monkeypatch)

    body = client.post("/convert/detect", json={"text": "Hello мир"}).json()

    assert body["detected_script"] == "mixed"
    assert body["latin"] == {"count": 5, "percentage": 62.5}
    assert body["cyrillic"] == {"count": 3, "percentage": 37.5}
    assert body["total"] == 8


def test_batch_convert_summary(monkeypatch) -> None:
    client = _client(monkeypatch)

    body = client.post("/convert/batch", json={"texts": ["қала", 5], "mode": "toLatin"}).json()

    assert body["summary"] == {"total": 2, "successful": 1, "failed": 1}
    assert body["results"][0]["converted"] == "qala"
    assert body["results"][0]["from"] == "cyrillic"
    assert body["results"][1]["success"] is False
