from __future__ import annotations

from app.api.orfo_service import OrfoService
from app.mcp import server
from app.spellcheck.dictionary import DictionaryEntry, DictionaryIndex
from app.spellcheck.script import Script


def _use_dictionary(monkeypatch, words: list[str]) -> None:
    entries = [DictionaryEntry(word, Script.LATIN, 100) for word in words]
    service = OrfoService(index=DictionaryIndex(lambda: entries, ttl_s=60))
    monkeypatch.setattr(server, "orfo_service", service)


def test_check_tool_lists_misspellings(monkeypatch) -> None:
    _use_dictionary(monkeypatch, ["salam", "dunya"])

    rendered = server.render_check("salam dnya")

    assert rendered == "dnya [6:10] -> dunya (75%)"


def test_check_tool_reports_clean_text(monkeypatch) -> None:
    _use_dictionary(monkeypatch, ["salam"])
    assert server.render_check("salam") == "all 1 words are spelled correctly"


def test_tools_report_invalid_input(monkeypatch) -> None:
    _use_dictionary(monkeypatch, ["salam"])
    assert server.render_check("").startswith("error:")
    assert server.render_transliteration("qala", "sideways").startswith("error:")


def test_transliterate_tool(monkeypatch) -> None:
    _use_dictionary(monkeypatch, [])

    assert server.render_transliteration("қарақалпақ") == "qaraqalpaq"
    assert "unchanged" in server.render_transliteration("Hello мир")
    assert server.render_auto_correct("men salm") == "men salm"
