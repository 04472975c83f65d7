from __future__ import annotations

from app.api.orfo_service import orfo_service
from app.common.errors import DictionaryUnavailable, InvalidInput

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the project dependencies."
    ) from exc


SERVER_TITLE = "Orfo"
SERVER_INSTRUCTIONS = (
    "Use check_text to find misspelled Karakalpak words, auto_correct to fix them, "
    "and transliterate to convert between Cyrillic and Latin script "
    "(mode: auto, toLatin or toCyrillic)."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version="1",
)


def render_check(text: str) -> str:
    try:
        results = orfo_service.check_text(text)
    except (InvalidInput, DictionaryUnavailable) as exc:
        return f"error: {exc}"

    lines: list[str] = []
    for result in results:
        if result.is_correct:
            continue
        token = result.token
        suggestions = ", ".join(f"{s.word} ({s.confidence}%)" for s in result.suggestions) or "no suggestions"
        lines.append(f"{token.text} [{token.start}:{token.end}] -> {suggestions}")

    if not lines:
        return f"all {len(results)} words are spelled correctly"
    return "\n".join(lines)


def render_auto_correct(text: str) -> str:
    try:
        corrected = orfo_service.auto_correct(text)
    except (InvalidInput, DictionaryUnavailable) as exc:
        return f"error: {exc}"
    return corrected.corrected_text


def render_transliteration(text: str, mode: str = "auto") -> str:
    try:
        result = orfo_service.convert(text, mode)
    except InvalidInput as exc:
        return f"error: {exc}"
    if not result.confident:
        return f"{result.result}\n\n(unchanged: {result.message})"
    return result.result


@mcp.tool(name="check_text", description="Check Karakalpak text for misspelled words.")
def check_text(text: str) -> str:
    """List misspelled words with ranked suggestions."""
    return render_check(text)


@mcp.tool(name="auto_correct", description="Apply confident spelling corrections to Karakalpak text.")
def auto_correct(text: str) -> str:
    """Return the corrected text."""
    return render_auto_correct(text)


@mcp.tool(name="transliterate", description="Convert Karakalpak text between Cyrillic and Latin script.")
def transliterate(text: str, mode: str = "auto") -> str:
    """Transliterate text; mode is auto, toLatin or toCyrillic."""
    return render_transliteration(text, mode)


if __name__ == "__main__":
    mcp.run("http")
