import re
from dataclasses import dataclass
from enum import Enum

from app.spellcheck.normalization import CYRILLIC_LETTERS, LATIN_LETTERS

MIN_RECOGNIZED_LETTERS = 3
DOMINANCE_THRESHOLD = 0.8

CYRILLIC_RE = re.compile(f"[{CYRILLIC_LETTERS}]")
LATIN_RE = re.compile(f"[{LATIN_LETTERS}]")


class Script(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    MIXED = "mixed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ScriptStatistics:
    cyrillic: int
    latin: int

    @property
    def total(self) -> int:
        return self.cyrillic + self.latin

    def percentage(self, script: Script) -> float:
        if self.total == 0:
            return 0.0
        count = self.cyrillic if script is Script.CYRILLIC else self.latin
        return round(count * 100.0 / self.total, 1)


def count_letters(text: str) -> ScriptStatistics:
    text = text or ""
    return ScriptStatistics(
        cyrillic=len(CYRILLIC_RE.findall(text)),
        latin=len(LATIN_RE.findall(text)),
    )


def detect_script(text: str) -> Script:
    """Classify text by the share of each script's letters.

    Below MIN_RECOGNIZED_LETTERS the answer is UNKNOWN; a script needs at least
    DOMINANCE_THRESHOLD of the recognized letters to win, otherwise MIXED.
    """
    stats = count_letters(text)
    if stats.total < MIN_RECOGNIZED_LETTERS:
        return Script.UNKNOWN
    if stats.cyrillic >= stats.total * DOMINANCE_THRESHOLD:
        return Script.CYRILLIC
    if stats.latin >= stats.total * DOMINANCE_THRESHOLD:
        return Script.LATIN
    return Script.MIXED
