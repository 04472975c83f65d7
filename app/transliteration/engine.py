from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from app.spellcheck.normalization import fold_case, upper_case
from app.spellcheck.script import Script, detect_script
from app.transliteration.tables import (
    CYRILLIC_TO_LATIN,
    CYRILLIC_TO_LATIN_SEQUENCES,
    LATIN_TO_CYRILLIC,
    LATIN_TO_CYRILLIC_SEQUENCES,
    LETTER_FOLLOWED_SEQUENCES,
)

MIXED_SCRIPT_MESSAGE = "text mixes scripts or has too few letters to convert safely"


class Direction(str, Enum):
    TO_LATIN = "toLatin"
    TO_CYRILLIC = "toCyrillic"


@dataclass(frozen=True)
class RuleSet:
    singles: Mapping[str, str]
    sequences: Mapping[str, str]
    source: Script
    target: Script
    letter_followed: frozenset[str] = frozenset()

    @property
    def max_window(self) -> int:
        return max((len(key) for key in self.sequences), default=1)


@dataclass(frozen=True)
class TransliterationResult:
    result: str
    source: Script
    target: Script
    confident: bool = True
    message: str | None = None


RULES = {
    Direction.TO_LATIN: RuleSet(CYRILLIC_TO_LATIN, CYRILLIC_TO_LATIN_SEQUENCES, Script.CYRILLIC, Script.LATIN),
    Direction.TO_CYRILLIC: RuleSet(
        LATIN_TO_CYRILLIC,
        LATIN_TO_CYRILLIC_SEQUENCES,
        Script.LATIN,
        Script.CYRILLIC,
        letter_followed=LETTER_FOLLOWED_SEQUENCES,
    ),
}


class Transliterator:
    def __init__(self, rules: Mapping[Direction, RuleSet] | None = None) -> None:
        self.rules = rules or RULES

    def _is_caps_context(self, text: str, start: int, end: int) -> bool:
        window = text[start:end]
        if sum(1 for char in window if char.isalpha()) > 1:
            return window.isupper()
        if end < len(text) and text[end].isalpha():
            return text[end].isupper()
        if start > 0 and text[start - 1].isalpha():
            return text[start - 1].isupper()
        return False

    def _match_case(self, replacement: str, text: str, start: int, end: int) -> str:
        if not replacement or not text[start].isupper():
            return replacement
        if self._is_caps_context(text, start, end):
            return upper_case(replacement)
        return upper_case(replacement[0]) + replacement[1:]

    def transliterate(self, text: str, direction: Direction | str) -> str:
        """Convert text with a greedy longest-match scan.

        At every position the 4, 3 and 2 character windows are tried against
        the sequence table before the single-character table; anything
        unmapped is copied through.
        """
        rules = self.rules[Direction(direction)]
        text = text or ""
        max_window = rules.max_window
        output: list[str] = []
        position = 0
        length = len(text)

        while position < length:
            for size in range(min(max_window, length - position), 1, -1):
                key = fold_case(text[position : position + size])
                replacement = rules.sequences.get(key)
                if replacement is not None and key in rules.letter_followed:
                    following = position + size
                    if following >= length or not text[following].isalpha():
                        replacement = None
                if replacement is not None:
                    output.append(self._match_case(replacement, text, position, position + size))
                    position += size
                    break
            else:
                char = text[position]
                replacement = rules.singles.get(fold_case(char))
                if replacement is None:
                    output.append(char)
                else:
                    output.append(self._match_case(replacement, text, position, position + 1))
                position += 1

        return "".join(output)

    def to_latin(self, text: str) -> str:
        return self.transliterate(text, Direction.TO_LATIN)

    def to_cyrillic(self, text: str) -> str:
        return self.transliterate(text, Direction.TO_CYRILLIC)

    def convert(self, text: str, direction: Direction | str) -> TransliterationResult:
        rules = self.rules[Direction(direction)]
        return TransliterationResult(
            result=self.transliterate(text, direction),
            source=rules.source,
            target=rules.target,
        )

    def auto_transliterate(self, text: str) -> TransliterationResult:
        script = detect_script(text)
        if script is Script.CYRILLIC:
            return self.convert(text, Direction.TO_LATIN)
        if script is Script.LATIN:
            return self.convert(text, Direction.TO_CYRILLIC)
        return TransliterationResult(
            result=text,
            source=script,
            target=script,
            confident=False,
            message=MIXED_SCRIPT_MESSAGE,
        )


transliterator = Transliterator()


def transliterate(text: str, direction: Direction | str) -> str:
    return transliterator.transliterate(text, direction)


def auto_transliterate(text: str) -> TransliterationResult:
    return transliterator.auto_transliterate(text)
