from dataclasses import dataclass

from app.common.config import settings
from app.spellcheck.dictionary import DictionarySnapshot
from app.spellcheck.distance import confidence_for_distance, levenshtein_distance
from app.spellcheck.normalization import normalize_word, upper_case
from app.spellcheck.script import Script, detect_script
from app.spellcheck.tokenizer import Token, tokenize

SUBSTRING_CONFIDENCE = 95
MIN_SUBSTRING_LENGTH = 3
FUZZY_SEARCH_MAX_DISTANCE = 3


@dataclass(frozen=True)
class Suggestion:
    word: str
    distance: int
    confidence: int


@dataclass(frozen=True)
class SpellResult:
    token: Token
    is_correct: bool
    script: Script
    suggestions: tuple[Suggestion, ...] = ()


@dataclass(frozen=True)
class Correction:
    original: str
    corrected: str
    position: int


@dataclass(frozen=True)
class AutoCorrectResult:
    corrected_text: str
    corrections: tuple[Correction, ...]


@dataclass(frozen=True)
class TextStatistics:
    total_words: int
    correct_words: int
    incorrect_words: int
    accuracy: float
    text_length: int


@dataclass(frozen=True)
class SearchHit:
    word: str
    type: str
    score: int


class SpellCheckerEngine:
    def __init__(
        self,
        *,
        suggestion_limit: int | None = None,
        max_distance: int | None = None,
        confidence_threshold: int | None = None,
    ) -> None:
        self.suggestion_limit = settings.suggestion_limit if suggestion_limit is None else suggestion_limit
        self.max_distance = settings.max_edit_distance if max_distance is None else max_distance
        self.confidence_threshold = (
            settings.autocorrect_confidence if confidence_threshold is None else confidence_threshold
        )

    def _is_substring_match(self, word: str, candidate: str) -> bool:
        if min(len(word), len(candidate)) < MIN_SUBSTRING_LENGTH:
            return False
        return word in candidate or candidate in word

    def suggest(
        self,
        word: str,
        snapshot: DictionarySnapshot,
        *,
        script: Script | None = None,
        limit: int | None = None,
    ) -> list[Suggestion]:
        normalized = normalize_word(word)
        if not normalized:
            return []

        limit = self.suggestion_limit if limit is None else limit
        if limit <= 0:
            return []
        candidates = snapshot.candidates_for(script or detect_script(word))

        substring_hits: list[Suggestion] = []
        taken: set[str] = {normalized}
        for key, entry in candidates:
            if len(substring_hits) >= limit:
                return substring_hits
            if key in taken or not self._is_substring_match(normalized, key):
                continue
            substring_hits.append(Suggestion(entry.word, 0, SUBSTRING_CONFIDENCE))
            taken.add(key)

        if len(substring_hits) >= limit:
            return substring_hits

        ranked: list[tuple[int, int, int, str, Suggestion]] = []
        for key, entry in candidates:
            if key in taken:
                continue
            distance = levenshtein_distance(normalized, key, self.max_distance)
            if distance > self.max_distance:
                continue
            confidence = confidence_for_distance(distance)
            ranked.append(
                (distance, -confidence, -entry.trust_score, key, Suggestion(entry.word, distance, confidence))
            )

        ranked.sort(key=lambda row: row[:4])
        return substring_hits + [row[4] for row in ranked[: limit - len(substring_hits)]]

    def check(self, text: str, snapshot: DictionarySnapshot) -> list[SpellResult]:
        results: list[SpellResult] = []
        for token in tokenize(text):
            if not token.normalized:
                continue
            script = detect_script(token.text)
            if snapshot.lookup(token.normalized) is not None:
                results.append(SpellResult(token=token, is_correct=True, script=script))
                continue
            suggestions = self.suggest(token.text, snapshot, script=script)
            results.append(
                SpellResult(token=token, is_correct=False, script=script, suggestions=tuple(suggestions))
            )
        return results

    def auto_correct(
        self,
        text: str,
        snapshot: DictionarySnapshot,
        confidence_threshold: int | None = None,
    ) -> AutoCorrectResult:
        """Replace confidently misspelled tokens left to right.

        Every span is shifted by the accumulated length difference of the
        replacements already made, so later slices hit the right substring.
        """
        threshold = self.confidence_threshold if confidence_threshold is None else confidence_threshold
        corrected_text = text
        offset = 0
        corrections: list[Correction] = []

        for result in self.check(text, snapshot):
            if result.is_correct or not result.suggestions:
                continue
            best = result.suggestions[0]
            if best.confidence < threshold:
                continue

            original = result.token.text
            replacement = self.apply_case(original, best.word)
            start = result.token.start + offset
            end = result.token.end + offset
            corrected_text = corrected_text[:start] + replacement + corrected_text[end:]
            offset += len(replacement) - len(original)
            corrections.append(Correction(original=original, corrected=replacement, position=start))

        return AutoCorrectResult(corrected_text=corrected_text, corrections=tuple(corrections))

    def statistics(self, text: str, results: list[SpellResult]) -> TextStatistics:
        total = len(results)
        correct = sum(1 for result in results if result.is_correct)
        accuracy = round(correct * 100.0 / total, 2) if total else 0.0
        return TextStatistics(
            total_words=total,
            correct_words=correct,
            incorrect_words=total - correct,
            accuracy=accuracy,
            text_length=len(text or ""),
        )

    def fuzzy_search(self, query: str, snapshot: DictionarySnapshot, limit: int = 10) -> list[SearchHit]:
        normalized = normalize_word(query)
        if not normalized or limit <= 0:
            return []

        hits: list[SearchHit] = []
        for key, entry in snapshot.candidates_for(Script.UNKNOWN):
            if normalized in key:
                hits.append(SearchHit(word=entry.word, type="exact", score=100))
                continue
            distance = levenshtein_distance(normalized, key, FUZZY_SEARCH_MAX_DISTANCE)
            if distance <= FUZZY_SEARCH_MAX_DISTANCE:
                hits.append(SearchHit(word=entry.word, type="similar", score=max(0, 100 - distance * 20)))

        hits.sort(key=lambda hit: -hit.score)
        return hits[:limit]

    def apply_case(self, original: str, replacement: str) -> str:
        if len(original) > 1 and original.isupper():
            return upper_case(replacement)
        if original[:1].isupper() and (len(original) == 1 or original[1:].islower()):
            return upper_case(replacement[:1]) + replacement[1:]
        return replacement


spellchecker_engine = SpellCheckerEngine()


def suggest(word: str, snapshot: DictionarySnapshot, *, limit: int | None = None) -> list[Suggestion]:
    return spellchecker_engine.suggest(word, snapshot, limit=limit)


def check(text: str, snapshot: DictionarySnapshot) -> list[SpellResult]:
    return spellchecker_engine.check(text, snapshot)


def auto_correct(
    text: str,
    snapshot: DictionarySnapshot,
    confidence_threshold: int | None = None,
) -> AutoCorrectResult:
    return spellchecker_engine.auto_correct(text, snapshot, confidence_threshold=confidence_threshold)


def fuzzy_search(query: str, snapshot: DictionarySnapshot, limit: int = 10) -> list[SearchHit]:
    return spellchecker_engine.fuzzy_search(query, snapshot, limit=limit)


def apply_case(original: str, replacement: str) -> str:
    return spellchecker_engine.apply_case(original, replacement)
