from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.common.config import Settings, settings as default_settings
from app.common.errors import InvalidInput
from app.spellcheck.dictionary import DictionaryIndex, DictionarySnapshot
from app.spellcheck.engine import AutoCorrectResult, SearchHit, SpellCheckerEngine, SpellResult
from app.spellcheck.store import load_checked_words
from app.transliteration.engine import Direction, TransliterationResult, Transliterator

logger = logging.getLogger(__name__)

AUTO_MODE = "auto"
CONVERT_MODES = (AUTO_MODE, Direction.TO_LATIN.value, Direction.TO_CYRILLIC.value)


@dataclass(frozen=True)
class BatchItem:
    index: int
    original: Any
    result: TransliterationResult | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.result is not None


class OrfoService:
    """Entry point the transport layers call; owns the dictionary cache."""

    def __init__(
        self,
        *,
        index: DictionaryIndex | None = None,
        engine: SpellCheckerEngine | None = None,
        transliterator: Transliterator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.index = index or DictionaryIndex(load_checked_words, ttl_s=self.settings.dictionary_ttl_s)
        self.engine = engine or SpellCheckerEngine(
            suggestion_limit=self.settings.suggestion_limit,
            max_distance=self.settings.max_edit_distance,
            confidence_threshold=self.settings.autocorrect_confidence,
        )
        self.transliterator = transliterator or Transliterator()

    def validate_text(self, text: Any, max_length: int | None = None) -> str:
        if not isinstance(text, str) or not text:
            raise InvalidInput("text must be a non-empty string")
        max_length = self.settings.max_text_length if max_length is None else max_length
        if len(text) > max_length:
            raise InvalidInput(f"text is too long (max {max_length} characters)")
        return text

    def dictionary(self, force_refresh: bool = False) -> DictionarySnapshot:
        return self.index.get_snapshot(force_refresh=force_refresh)

    def refresh_dictionary(self, force: bool = True) -> DictionarySnapshot:
        snapshot = self.dictionary(force_refresh=force)
        if snapshot.stale:
            logger.warning("dictionary refresh failed; still serving snapshot loaded_at=%s", snapshot.loaded_at)
        return snapshot

    def check_text(self, text: str, *, snapshot: DictionarySnapshot | None = None) -> list[SpellResult]:
        text = self.validate_text(text)
        return self.engine.check(text, snapshot if snapshot is not None else self.dictionary())

    def auto_correct(
        self,
        text: str,
        *,
        snapshot: DictionarySnapshot | None = None,
        confidence_threshold: int | None = None,
    ) -> AutoCorrectResult:
        text = self.validate_text(text)
        return self.engine.auto_correct(
            text,
            snapshot if snapshot is not None else self.dictionary(),
            confidence_threshold=confidence_threshold,
        )

    def search_words(self, query: str, limit: int = 10) -> list[SearchHit]:
        query = self.validate_text(query)
        return self.engine.fuzzy_search(query, self.dictionary(), limit=limit)

    def transliterate(self, text: str, direction: Direction | str) -> str:
        return self.transliterator.transliterate(self.validate_text(text), direction)

    def auto_transliterate(self, text: str) -> TransliterationResult:
        return self.transliterator.auto_transliterate(self.validate_text(text))

    def convert(self, text: str, mode: str = AUTO_MODE, max_length: int | None = None) -> TransliterationResult:
        if mode not in CONVERT_MODES:
            raise InvalidInput(f"unknown mode {mode!r}; use one of: {', '.join(CONVERT_MODES)}")
        text = self.validate_text(text, max_length=max_length)
        if mode == AUTO_MODE:
            return self.transliterator.auto_transliterate(text)
        return self.transliterator.convert(text, mode)

    def convert_batch(self, texts: list[Any], mode: str = AUTO_MODE) -> list[BatchItem]:
        if not isinstance(texts, list) or not texts:
            raise InvalidInput("texts must be a non-empty list")
        if len(texts) > self.settings.batch_max_texts:
            raise InvalidInput(f"too many texts (max {self.settings.batch_max_texts})")
        if mode not in CONVERT_MODES:
            raise InvalidInput(f"unknown mode {mode!r}; use one of: {', '.join(CONVERT_MODES)}")

        items: list[BatchItem] = []
        for index, text in enumerate(texts):
            try:
                result = self.convert(text, mode, max_length=self.settings.batch_max_text_length)
            except InvalidInput as exc:
                original = text[:100] if isinstance(text, str) else text
                items.append(BatchItem(index=index, original=original, error=str(exc)))
                continue
            items.append(BatchItem(index=index, original=text, result=result))
        return items


orfo_service = OrfoService()


def check_text(text: str) -> list[SpellResult]:
    return orfo_service.check_text(text)


def auto_correct(text: str) -> AutoCorrectResult:
    return orfo_service.auto_correct(text)


def transliterate(text: str, direction: Direction | str) -> str:
    return orfo_service.transliterate(text, direction)


def auto_transliterate(text: str) -> TransliterationResult:
    return orfo_service.auto_transliterate(text)


def refresh_dictionary(force: bool = True) -> DictionarySnapshot:
    return orfo_service.refresh_dictionary(force)
