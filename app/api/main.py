from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from app.api.orfo_service import AUTO_MODE, BatchItem, orfo_service
from app.batch.runner import DictionaryRefresher
from app.common.config import settings
from app.common.errors import DictionaryUnavailable, InvalidInput
from app.spellcheck.dictionary import DictionarySnapshot
from app.spellcheck.engine import SpellResult
from app.spellcheck.script import Script, count_letters, detect_script
from app.transliteration.engine import TransliterationResult

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    refresher: DictionaryRefresher | None = None
    if settings.dictionary_refresh_interval_s > 0:
        refresher = DictionaryRefresher(orfo_service)
        refresher.start()
    try:
        yield
    finally:
        if refresher is not None:
            refresher.stop()


app = FastAPI(title="Orfo API", lifespan=lifespan)


class TextRequest(BaseModel):
    text: Any = None


class ConvertRequest(BaseModel):
    text: Any = None
    mode: str = AUTO_MODE


class BatchRequest(BaseModel):
    texts: Any = None
    mode: str = AUTO_MODE


class SuggestionItem(BaseModel):
    word: str
    distance: int
    confidence: int


class CheckItem(BaseModel):
    word: str
    normalized_word: str
    start: int
    end: int
    is_correct: bool
    script: str
    suggestions: list[SuggestionItem]


class CheckStatistics(BaseModel):
    total_words: int
    correct_words: int
    incorrect_words: int
    accuracy: float
    text_length: int
    dictionary_size: int


class CheckResponse(BaseModel):
    results: list[CheckItem]
    statistics: CheckStatistics
    stale_dictionary: bool
    timestamp: str


class CorrectionItem(BaseModel):
    original: str
    corrected: str
    position: int


class AutoCorrectResponse(BaseModel):
    original_text: str
    corrected_text: str
    correction_count: int
    corrections: list[CorrectionItem]
    stale_dictionary: bool
    timestamp: str


class DictionaryStatsResponse(BaseModel):
    total_words: int
    cyrillic: int
    latin: int
    mixed: int
    last_update: str | None
    stale: bool


class RefreshResponse(BaseModel):
    total_words: int
    last_update: str | None
    stale: bool


class SearchHitItem(BaseModel):
    word: str
    type: str
    score: int


class WordSearchResponse(BaseModel):
    query: str
    results: list[SearchHitItem]
    count: int


class ConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original: str
    converted: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    mode: str
    confident: bool
    message: str | None = None
    timestamp: str


class ScriptShare(BaseModel):
    count: int
    percentage: float


class DetectResponse(BaseModel):
    text: str
    detected_script: str
    cyrillic: ScriptShare
    latin: ScriptShare
    total: int


class BatchResultItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    success: bool
    original: Any = None
    converted: str | None = None
    source: str | None = Field(default=None, alias="from")
    target: str | None = Field(default=None, alias="to")
    error: str | None = None


class BatchSummary(BaseModel):
    total: int
    successful: int
    failed: int


class BatchResponse(BaseModel):
    results: list[BatchResultItem]
    summary: BatchSummary
    mode: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _iso(timestamp: float | None) -> str | None:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


def _bad_request(exc: InvalidInput) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _unavailable(exc: DictionaryUnavailable) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


def _load_dictionary(force_refresh: bool = False) -> DictionarySnapshot:
    try:
        return orfo_service.dictionary(force_refresh=force_refresh)
    except DictionaryUnavailable as exc:
        raise _unavailable(exc) from exc


def _check_item(result: SpellResult) -> CheckItem:
    return CheckItem(
        word=result.token.text,
        normalized_word=result.token.normalized,
        start=result.token.start,
        end=result.token.end,
        is_correct=result.is_correct,
        script=result.script.value,
        suggestions=[
            SuggestionItem(word=s.word, distance=s.distance, confidence=s.confidence) for s in result.suggestions
        ],
    )


def _convert_response(text: str, mode: str, result: TransliterationResult) -> ConvertResponse:
    return ConvertResponse(
        original=text,
        converted=result.result,
        source=result.source.value,
        target=result.target.value,
        mode=mode,
        confident=result.confident,
        message=result.message,
        timestamp=_now(),
    )


def _batch_item(item: BatchItem) -> BatchResultItem:
    if item.result is None:
        return BatchResultItem(index=item.index, success=False, original=item.original, error=item.error)
    return BatchResultItem(
        index=item.index,
        success=True,
        original=item.original,
        converted=item.result.result,
        source=item.result.source.value,
        target=item.result.target.value,
    )


@app.post("/check", response_model=CheckResponse)
def check(request: TextRequest) -> CheckResponse:
    try:
        text = orfo_service.validate_text(request.text)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc

    snapshot = _load_dictionary()
    results = orfo_service.check_text(text, snapshot=snapshot)
    stats = orfo_service.engine.statistics(text, results)
    logger.info("checked %s words, %s incorrect", stats.total_words, stats.incorrect_words)

    return CheckResponse(
        results=[_check_item(result) for result in results],
        statistics=CheckStatistics(
            total_words=stats.total_words,
            correct_words=stats.correct_words,
            incorrect_words=stats.incorrect_words,
            accuracy=stats.accuracy,
            text_length=stats.text_length,
            dictionary_size=len(snapshot),
        ),
        stale_dictionary=snapshot.stale,
        timestamp=_now(),
    )


@app.post("/check/auto-correct", response_model=AutoCorrectResponse)
def auto_correct(request: TextRequest) -> AutoCorrectResponse:
    try:
        text = orfo_service.validate_text(request.text)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc

    snapshot = _load_dictionary()
    corrected = orfo_service.auto_correct(text, snapshot=snapshot)
    logger.info("auto-correct applied %s corrections", len(corrected.corrections))

    return AutoCorrectResponse(
        original_text=text,
        corrected_text=corrected.corrected_text,
        correction_count=len(corrected.corrections),
        corrections=[
            CorrectionItem(original=c.original, corrected=c.corrected, position=c.position)
            for c in corrected.corrections
        ],
        stale_dictionary=snapshot.stale,
        timestamp=_now(),
    )


@app.post("/check/refresh-cache", response_model=RefreshResponse)
def refresh_cache() -> RefreshResponse:
    snapshot = _load_dictionary(force_refresh=True)
    return RefreshResponse(total_words=len(snapshot), last_update=_iso(snapshot.loaded_at), stale=snapshot.stale)


@app.get("/check/stats", response_model=DictionaryStatsResponse)
def dictionary_stats() -> DictionaryStatsResponse:
    snapshot = _load_dictionary()
    counts = snapshot.script_counts()
    return DictionaryStatsResponse(
        total_words=len(snapshot),
        cyrillic=counts[Script.CYRILLIC.value],
        latin=counts[Script.LATIN.value],
        mixed=counts[Script.MIXED.value],
        last_update=_iso(snapshot.loaded_at),
        stale=snapshot.stale,
    )


@app.get("/words/search", response_model=WordSearchResponse)
def search_words(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=100),
) -> WordSearchResponse:
    try:
        hits = orfo_service.search_words(q, limit=limit)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc
    except DictionaryUnavailable as exc:
        raise _unavailable(exc) from exc
    return WordSearchResponse(
        query=q,
        results=[SearchHitItem(word=hit.word, type=hit.type, score=hit.score) for hit in hits],
        count=len(hits),
    )


@app.post("/convert", response_model=ConvertResponse)
def convert(request: ConvertRequest) -> ConvertResponse:
    try:
        result = orfo_service.convert(request.text, request.mode)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc
    return _convert_response(request.text, request.mode, result)


@app.post("/convert/detect", response_model=DetectResponse)
def detect(request: TextRequest) -> DetectResponse:
    try:
        text = orfo_service.validate_text(request.text)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc

    stats = count_letters(text)
    return DetectResponse(
        text=text[:100] + ("..." if len(text) > 100 else ""),
        detected_script=detect_script(text).value,
        cyrillic=ScriptShare(count=stats.cyrillic, percentage=stats.percentage(Script.CYRILLIC)),
        latin=ScriptShare(count=stats.latin, percentage=stats.percentage(Script.LATIN)),
        total=stats.total,
    )


@app.post("/convert/batch", response_model=BatchResponse)
def convert_batch(request: BatchRequest) -> BatchResponse:
    try:
        items = orfo_service.convert_batch(request.texts, request.mode)
    except InvalidInput as exc:
        raise _bad_request(exc) from exc

    successful = sum(1 for item in items if item.success)
    return BatchResponse(
        results=[_batch_item(item) for item in items],
        summary=BatchSummary(total=len(items), successful=successful, failed=len(items) - successful),
        mode=request.mode,
    )
