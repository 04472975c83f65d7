import logging
import threading
import time
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from app.common.config import settings
from app.common.errors import DictionaryUnavailable
from app.spellcheck.normalization import normalize_word
from app.spellcheck.script import Script

logger = logging.getLogger(__name__)

CandidateList = tuple[tuple[str, "DictionaryEntry"], ...]


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    script: Script
    trust_score: int = 100


@dataclass(frozen=True)
class DictionarySnapshot:
    entries: Mapping[str, DictionaryEntry]
    loaded_at: float
    stale: bool = False
    candidates: Mapping[Script, CandidateList] = field(default_factory=dict, repr=False)

    @classmethod
    def build(cls, rows: Iterable[DictionaryEntry], *, loaded_at: float) -> "DictionarySnapshot":
        entries: dict[str, DictionaryEntry] = {}
        for row in rows:
            key = normalize_word(row.word)
            if not key:
                continue
            trust = min(100, max(0, int(row.trust_score)))
            entry = row if trust == row.trust_score else replace(row, trust_score=trust)
            existing = entries.get(key)
            # Rows arrive highest trust first; an equal-trust duplicate keeps the earlier row.
            if existing is None or entry.trust_score > existing.trust_score:
                entries[key] = entry

        ranked = sorted(entries.items(), key=lambda item: -item[1].trust_score)
        latin = tuple(item for item in ranked if item[1].script in (Script.LATIN, Script.MIXED))
        cyrillic = tuple(item for item in ranked if item[1].script in (Script.CYRILLIC, Script.MIXED))
        everything = tuple(ranked)

        return cls(
            entries=MappingProxyType(entries),
            loaded_at=loaded_at,
            candidates=MappingProxyType(
                {
                    Script.LATIN: latin,
                    Script.CYRILLIC: cyrillic,
                    Script.MIXED: everything,
                    Script.UNKNOWN: everything,
                }
            ),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, normalized: str) -> DictionaryEntry | None:
        return self.entries.get(normalized)

    def candidates_for(self, script: Script) -> CandidateList:
        """Entries a token of the given script may be corrected to, highest trust first."""
        return self.candidates.get(script, ())

    def script_counts(self) -> dict[str, int]:
        counts = {Script.CYRILLIC.value: 0, Script.LATIN.value: 0, Script.MIXED.value: 0}
        for entry in self.entries.values():
            counts[entry.script.value] = counts.get(entry.script.value, 0) + 1
        return counts


class DictionaryIndex:
    """Owns the current dictionary snapshot and reloads it on TTL expiry.

    Readers grab the snapshot reference without locking; a reload builds a new
    snapshot and swaps the reference in one assignment. Reloads are serialized
    by a lock, and a caller that queued behind an in-flight reload reuses its
    result instead of loading again.
    """

    def __init__(
        self,
        loader: Callable[[], Iterable[DictionaryEntry]],
        *,
        ttl_s: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._loader = loader
        self._ttl_s = settings.dictionary_ttl_s if ttl_s is None else ttl_s
        self._clock = clock
        self._snapshot: DictionarySnapshot | None = None
        self._refresh_lock = threading.Lock()
        self._completed_reloads = 0

    @property
    def snapshot(self) -> DictionarySnapshot | None:
        return self._snapshot

    def is_fresh(self, snapshot: DictionarySnapshot) -> bool:
        return (self._clock() - snapshot.loaded_at) < self._ttl_s

    def get_snapshot(self, force_refresh: bool = False) -> DictionarySnapshot:
        snapshot = self._snapshot
        if not force_refresh and snapshot is not None and self.is_fresh(snapshot):
            return snapshot

        observed_reloads = self._completed_reloads
        with self._refresh_lock:
            current = self._snapshot
            if current is not None and self._completed_reloads != observed_reloads:
                return current
            return self._reload(current)

    def _reload(self, previous: DictionarySnapshot | None) -> DictionarySnapshot:
        started = self._clock()
        try:
            rows = list(self._loader())
        except Exception as exc:
            if previous is None:
                logger.exception("dictionary load failed and no snapshot is cached")
                raise DictionaryUnavailable(f"dictionary could not be loaded: {exc}") from exc
            logger.exception(
                "dictionary reload failed; serving stale snapshot loaded_at=%s words=%s",
                previous.loaded_at,
                len(previous),
            )
            stale = previous if previous.stale else replace(previous, stale=True)
            self._snapshot = stale
            return stale
        finally:
            self._completed_reloads += 1

        snapshot = DictionarySnapshot.build(rows, loaded_at=started)
        self._snapshot = snapshot

        counts = snapshot.script_counts()
        logger.info(
            "loaded dictionary: rows=%s words=%s cyrillic=%s latin=%s mixed=%s in %.3fs",
            len(rows),
            len(snapshot),
            counts["cyrillic"],
            counts["latin"],
            counts["mixed"],
            self._clock() - started,
        )
        return snapshot
