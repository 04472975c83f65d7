import logging
from typing import Any, Iterable

from app.common.db import get_conn
from app.spellcheck.dictionary import DictionaryEntry
from app.spellcheck.script import Script, detect_script

logger = logging.getLogger(__name__)

CHECKED_WORDS_SQL = """
SELECT word, script, trust_score
FROM words
WHERE is_checked
ORDER BY trust_score DESC, id ASC
"""

# Labels used by the legacy word collection alongside the canonical ones.
SCRIPT_ALIASES = {
    "latin": Script.LATIN,
    "lotin": Script.LATIN,
    "cyrillic": Script.CYRILLIC,
    "kiril": Script.CYRILLIC,
    "mixed": Script.MIXED,
}


def parse_row(row: tuple[Any, ...]) -> DictionaryEntry | None:
    word, raw_script, trust_score = row
    word = (word or "").strip()
    if not word:
        return None

    script = SCRIPT_ALIASES.get((raw_script or "").strip().lower())
    if script is None:
        detected = detect_script(word)
        script = Script.MIXED if detected is Script.UNKNOWN else detected

    trust = 100 if trust_score is None else int(trust_score)
    return DictionaryEntry(word=word, script=script, trust_score=trust)


def parse_rows(rows: Iterable[tuple[Any, ...]]) -> list[DictionaryEntry]:
    entries: list[DictionaryEntry] = []
    for row in rows:
        entry = parse_row(row)
        if entry is not None:
            entries.append(entry)
    return entries


def load_checked_words() -> list[DictionaryEntry]:
    """Read every checked word, most trusted first."""
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute(CHECKED_WORDS_SQL)
            rows = cur.fetchall()

    entries = parse_rows(rows)
    logger.info("fetched %s checked words (%s rows)", len(entries), len(rows))
    return entries


INSERT_WORD_SQL = """
INSERT INTO words(word, script, trust_score, is_checked, owner)
VALUES (%s, %s, %s, TRUE, %s)
"""


def insert_words(entries: Iterable[DictionaryEntry], owner: str = "System") -> int:
    rows = [(entry.word, entry.script.value, entry.trust_score, owner) for entry in entries]
    if not rows:
        return 0
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.executemany(INSERT_WORD_SQL, rows)
    logger.info("inserted %s words for owner=%s", len(rows), owner)
    return len(rows)
