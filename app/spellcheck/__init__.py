from .dictionary import DictionaryEntry, DictionaryIndex, DictionarySnapshot
from .distance import MAX_EDIT_DISTANCE, confidence_for_distance, levenshtein_distance
from .engine import (
    AutoCorrectResult,
    Correction,
    SearchHit,
    SpellCheckerEngine,
    SpellResult,
    Suggestion,
    TextStatistics,
    apply_case,
    auto_correct,
    check,
    fuzzy_search,
    suggest,
)
from .normalization import fold_case, normalize_word, upper_case
from .script import Script, ScriptStatistics, count_letters, detect_script
from .tokenizer import TOKEN_RE, Token, tokenize

__all__ = [
    "AutoCorrectResult",
    "Correction",
    "DictionaryEntry",
    "DictionaryIndex",
    "DictionarySnapshot",
    "MAX_EDIT_DISTANCE",
    "Script",
    "ScriptStatistics",
    "SearchHit",
    "SpellCheckerEngine",
    "SpellResult",
    "Suggestion",
    "TOKEN_RE",
    "TextStatistics",
    "Token",
    "apply_case",
    "auto_correct",
    "check",
    "confidence_for_distance",
    "count_letters",
    "detect_script",
    "fold_case",
    "fuzzy_search",
    "levenshtein_distance",
    "normalize_word",
    "upper_case",
    "suggest",
    "tokenize",
]
