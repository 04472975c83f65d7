from .engine import (
    Direction,
    RuleSet,
    TransliterationResult,
    Transliterator,
    auto_transliterate,
    transliterate,
)

__all__ = [
    "Direction",
    "RuleSet",
    "TransliterationResult",
    "Transliterator",
    "auto_transliterate",
    "transliterate",
]
