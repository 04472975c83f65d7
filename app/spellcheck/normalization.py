import re
import unicodedata

# Letters of the Karakalpak 2016 Latin alphabet that are outside ASCII, plus the
# Turkic-style variants still found in older texts.
LATIN_EXTENDED_LOWER = "áǵíıńóúşğöüçñä"
LATIN_EXTENDED_UPPER = "ÁǴÍŃÓÚŞĞÖÜÇÑÄİ"

CYRILLIC_EXTENDED_LOWER = "әғқңөүўҳһі"
CYRILLIC_EXTENDED_UPPER = "ӘҒҚҢӨҮЎҲҺІ"

LATIN_LOWER = "a-z" + LATIN_EXTENDED_LOWER
LATIN_LETTERS = "A-Za-z" + LATIN_EXTENDED_LOWER + LATIN_EXTENDED_UPPER
CYRILLIC_LOWER = "а-яё" + CYRILLIC_EXTENDED_LOWER
CYRILLIC_LETTERS = "А-Яа-яЁё" + CYRILLIC_EXTENDED_LOWER + CYRILLIC_EXTENDED_UPPER

WORD_LETTERS = LATIN_LETTERS + CYRILLIC_LETTERS
COMBINING_MARKS = "\u0300-\u036f"

# "I" folds to "i" like every other ASCII letter; the Karakalpak capital of "ı" is "Í".
CASE_OVERRIDES = {
    "İ": "i",
    "Í": "ı",
    "í": "ı",
}

# Capital forms that str.upper() gets wrong for this alphabet.
UPPERCASE_OVERRIDES = {
    "ı": "Í",
}

_NON_WORD_RE = re.compile(f"[^{LATIN_LOWER}{CYRILLIC_LOWER}]")


def fold_case(text: str) -> str:
    folded: list[str] = []
    for char in text:
        override = CASE_OVERRIDES.get(char)
        folded.append(override if override is not None else char.lower())
    return "".join(folded)


def upper_case(text: str) -> str:
    return "".join(UPPERCASE_OVERRIDES.get(char, char.upper()) for char in text)


def normalize_word(word: str) -> str:
    """Canonical comparison form: NFC, case-folded, letters of either script only."""
    if not word:
        return ""
    composed = unicodedata.normalize("NFC", word)
    return _NON_WORD_RE.sub("", fold_case(composed))
