"""Canonical Karakalpak Cyrillic <-> Latin rules (2016 Latin alphabet).

Keys are lowercase; the transliterator restores case from the source text.
Sequence tables hold 2-4 character source windows that must be tried, longest
first, before the single-character tables.
"""

from types import MappingProxyType

CYRILLIC_TO_LATIN = MappingProxyType(
    {
        "а": "a",
        "ә": "á",
        "б": "b",
        "в": "v",
        "г": "g",
        "ғ": "ǵ",
        "д": "d",
        "е": "e",
        "ё": "yo",
        "ж": "j",
        "з": "z",
        "и": "i",
        "і": "i",
        "й": "y",
        "к": "k",
        "қ": "q",
        "л": "l",
        "м": "m",
        "н": "n",
        "ң": "ń",
        "о": "o",
        "ө": "ó",
        "п": "p",
        "р": "r",
        "с": "s",
        "т": "t",
        "у": "u",
        "ў": "w",
        "ү": "ú",
        "ф": "f",
        "х": "x",
        "ҳ": "h",
        "һ": "h",
        "ц": "c",
        "ч": "ch",
        "ш": "sh",
        "щ": "shch",
        "ъ": "",
        "ы": "ı",
        "ь": "",
        "э": "e",
        "ю": "yu",
        "я": "ya",
    }
)

# Hard/soft sign before a iotated vowel is pronounced as "y" in Russian loans.
CYRILLIC_TO_LATIN_SEQUENCES = MappingProxyType(
    {
        "ъе": "ye",
        "ье": "ye",
        "ъё": "yo",
        "ьё": "yo",
        "ъю": "yu",
        "ью": "yu",
        "ъя": "ya",
        "ья": "ya",
    }
)

LATIN_TO_CYRILLIC = MappingProxyType(
    {
        "a": "а",
        "á": "ә",
        "b": "б",
        "c": "ц",
        "d": "д",
        "e": "е",
        "f": "ф",
        "g": "г",
        "ǵ": "ғ",
        "h": "ҳ",
        "i": "и",
        "ı": "ы",
        "j": "ж",
        "k": "к",
        "l": "л",
        "m": "м",
        "n": "н",
        "ń": "ң",
        "o": "о",
        "ó": "ө",
        "p": "п",
        "q": "қ",
        "r": "р",
        "s": "с",
        "t": "т",
        "u": "у",
        "ú": "ү",
        "v": "в",
        "w": "ў",
        "x": "х",
        "y": "й",
        "z": "з",
        # Turkic-style spellings found in older Latin texts.
        "ä": "ә",
        "ğ": "ғ",
        "ñ": "ң",
        "ö": "ө",
        "ü": "ү",
        "ş": "ш",
        "ç": "ч",
    }
)

LATIN_TO_CYRILLIC_SEQUENCES = MappingProxyType(
    {
        "shch": "щ",
        "sh": "ш",
        "ch": "ч",
        "yu": "ю",
        "ya": "я",
        # Uzbek apostrophe letters.
        "o‘": "ў",
        "oʻ": "ў",
        "o’": "ў",
        "o'": "ў",
        "g‘": "ғ",
        "gʻ": "ғ",
        "g’": "ғ",
        "g'": "ғ",
    }
)

# A plain ASCII apostrophe doubles as a closing quote, so it only marks a letter
# when another letter follows it.
LETTER_FOLLOWED_SEQUENCES = frozenset({"o'", "g'"})
