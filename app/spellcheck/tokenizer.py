import re
from dataclasses import dataclass

from app.spellcheck.normalization import COMBINING_MARKS, WORD_LETTERS, normalize_word

# A word starts with a letter of either script; combining accents may follow so
# that decomposed input ("n" + U+0301) stays inside one token.
TOKEN_RE = re.compile(f"[{WORD_LETTERS}][{WORD_LETTERS}{COMBINING_MARKS}]*")


@dataclass(frozen=True)
class Token:
    text: str
    normalized: str
    start: int
    end: int


def tokenize(text: str) -> list[Token]:
    """Split text into word tokens.

    Offsets are str indices (code points), the same unit used when the
    autocorrector slices the text, so multi-byte letters never shift spans.
    """
    tokens: list[Token] = []
    for match in TOKEN_RE.finditer(text or ""):
        word = match.group(0)
        tokens.append(
            Token(
                text=word,
                normalized=normalize_word(word),
                start=match.start(),
                end=match.end(),
            )
        )
    return tokens
