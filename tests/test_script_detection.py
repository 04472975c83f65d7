from app.spellcheck.script import Script, count_letters, detect_script


def test_detects_dominant_script() -> None:
    assert detect_script("Қарақалпақстан Республикасы") == Script.CYRILLIC
    assert detect_script("Qaraqalpaqstan Respublikası") == Script.LATIN


def test_mixed_when_no_script_dominates() -> None:
    assert detect_script("Hello мир") == Script.MIXED
    assert detect_script("Қарақалпақ tili ҳәм lotin") == Script.MIXED


def test_unknown_below_letter_threshold() -> None:
    assert detect_script("") == Script.UNKNOWN
    assert detect_script("ok") == Script.UNKNOWN
    assert detect_script("12345 !!") == Script.UNKNOWN


def test_loanword_does_not_flip_dominant_script() -> None:
    assert detect_script("Бүгин биз internet арқалы сөйлестик ҳәм жазыстық ўақытта") == Script.CYRILLIC


def test_extended_latin_letters_count_as_latin() -> None:
    stats = count_letters("ǵáń")
    assert stats.latin == 3
    assert stats.cyrillic == 0


def test_statistics_percentages() -> None:
    stats = count_letters("abc где")
    assert stats.total == 6
    assert stats.percentage(Script.LATIN) == 50.0
    assert stats.percentage(Script.CYRILLIC) == 50.0
    assert count_letters("").percentage(Script.LATIN) == 0.0
