import pytest

from app.spellcheck.script import Script
from app.transliteration.engine import RULES, Direction, RuleSet, Transliterator, auto_transliterate, transliterate

ROUND_TRIP_CORPUS = [
    "Қарақалпақстан Республикасы",
    "Нөкис қаласы",
    "Шымбай ҳәм Хожели",
    "ғәрезсизлик күни",
    "ЧАЙ ИШИП",
    "Ыбырай",
    "объект",
    "щётка",
    "Юлдуз ўзбек",
    "Дүнья, 2024-жыл!",
]


def test_cyrillic_to_latin_canonical_letters() -> None:
    assert transliterate("қарақалпақ", Direction.TO_LATIN) == "qaraqalpaq"


def test_latin_to_cyrillic_canonical_letters() -> None:
    assert transliterate("qaraqalpaqstan", Direction.TO_CYRILLIC) == "қарақалпақстан"


def test_direction_accepts_plain_strings() -> None:
    assert transliterate("qala", "toCyrillic") == "қала"
    assert transliterate("қала", "toLatin") == "qala"


def test_extended_letters() -> None:
    assert transliterate("ғәрезсизлик", Direction.TO_LATIN) == "ǵárezsizlik"
    assert transliterate("ǵárezsizlik", Direction.TO_CYRILLIC) == "ғәрезсизлик"
    assert transliterate("Нөкис", Direction.TO_LATIN) == "Nókis"


def test_digraphs_are_matched_before_single_letters() -> None:
    assert transliterate("shar", Direction.TO_CYRILLIC) == "шар"
    assert transliterate("chay", Direction.TO_CYRILLIC) == "чай"
    assert transliterate("borshch", Direction.TO_CYRILLIC) == "борщ"
    assert transliterate("yulduz", Direction.TO_CYRILLIC) == "юлдуз"


def test_multi_letter_output_for_single_cyrillic_letters() -> None:
    assert transliterate("шаш", Direction.TO_LATIN) == "shash"
    assert transliterate("щ", Direction.TO_LATIN) == "shch"
    assert transliterate("объект", Direction.TO_LATIN) == "obyekt"


def test_case_is_preserved_through_digraphs() -> None:
    assert transliterate("Шымбай", Direction.TO_LATIN) == "Shımbay"
    assert transliterate("Shımbay", Direction.TO_CYRILLIC) == "Шымбай"
    assert transliterate("ЧАЙ", Direction.TO_LATIN) == "CHAY"
    assert transliterate("CHAY", Direction.TO_CYRILLIC) == "ЧАЙ"


def test_dotless_i_has_its_own_capital() -> None:
    assert transliterate("Ыбырай", Direction.TO_LATIN) == "Íbıray"
    assert transliterate("Íbıray", Direction.TO_CYRILLIC) == "Ыбырай"
    assert transliterate("Islam", Direction.TO_CYRILLIC) == "Ислам"


def test_uzbek_apostrophe_letters() -> None:
    assert transliterate("o‘zbek", Direction.TO_CYRILLIC) == "ўзбек"
    assert transliterate("to'g'ri", Direction.TO_CYRILLIC) == "тўғри"
    assert transliterate("tog‘", Direction.TO_CYRILLIC) == "тоғ"


def test_ascii_apostrophe_before_non_letter_is_a_quote() -> None:
    assert transliterate("'salo' dedi", Direction.TO_CYRILLIC) == "'сало' деди"
    assert transliterate("tog'", Direction.TO_CYRILLIC) == "тог'"


def test_unmapped_characters_pass_through() -> None:
    assert transliterate("2024-jıl!", Direction.TO_CYRILLIC) == "2024-жыл!"
    assert transliterate("", Direction.TO_LATIN) == ""


@pytest.mark.parametrize("text", ROUND_TRIP_CORPUS)
def test_round_trip_is_stable_after_first_pass(text: str) -> None:
    once = transliterate(transliterate(text, Direction.TO_LATIN), Direction.TO_CYRILLIC)
    twice = transliterate(transliterate(once, Direction.TO_LATIN), Direction.TO_CYRILLIC)
    assert once == twice


def test_auto_transliterate_flips_script() -> None:
    to_latin = auto_transliterate("Қарақалпақстан Республикасы")
    to_cyrillic = auto_transliterate("Qaraqalpaqstan Respublikası")

    assert to_latin.result == "Qaraqalpaqstan Respublikası"
    assert (to_latin.source, to_latin.target) == (Script.CYRILLIC, Script.LATIN)
    assert to_cyrillic.result == "Қарақалпақстан Республикасы"
    assert (to_cyrillic.source, to_cyrillic.target) == (Script.LATIN, Script.CYRILLIC)
    assert to_latin.confident and to_cyrillic.confident


def test_auto_transliterate_leaves_mixed_text_unchanged() -> None:
    result = auto_transliterate("Қарақалпақ tili ҳәм lotin")

    assert result.result == "Қарақалпақ tili ҳәм lotin"
    assert result.source == Script.MIXED
    assert not result.confident
    assert result.message


def test_custom_rules_are_used() -> None:
    rules = dict(RULES)
    rules[Direction.TO_LATIN] = RuleSet({"ц": "ts"}, {}, Script.CYRILLIC, Script.LATIN)

    assert Transliterator(rules).transliterate("Ц ц", Direction.TO_LATIN) == "Ts ts"
