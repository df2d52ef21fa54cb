from datetime import date

from vies.codecs import (
    DATE_SENTINEL,
    GRADE_ABSENT,
    GRADE_MALFORMED,
    Grade,
    date_to_sort_value,
    grade_to_sort_value,
    number_sort_value,
    parse_date,
    parse_grade,
    text_sort_value,
)


def test_grade_progression():
    grades = ["-", "5", "5+", "6a", "6a+", "6b", "7c+", "8a"]
    values = [grade_to_sort_value(g) for g in grades]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_grade_values():
    assert grade_to_sort_value("6a") == 610
    assert grade_to_sort_value("6A+") == 615
    assert grade_to_sort_value(" 7c ") == 730
    assert grade_to_sort_value("5+") == 505
    assert grade_to_sort_value("4") == 400


def test_grade_sentinels_are_distinct():
    assert grade_to_sort_value("") == GRADE_ABSENT
    assert grade_to_sort_value("-") == GRADE_ABSENT
    assert grade_to_sort_value(None) == GRADE_ABSENT
    assert grade_to_sort_value("IV+") == GRADE_MALFORMED
    assert grade_to_sort_value("6d") == GRADE_MALFORMED
    assert GRADE_ABSENT < GRADE_MALFORMED < grade_to_sort_value("1")


def test_parse_grade_reports_failure():
    assert parse_grade("6b+") == Grade(6, "B", True)
    assert parse_grade("6") == Grade(6, "", False)
    assert parse_grade("sis") is None
    assert parse_grade("6a++") is None


def test_dates_sort_above_sentinel():
    early = date_to_sort_value("01/01/2020")
    later = date_to_sort_value("15/06/2021")
    assert DATE_SENTINEL < early < later
    assert date_to_sort_value("-") == DATE_SENTINEL
    assert date_to_sort_value("") == DATE_SENTINEL
    assert date_to_sort_value("01/01/1950") > date_to_sort_value("-")


def test_parse_date():
    assert parse_date("1/5/2021") == date(2021, 5, 1)
    assert parse_date("01/05/99") == date(1999, 5, 1)
    assert parse_date("2021-05-01") is None
    assert parse_date("1/2") is None
    assert parse_date("31/02/2021") == date(2021, 3, 3)
    assert parse_date("aa/bb/cccc") is None


def test_malformed_date_is_sentinel():
    assert date_to_sort_value("ahir") == DATE_SENTINEL
    assert date_to_sort_value("1/2/3/4") == DATE_SENTINEL


def test_number_coercion():
    assert number_sort_value("15") == 15.0
    assert number_sort_value(" 12.5 ") == 12.5
    assert number_sort_value("30m") == 30.0
    assert number_sort_value("-") == 0.0
    assert number_sort_value("") == 0.0
    assert number_sort_value(None) == 0.0


def test_text_key_ignores_case_and_accents():
    assert text_sort_value("Àgulla") == text_sort_value("agulla")
    assert text_sort_value("Èxit") < text_sort_value("Fissura")
    assert text_sort_value(" Cova ") == text_sort_value("cova")


def test_impossible_dates_roll_over():
    assert parse_date("31/04/2021") == date(2021, 5, 1)
    assert parse_date("0/3/2021") == date(2021, 2, 28)
    assert parse_date("1/13/2020") == date(2021, 1, 1)
    assert parse_date("1/0/2021") == date(2020, 12, 1)
    between = date_to_sort_value("31/04/2021")
    assert date_to_sort_value("30/04/2021") < between < date_to_sort_value("02/05/2021")


def test_punctuation_sorts_before_letters():
    assert text_sort_value("Col·lecció") < text_sort_value("Colla")
    assert text_sort_value("Via 2") < text_sort_value("Via A")
    assert text_sort_value("Ca l'Isidre") < text_sort_value("Cabana")
