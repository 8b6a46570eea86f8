from __future__ import annotations

import pytest

from lessons_api.domain.search import build_query, parse_number

COOKING = {"subject": "Cooking Class", "price": 25, "location": "Kitchen Lab", "spaces": 10, "description": "Learn to cook delicious meals."}
DEBATE = {"subject": "Debate Competition", "price": 15.0, "location": "Auditorium", "spaces": 20, "description": "Sharpen your public speaking skills."}


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_blank_query_builds_nothing(raw):
    assert build_query(raw) is None


def test_query_is_trimmed_and_case_insensitive():
    query = build_query("  cOOking ")
    assert query.text == "cOOking"
    assert query.matches(COOKING)
    assert not query.matches(DEBATE)


def test_matches_any_of_the_text_fields():
    assert build_query("auditorium").matches(DEBATE)
    assert build_query("public speaking").matches(DEBATE)
    assert not build_query("kitchen").matches(DEBATE)


def test_regex_metacharacters_are_literal():
    # "Kitchen Lab" would match the pattern a+b if it were interpreted.
    assert not build_query("a+b").matches(COOKING)
    assert not build_query("Coo.*ing").matches(COOKING)
    assert not build_query("(").matches(COOKING)
    assert build_query("Lab").matches(COOKING)


def test_literal_metacharacters_match_themselves():
    doc = {"subject": "C++ (intro)", "description": "", "location": ""}
    assert build_query("c++ (").matches(doc)


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12.0), ("-3.5", -3.5), (".5", 0.5), ("1e3", 1000.0), ("+7", 7.0), ("25.", 25.0)],
)
def test_parse_number_accepts_decimal_literals(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1_000", "12abc", "nan", "inf", "0x10", "1 2", "."])
def test_parse_number_rejects_everything_else(raw):
    assert parse_number(raw) is None


def test_numeric_query_matches_price_or_spaces():
    assert build_query("25").matches(COOKING)
    assert build_query("10").matches(COOKING)
    assert build_query("15").matches(DEBATE)
    assert not build_query("15").matches(COOKING)


def test_numeric_match_ignores_booleans():
    doc = {"subject": "", "description": "", "location": "", "price": True, "spaces": 0}
    assert not build_query("1").matches(doc)


def test_mongo_filter_unions_text_and_numbers():
    clauses = build_query("25").to_mongo()["$or"]
    assert {"subject": {"$regex": "25", "$options": "i"}} in clauses
    assert {"price": 25.0} in clauses
    assert {"spaces": 25.0} in clauses
    assert len(build_query("music").to_mongo()["$or"]) == 3


def test_integral_numbers_come_back_as_ints():
    assert isinstance(parse_number("25"), int)
    assert isinstance(parse_number("2.5"), float)
    # Too wide for a 64-bit integer; stays a float so the Mongo filter can encode it.
    assert isinstance(parse_number("1e300"), float)
