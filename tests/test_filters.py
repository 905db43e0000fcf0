"""
Unit tests for directory/filters.py

Covers multi-field matching, case-insensitivity, ordering and the
empty-term identity. No I/O.
"""
import pytest

from directory.filters import filter_advocates, matches, searchable_values
from directory.seed import seed_advocates
from conftest import make_advocate


# ── matches ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("term", [
    "ann", "lee", "denver", "md", "pediatrics", "5",
])
def test_matches_each_field(term):
    assert matches(make_advocate(), term)


def test_matches_any_one_specialty():
    a = make_advocate(specialties=("Bipolar", "Chronic pain", "Bipolar"))
    assert matches(a, "chronic")
    assert not matches(a, "pediatrics")


def test_matches_years_as_decimal_string():
    a = make_advocate(years=12)
    assert matches(a, "12")
    assert matches(a, "1")
    assert not matches(a, "13")


def test_matches_raw_phone_digits_not_formatting():
    a = make_advocate(phone="5551234567")
    assert matches(a, "555")
    assert not matches(a, "(555)")


def test_matches_is_case_insensitive():
    a = make_advocate(city="San Francisco")
    assert matches(a, "SAN FRAN")
    assert matches(a, "san fran")
    assert matches(a, "sAn FrAn")


def test_matches_substring_only():
    assert not matches(make_advocate(), "zzz")


def test_empty_term_matches_everything():
    assert matches(make_advocate(), "")


def test_searchable_values_keeps_specialty_order():
    a = make_advocate(specialties=("B", "A"))
    values = searchable_values(a)
    assert values.index("B") < values.index("A")


# ── filter_advocates ──────────────────────────────────────────────────────────

def test_empty_term_is_identity(advocates):
    assert filter_advocates(advocates, "") == advocates


def test_boston_scenario(advocates):
    result = filter_advocates(advocates, "bos")
    assert [a.city for a in result] == ["Boston"]


def test_filter_preserves_original_order(advocates):
    result = filter_advocates(advocates, "j")
    assert [a.id for a in result] == [1, 2, 3]


def test_filter_or_across_fields(advocates):
    # "phd" hits Jane's degree and nothing else
    assert [a.id for a in filter_advocates(advocates, "phd")] == [2]
    # "10" hits John's years
    assert [a.id for a in filter_advocates(advocates, "10")] == [1]


@pytest.mark.parametrize("term", ["bos", "o", "md", "cardiology", "xyz", ""])
def test_filter_is_idempotent(advocates, term):
    once = filter_advocates(advocates, term)
    assert filter_advocates(once, term) == once


@pytest.mark.parametrize("term", ["Cardiology", "CARDIOLOGY", "cardiology"])
def test_filter_case_variants_agree(advocates, term):
    assert filter_advocates(advocates, term) == filter_advocates(advocates, "cardiology")


def test_filter_no_match_is_empty(advocates):
    assert filter_advocates(advocates, "nowhere") == ()


def test_digits_match_raw_phone_of_every_seed_record():
    seed = seed_advocates()
    assert filter_advocates(seed, "555") == seed
