from __future__ import annotations

from datetime import date

from familytree.dates import (
    _birth_sort_key,
    _calculate_age,
    _format_compact_date,
    _format_life_span,
    _format_partial_date,
    _is_living,
    _year_from_text,
)
from familytree.models import PartialDate


def _d(**kw: object) -> PartialDate:
    return PartialDate.model_validate(kw)


def test_sort_key_defaults_missing_month_and_day_to_one() -> None:
    assert _birth_sort_key(_d(year=1990)) == _birth_sort_key(_d(year=1990, month=1, day=1))
    assert _birth_sort_key(_d(year=1990, month=3)) < _birth_sort_key(_d(year=1990, month=3, day=2))


def test_sort_key_puts_undated_after_dated() -> None:
    assert _birth_sort_key(_d(year=2050)) < _birth_sort_key(None)
    assert _birth_sort_key(_d(notes="unknown")) == _birth_sort_key(None)


def test_sort_key_recovers_year_from_range() -> None:
    assert _birth_sort_key(_d(range={"from": "abt 1801", "to": "1803"})) == (0, 1801, 1, 1)


def test_year_from_text() -> None:
    assert _year_from_text("before 1750") == 1750
    assert _year_from_text("sometime") is None
    assert _year_from_text(None) is None


def test_format_partial_date_variants() -> None:
    assert _format_partial_date(_d(year=1960, month=5, day=1)) == "01 May 1960"
    assert _format_partial_date(_d(year=1960, month=5)) == "5/1960"
    assert _format_partial_date(_d(year=1960, approximate=True)) == "1960 (approx)"
    assert _format_partial_date(_d(range={"from": "1995", "to": "1996"})) == "1995–1996"
    assert _format_partial_date(_d(range={"to": "1996"})) == "?–1996"
    assert _format_partial_date(_d(notes="Estimated")) == "Estimated"
    assert _format_partial_date(None) == ""


def test_format_compact_date_and_life_span() -> None:
    assert _format_compact_date(_d(year=2010, month=3, day=12)) == "12 Mar 2010"
    assert _format_compact_date(_d(year=2010, month=3)) == "Mar 2010"
    assert _format_compact_date(_d(notes="only notes")) == ""

    assert _format_life_span(_d(year=1900), _d(year=1980)) == "1900 - 1980"
    assert _format_life_span(_d(year=1900), None) == "1900"
    assert _format_life_span(None, _d(year=1980)) == "? - 1980"
    assert _format_life_span(None, None) == ""


def test_age_uses_death_year_or_today(fixed_today: date) -> None:
    assert _calculate_age(_d(year=1960), None, today=fixed_today) == 66
    assert _calculate_age(_d(year=1900), _d(year=1980), today=fixed_today) == 80
    assert _calculate_age(_d(month=4), None, today=fixed_today) is None
    assert _calculate_age(None, None, today=fixed_today) is None


def test_is_living() -> None:
    assert _is_living(None) is True
    assert _is_living(_d(notes="lost at sea?")) is True
    assert _is_living(_d(year=1944)) is False
    assert _is_living(_d(range={"from": "1944"})) is False
