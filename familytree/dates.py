from __future__ import annotations

from datetime import date
import re

try:
    from .models import PartialDate
except ImportError:  # pragma: no cover
    # Support running with CWD=familytree (e.g., `python -m uvicorn main:app`).
    from models import PartialDate

_MONTH_ABBREV = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_YEAR_RE = re.compile(r"\b(\d{4})\b")


def _year_from_text(s: str | None) -> int | None:
    if not s:
        return None
    # Heuristic: look for any 4-digit year.
    m = _YEAR_RE.search(str(s))
    if not m:
        return None
    return int(m.group(1))


def _effective_year(d: PartialDate | None) -> int | None:
    if d is None:
        return None
    if d.year:
        return d.year
    if d.range is not None:
        return _year_from_text(d.range.from_) or _year_from_text(d.range.to)
    return None


def _birth_sort_key(dob: PartialDate | None) -> tuple[int, int, int, int]:
    """Ascending sort key for siblings.

    Dated people sort before undated ones; missing month/day count as 1 (same as
    the persons listing). Undated keys are all equal so a stable sort keeps their
    input order.
    """

    year = _effective_year(dob)
    if dob is None or year is None:
        return (1, 0, 0, 0)
    return (0, year, dob.month or 1, dob.day or 1)


def _month_abbrev(month: int | None) -> str:
    if not month or not 1 <= month <= 12:
        return ""
    return _MONTH_ABBREV[month - 1]


def _range_text(d: PartialDate) -> str | None:
    if d.range is None or not (d.range.from_ or d.range.to):
        return None
    return f"{d.range.from_ or '?'}–{d.range.to or '?'}"


def _format_partial_date(d: PartialDate | None) -> str:
    """Long form used on marriage labels and detail views."""

    if d is None:
        return ""
    approx = " (approx)" if d.approximate else ""

    r = _range_text(d)
    if r is not None:
        return f"{r}{approx}"

    if d.year and d.month and d.day:
        return f"{d.day:02d} {_month_abbrev(d.month)} {d.year}{approx}"
    if d.year and d.month:
        return f"{d.month}/{d.year}{approx}"
    if d.year:
        return f"{d.year}{approx}"
    return d.notes or ""


def _format_compact_date(d: PartialDate | None) -> str:
    if d is None:
        return ""

    r = _range_text(d)
    if r is not None:
        return r

    if d.year and d.month and d.day:
        return f"{d.day} {_month_abbrev(d.month)} {d.year}"
    if d.year and d.month:
        return f"{_month_abbrev(d.month)} {d.year}"
    if d.year:
        return str(d.year)
    return ""


def _format_life_span(dob: PartialDate | None, death_date: PartialDate | None) -> str:
    birth = _format_compact_date(dob)
    death = _format_compact_date(death_date)
    if birth and death:
        return f"{birth} - {death}"
    if birth:
        return birth
    if death:
        return f"? - {death}"
    return ""


def _is_living(death_date: PartialDate | None) -> bool:
    return death_date is None or (not death_date.year and death_date.range is None)


def _calculate_age(
    dob: PartialDate | None,
    death_date: PartialDate | None,
    *,
    today: date | None = None,
) -> int | None:
    if dob is None or not dob.year:
        return None
    t = today or date.today()
    end_year = (death_date.year if death_date is not None else None) or t.year
    return end_year - dob.year
