from __future__ import annotations

from datetime import date
from typing import Any

try:
    from .dates import _calculate_age, _format_life_span, _format_partial_date, _is_living
    from .models import Marriage, Person
    from .util import _compact_json, _compact_list_slots
except ImportError:  # pragma: no cover
    # Support running with CWD=familytree (e.g., `python -m uvicorn main:app`).
    from dates import _calculate_age, _format_life_span, _format_partial_date, _is_living
    from models import Marriage, Person
    from util import _compact_json, _compact_list_slots


def _person_label(p: Person, *, today: date | None = None) -> str:
    age = _calculate_age(p.dob, p.death_date, today=today)
    return f"{p.name} ({age})" if age else p.name


def _person_summary(p: Person | None, *, today: date | None = None) -> dict[str, Any] | None:
    if p is None:
        return None
    return _compact_json(
        {
            "id": p.id,
            "name": p.name,
            "gender": p.gender,
            "label": _person_label(p, today=today),
            "life_span": _format_life_span(p.dob, p.death_date),
        }
    )


def _person_payload(p: Person, *, today: date | None = None) -> dict[str, Any]:
    out = _compact_json(
        {
            "person": p,
            "label": _person_label(p, today=today),
            "life_span": _format_life_span(p.dob, p.death_date),
            "age": _calculate_age(p.dob, p.death_date, today=today),
            "is_living": _is_living(p.death_date),
        }
    )
    return out or {}


def _marriage_payload(m: Marriage, *, today: date | None = None) -> dict[str, Any]:
    date_str = _format_partial_date(m.date)
    # Years since the wedding (or until a dated end).
    age = _calculate_age(m.date, None, today=today)
    out = _compact_json(
        {
            "marriage": m.model_dump(by_alias=True, exclude={"children"}),
            "label": f"⚭ {date_str}".strip(),
            "age": age,
            "status": m.status,
            "place": m.place,
            "children_total": len(dict.fromkeys(m.children)),
        }
    )
    return out or {}


def _spouse_pair_payload(
    m: Marriage,
    spouses: list[Person | None],
    *,
    today: date | None = None,
) -> dict[str, Any]:
    """Payload for the joint spouse card.

    Unresolved spouses stay as ``None`` slots so the renderer can draw a blank half.
    """

    return {
        "marriage_id": m.id,
        "spouses": _compact_list_slots([_person_summary(s, today=today) for s in spouses]),
    }
