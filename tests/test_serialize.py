from __future__ import annotations

from datetime import date

from familytree.models import Marriage, Person
from familytree.serialize import _marriage_payload, _person_payload, _spouse_pair_payload


def test_person_payload_is_compact_and_labelled(fixed_today: date) -> None:
    p = Person.model_validate(
        {"id": "p1", "name": "John Doe", "gender": "male", "dob": {"year": 1960, "month": 5, "day": 10}, "birthPlace": "New York"}
    )
    out = _person_payload(p, today=fixed_today)

    assert out["label"] == "John Doe (66)"
    assert out["life_span"] == "10 May 1960"
    assert out["age"] == 66
    assert out["is_living"] is True
    assert out["person"]["birthPlace"] == "New York"
    # Empty fields are dropped, False is kept.
    assert "deathDate" not in out["person"]
    assert out["person"]["dob"]["approximate"] is False


def test_marriage_payload(fixed_today: date) -> None:
    m = Marriage(id="m1", spouses=["p1", "p2"], children=["c", "c", "d"], status="divorced", place="Austin")
    out = _marriage_payload(m, today=fixed_today)

    assert out["label"] == "⚭"
    assert out["status"] == "divorced"
    assert out["children_total"] == 2
    assert "children" not in out["marriage"]
    assert "age" not in out


def test_spouse_pair_payload_keeps_blank_slots(fixed_today: date) -> None:
    m = Marriage(id="m1", spouses=["p1", "missing"])
    p1 = Person(id="p1", name="Ann")
    out = _spouse_pair_payload(m, [p1, None], today=fixed_today)

    assert out["marriage_id"] == "m1"
    assert out["spouses"] == [{"id": "p1", "name": "Ann", "label": "Ann"}, None]
