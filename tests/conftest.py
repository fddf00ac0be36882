from __future__ import annotations

from datetime import date
from typing import Any

import pytest


@pytest.fixture()
def fixed_today() -> date:
    # Keep tests deterministic.
    return date(2026, 1, 20)


@pytest.fixture()
def two_generation_family() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """p1+p2 -> p3; p3+p4 -> p5 (2010), p6 (2012)."""

    persons = [
        {"id": "p1", "name": "Anna", "gender": "female", "dob": {"year": 1950}},
        {"id": "p2", "name": "Bert", "gender": "male", "dob": {"year": 1948}},
        {"id": "p3", "name": "Carl", "gender": "male", "dob": {"year": 1980, "month": 4}},
        {"id": "p4", "name": "Dora", "gender": "female"},
        {"id": "p5", "name": "Emma", "gender": "female", "dob": {"year": 2010}},
        {"id": "p6", "name": "Finn", "gender": "male", "dob": {"year": 2012}},
    ]
    marriages = [
        {"id": "m1", "spouses": ["p1", "p2"], "children": ["p3"]},
        {"id": "m2", "spouses": ["p3", "p4"], "children": ["p6", "p5"]},
    ]
    return persons, marriages
