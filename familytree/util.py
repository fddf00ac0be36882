from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def _compact_json(value: Any) -> Any:
    """Turn records into JSON-like data and drop null/empty fields.

    Rules:
    - pydantic models are dumped by alias first (e.g. ``birthPlace``)
    - Drop None, blank strings, empty lists and dicts
    - Keep 0/False
    """

    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)

    if value is None:
        return None

    if isinstance(value, str):
        s = value.strip()
        return s if s else None

    if isinstance(value, (list, tuple)):
        items = [v for v in (_compact_json(item) for item in value) if v is not None]
        return items or None

    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            vv = _compact_json(v)
            if vv is not None:
                out[k] = vv
        return out or None

    return value


def _compact_list_slots(values: list[Any]) -> list[Any]:
    # Positional lists (e.g. spouse slots) must keep blanks as None.
    return [_compact_json(v) for v in values]
