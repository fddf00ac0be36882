from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

try:
    from ..config import load_layout_config
    from ..demo_data import DEMO_MARRIAGES, DEMO_PERSONS
    from ..layout import layout_family_tree
    from ..models import Marriage, Person
except ImportError:  # pragma: no cover
    # Support running with CWD=familytree (e.g., `python -m uvicorn main:app`).
    from config import load_layout_config
    from demo_data import DEMO_MARRIAGES, DEMO_PERSONS
    from layout import layout_family_tree
    from models import Marriage, Person

router = APIRouter(prefix="/tree", tags=["tree"])

# Hard guardrails to avoid huge requests.
_MAX_PERSONS = 20_000
_MAX_MARRIAGES = 20_000


class LayoutRequest(BaseModel):
    persons: list[Person] = Field(default_factory=list)
    marriages: list[Marriage] = Field(default_factory=list)


def _layout_response(persons: list[Any], marriages: list[Any]) -> dict[str, Any]:
    result = layout_family_tree(persons, marriages, config=load_layout_config())
    out = result.to_dict()
    out["total"] = {"nodes": len(result.nodes), "edges": len(result.edges)}
    return out


@router.post("/layout")
def tree_layout(payload: LayoutRequest) -> dict[str, Any]:
    """Lay out a family tree snapshot for the diagram view.

    The client posts the full persons/marriages collections it currently holds
    and gets back positioned person, marriage and spouse-pair nodes plus
    union/descent edges.
    """

    if len(payload.persons) > _MAX_PERSONS or len(payload.marriages) > _MAX_MARRIAGES:
        raise HTTPException(status_code=413, detail="family tree too large to lay out")
    return _layout_response(payload.persons, payload.marriages)


@router.get("/demo")
def tree_demo() -> dict[str, Any]:
    """Layout of the bundled demo family (no database needed)."""
    return _layout_response(DEMO_PERSONS, DEMO_MARRIAGES)
