from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

NodeKind = Literal["person", "marriage", "spouse-pair"]
EdgeKind = Literal["union", "descent"]


# ---------------------------------------------------------------------------
# Input records (read-only to the layout engine)
# ---------------------------------------------------------------------------

class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DateRange(_Record):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None


class PartialDate(_Record):
    """A genealogical date that may be missing its day/month, approximate, or a range."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    approximate: bool = False
    range: Optional[DateRange] = None
    notes: Optional[str] = None


class Person(_Record):
    id: str
    name: str
    gender: Optional[Literal["male", "female", "other"]] = None
    dob: Optional[PartialDate] = None
    birth_place: Optional[str] = Field(default=None, alias="birthPlace")
    death_date: Optional[PartialDate] = Field(default=None, alias="deathDate")
    death_place: Optional[str] = Field(default=None, alias="deathPlace")


class Marriage(_Record):
    id: str
    # Exactly two distinct ids upstream; layout tolerates anything else.
    spouses: list[str]
    date: Optional[PartialDate] = None
    place: Optional[str] = None
    status: Optional[Literal["married", "divorced", "widowed"]] = None
    children: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Output graph (recomputed per layout call)
# ---------------------------------------------------------------------------

def person_key(person_id: str) -> str:
    return f"person:{person_id}"


def marriage_key(marriage_id: str) -> str:
    return f"marriage:{marriage_id}"


def spouse_pair_key(marriage_id: str) -> str:
    return f"spouse-pair:{marriage_id}"


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class LayoutNode:
    id: str
    kind: NodeKind
    position: Position
    payload: dict[str, Any] = field(default_factory=dict)
    # Spouse person nodes point at the spouse-pair node that absorbs them.
    parent_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        if self.parent_id is None:
            out.pop("parent_id")
        return out


@dataclass(frozen=True)
class LayoutEdge:
    id: str
    source: str
    target: str
    kind: EdgeKind

    @property
    def animated(self) -> bool:
        return self.kind == "descent"

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["animated"] = self.animated
        return out


@dataclass(frozen=True)
class TreeLayout:
    nodes: list[LayoutNode]
    edges: list[LayoutEdge]
    # Raw node-key -> position map, including ids that have no person record.
    positions: dict[str, Position]

    def node(self, node_id: str) -> LayoutNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
