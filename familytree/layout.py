"""Family tree layout: persons + marriages -> positioned node/edge graph.

Generations stack vertically, two rows per union (spouse-pair row, marriage
row) above the children row. Siblings are ordered by birth date and laid out
left to right so that sibling subtrees never overlap.

The traversal is a depth-first walk from root marriages (marriages whose
spouses are nobody's child). Repeated or second marriages make the family
graph cyclic; a visited set cuts those cycles and reserves a one-slot stub
instead of recursing again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Sequence
from urllib.parse import quote

from pydantic import BaseModel

try:
    from .config import LayoutConfig
    from .dates import _birth_sort_key
    from .models import (
        LayoutEdge,
        LayoutNode,
        Marriage,
        Person,
        Position,
        TreeLayout,
        marriage_key,
        person_key,
        spouse_pair_key,
    )
    from .serialize import _marriage_payload, _person_payload, _spouse_pair_payload
except ImportError:  # pragma: no cover
    # Support running with CWD=familytree (e.g., `python -m uvicorn main:app`).
    from config import LayoutConfig
    from dates import _birth_sort_key
    from models import (
        LayoutEdge,
        LayoutNode,
        Marriage,
        Person,
        Position,
        TreeLayout,
        marriage_key,
        person_key,
        spouse_pair_key,
    )
    from serialize import _marriage_payload, _person_payload, _spouse_pair_payload

log = logging.getLogger(__name__)


class LayoutInputError(TypeError):
    """Raised when the caller passes something other than lists of records."""


# ---------------------------------------------------------------------------
# Index builder
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Indexes:
    spouse_to_marriage_ids: dict[str, list[str]]
    marriage_by_id: dict[str, Marriage]
    person_by_id: dict[str, Person]


def _build_indexes(persons: Sequence[Person], marriages: Sequence[Marriage]) -> _Indexes:
    person_by_id: dict[str, Person] = {}
    for p in persons:
        person_by_id.setdefault(p.id, p)

    marriage_by_id: dict[str, Marriage] = {}
    spouse_to_marriage_ids: dict[str, list[str]] = {}
    for m in marriages:
        if m.id in marriage_by_id:
            log.warning("duplicate marriage id %s ignored", m.id)
            continue
        marriage_by_id[m.id] = m
        for sid in m.spouses:
            mids = spouse_to_marriage_ids.setdefault(sid, [])
            if m.id not in mids:
                mids.append(m.id)

    return _Indexes(
        spouse_to_marriage_ids=spouse_to_marriage_ids,
        marriage_by_id=marriage_by_id,
        person_by_id=person_by_id,
    )


# ---------------------------------------------------------------------------
# Root detector
# ---------------------------------------------------------------------------

def _find_root_marriages(
    marriages: Iterable[Marriage],
    spouse_to_marriage_ids: dict[str, list[str]],
) -> list[str]:
    """Return ids of marriages none of whose spouses is a child of another marriage.

    A marriage listing one of its own spouses as a child is bad data; that
    entry is ignored so it cannot demote the spouse's marriages from root.
    """

    ordered = list(marriages)
    has_parent: dict[str, bool] = {m.id: False for m in ordered}
    for m in ordered:
        own_spouses = set(m.spouses)
        for child_id in m.children:
            if child_id in own_spouses:
                continue
            for mid in spouse_to_marriage_ids.get(child_id, []):
                has_parent[mid] = True

    return [mid for mid, flagged in has_parent.items() if not flagged]


# ---------------------------------------------------------------------------
# Recursive placer
# ---------------------------------------------------------------------------

def _edge_id(kind: str, *parts: str) -> str:
    # Percent-encode ids so ":" inside an id cannot make two edge ids collide.
    return ":".join([kind, *(quote(p, safe="") for p in parts)])


@dataclass
class _Frame:
    """One open union on the placer stack."""

    marriage: Marriage
    depth: int
    cursor: float
    children: list[str]
    next_child: int = 0
    child_centers: list[float] = field(default_factory=list)


@dataclass
class _LayoutContext:
    """Mutable traversal state for exactly one layout call."""

    indexes: _Indexes
    config: LayoutConfig
    positions: dict[str, Position] = field(default_factory=dict)
    visited_marriages: set[str] = field(default_factory=set)
    # Person id -> marriage that placed them as a spouse; a spouse slot wins over a leaf slot.
    spouse_placed: dict[str, str] = field(default_factory=dict)
    # Marriage id chosen as each person's own union (for absorbing child edges).
    union_of: dict[str, str] = field(default_factory=dict)
    edges: list[LayoutEdge] = field(default_factory=list)

    def _row_y(self, row: int) -> float:
        return row * self.config.v_spacing

    def _place_leaf(self, person_id: str, x: float, y: float) -> None:
        self.positions.setdefault(person_key(person_id), Position(x, y))

    def _place_spouses(self, m: Marriage, center_x: float, y: float) -> None:
        spouses = list(dict.fromkeys(m.spouses))
        gap = self.config.spouse_gap
        n = len(spouses)
        for i, sid in enumerate(spouses):
            if sid in self.spouse_placed:
                continue
            # Two spouses land at center -/+ gap; other counts spread symmetrically.
            offset = (2 * i - (n - 1)) * gap
            self.positions[person_key(sid)] = Position(center_x + offset, y)
            self.spouse_placed[sid] = m.id

    def _children_in_birth_order(self, m: Marriage) -> list[str]:
        person_by_id = self.indexes.person_by_id
        children = list(dict.fromkeys(m.children))

        def _key(cid: str) -> tuple[int, int, int, int]:
            p = person_by_id.get(cid)
            return _birth_sort_key(p.dob if p is not None else None)

        return sorted(children, key=_key)

    def _descent_target(self, child_id: str, parent_marriage_id: str) -> str:
        mid = self.union_of.get(child_id)
        if mid is None:
            for candidate in self.indexes.spouse_to_marriage_ids.get(child_id, []):
                if candidate != parent_marriage_id:
                    mid = candidate
                    break
        if mid is None:
            return person_key(child_id)
        return spouse_pair_key(mid)

    def _open_frame(self, m: Marriage, depth: int, x_offset: float) -> _Frame:
        self.visited_marriages.add(m.id)
        return _Frame(
            marriage=m,
            depth=depth,
            cursor=x_offset,
            children=self._children_in_birth_order(m),
        )

    def _close_frame(self, f: _Frame) -> tuple[float, float]:
        m = f.marriage
        depth = f.depth
        if f.child_centers:
            center_x = (min(f.child_centers) + max(f.child_centers)) / 2
        else:
            center_x = f.cursor

        pair_id = spouse_pair_key(m.id)
        union_id = marriage_key(m.id)
        self.positions[pair_id] = Position(center_x, self._row_y(depth - 1))
        self.positions[union_id] = Position(center_x, self._row_y(depth))
        self._place_spouses(m, center_x, self._row_y(depth - 1))

        self.edges.append(LayoutEdge(id=_edge_id("union", m.id), source=pair_id, target=union_id, kind="union"))
        for cid in f.children:
            self.edges.append(
                LayoutEdge(
                    id=_edge_id("descent", m.id, cid),
                    source=union_id,
                    target=self._descent_target(cid, m.id),
                    kind="descent",
                )
            )

        next_x = max(f.cursor, center_x + self.config.effective_reserve_margin)
        return center_x, next_x

    def layout_marriage(self, marriage_id: str, depth: int, x_offset: float) -> tuple[float, float]:
        """Place one union and its descendants; return ``(center_x, next_x)``.

        ``depth`` is the marriage row; the spouse-pair sits one row above and
        the children one row below. ``next_x`` is the first free x for the next
        sibling subtree.

        Descendants are walked with an explicit stack of frames, so long
        marriage chains do not hit the interpreter recursion limit.
        """

        h = self.config.h_spacing
        m = self.indexes.marriage_by_id.get(marriage_id)
        if m is None or marriage_id in self.visited_marriages:
            # Unknown, or already placed elsewhere (second marriage): one slot stub.
            return x_offset, x_offset + h

        stack = [self._open_frame(m, depth, x_offset)]
        finished: tuple[float, float] | None = None
        while True:
            f = stack[-1]
            if finished is not None:
                # A child union just closed: take its center and advance past it.
                child_center, f.cursor = finished
                f.child_centers.append(child_center)
                finished = None

            if f.next_child >= len(f.children):
                finished = self._close_frame(f)
                stack.pop()
                if not stack:
                    return finished
                continue

            cid = f.children[f.next_child]
            f.next_child += 1

            child_mids = self.indexes.spouse_to_marriage_ids.get(cid, [])
            child_mid = next((mid for mid in child_mids if mid not in self.visited_marriages), None)
            if child_mid is not None:
                self.union_of.setdefault(cid, child_mid)
                stack.append(self._open_frame(self.indexes.marriage_by_id[child_mid], f.depth + 2, f.cursor))
            else:
                self._place_leaf(cid, f.cursor, self._row_y(f.depth + 1))
                f.child_centers.append(f.cursor)
                f.cursor += h


# ---------------------------------------------------------------------------
# Orphan placer
# ---------------------------------------------------------------------------

def _place_orphans(ctx: _LayoutContext, persons: Sequence[Person]) -> list[str]:
    """Put every still-unpositioned person on row 0, right of everything else."""

    h = ctx.config.h_spacing
    max_x = max((pos.x for pos in ctx.positions.values()), default=0)
    x = max_x + h

    placed: list[str] = []
    for p in persons:
        key = person_key(p.id)
        if key in ctx.positions:
            continue
        ctx.positions[key] = Position(x, 0)
        placed.append(p.id)
        x += h
    return placed


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def _coerce_records(value: Any, model: type[BaseModel], arg_name: str) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise LayoutInputError(f"{arg_name} must be a list, got {type(value).__name__}")
    out: list[Any] = []
    for item in value:
        if isinstance(item, model):
            out.append(item)
        elif isinstance(item, dict):
            out.append(model.model_validate(item))
        else:
            raise LayoutInputError(f"{arg_name} items must be {model.__name__} or dict, got {type(item).__name__}")
    return out


def _warn_degenerate(marriages: Sequence[Marriage]) -> None:
    for m in marriages:
        if len(m.spouses) != 2 or m.spouses[0] == m.spouses[1]:
            log.warning("marriage %s has degenerate spouses %r; laying out as-is", m.id, m.spouses)


def layout_family_tree(
    persons: Sequence[Person | dict[str, Any]],
    marriages: Sequence[Marriage | dict[str, Any]],
    *,
    config: LayoutConfig | None = None,
    today: date | None = None,
) -> TreeLayout:
    """Assign positions to every person, marriage and spouse-pair node.

    Pure and deterministic: the same input always yields the same positions.
    Malformed marriages and dangling ids degrade gracefully; wrong-shaped input
    raises ``LayoutInputError`` or ``pydantic.ValidationError``.
    """

    person_list: list[Person] = _coerce_records(persons, Person, "persons")
    marriage_list: list[Marriage] = _coerce_records(marriages, Marriage, "marriages")
    cfg = config or LayoutConfig()

    _warn_degenerate(marriage_list)
    indexes = _build_indexes(person_list, marriage_list)
    ctx = _LayoutContext(indexes=indexes, config=cfg)

    roots = _find_root_marriages(indexes.marriage_by_id.values(), indexes.spouse_to_marriage_ids)
    cursor: float = 0
    for mid in roots:
        _center, next_x = ctx.layout_marriage(mid, 1, cursor)
        cursor = next_x + cfg.h_spacing

    # Pure cycles (every marriage has a parent) leave marriages unreached.
    residual = [mid for mid in indexes.marriage_by_id if mid not in ctx.visited_marriages]
    for mid in residual:
        if mid in ctx.visited_marriages:
            continue
        _center, next_x = ctx.layout_marriage(mid, 1, cursor)
        cursor = next_x + cfg.h_spacing

    orphans = _place_orphans(ctx, person_list)

    log.debug(
        "family tree layout: persons=%d marriages=%d roots=%d residual=%d orphans=%d",
        len(indexes.person_by_id),
        len(indexes.marriage_by_id),
        len(roots),
        len(residual),
        len(orphans),
    )

    return _assemble(ctx, today=today)


def _absorbing_pair(ctx: _LayoutContext, person_id: str) -> str | None:
    mid = ctx.spouse_placed.get(person_id)
    return spouse_pair_key(mid) if mid is not None else None


def _assemble(ctx: _LayoutContext, *, today: date | None) -> TreeLayout:
    indexes = ctx.indexes
    nodes: list[LayoutNode] = []

    for p in indexes.person_by_id.values():
        key = person_key(p.id)
        nodes.append(
            LayoutNode(
                id=key,
                kind="person",
                position=ctx.positions[key],
                payload=_person_payload(p, today=today),
                parent_id=_absorbing_pair(ctx, p.id),
            )
        )

    for mid, m in indexes.marriage_by_id.items():
        spouses = [indexes.person_by_id.get(sid) for sid in m.spouses]
        nodes.append(
            LayoutNode(
                id=spouse_pair_key(mid),
                kind="spouse-pair",
                position=ctx.positions[spouse_pair_key(mid)],
                payload=_spouse_pair_payload(m, spouses, today=today),
            )
        )
        nodes.append(
            LayoutNode(
                id=marriage_key(mid),
                kind="marriage",
                position=ctx.positions[marriage_key(mid)],
                payload=_marriage_payload(m, today=today),
            )
        )

    node_ids = {n.id for n in nodes}
    edges: list[LayoutEdge] = []
    for e in ctx.edges:
        if e.source not in node_ids or e.target not in node_ids:
            # e.g. a child id with no person record; its position is still recorded.
            log.debug("dropping edge %s: endpoint has no node", e.id)
            continue
        edges.append(e)

    return TreeLayout(nodes=nodes, edges=edges, positions=dict(ctx.positions))
