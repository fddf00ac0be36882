from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from familytree.config import load_layout_config
from familytree.demo_data import DEMO_MARRIAGES, DEMO_PERSONS
from familytree.layout import layout_family_tree


def load_snapshot(path: Path) -> tuple[list[Any], list[Any]]:
    """Read ``{"persons": [...], "marriages": [...]}`` from a JSON file."""

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SystemExit(f"Expected a JSON object with persons/marriages: {path}")
    return data.get("persons") or [], data.get("marriages") or []


def export_layout(persons: list[Any], marriages: list[Any]) -> dict[str, Any]:
    result = layout_family_tree(persons, marriages, config=load_layout_config())
    return result.to_dict()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute family tree node positions and write them as JSON")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="in_path", help="Path to a JSON snapshot with persons and marriages")
    src.add_argument("--demo", action="store_true", help="Use the bundled demo family")
    parser.add_argument("--out", required=True, help="Path to write the layout JSON")
    parser.add_argument("--print", action="store_true", help="Also print a short summary")

    args = parser.parse_args(argv)
    out_path = Path(args.out).expanduser().resolve()

    if args.demo:
        persons, marriages = list(DEMO_PERSONS), list(DEMO_MARRIAGES)
    else:
        in_path = Path(args.in_path).expanduser().resolve()
        if not in_path.exists():
            raise SystemExit(f"Snapshot not found: {in_path}")
        persons, marriages = load_snapshot(in_path)

    out_path.parent.mkdir(parents=True, exist_ok=True)

    layout = export_layout(persons, marriages)
    out_path.write_text(json.dumps(layout, indent=2, ensure_ascii=False), encoding="utf-8")

    if args.print:
        nodes = layout.get("nodes", [])
        print(f"Persons: {len(persons)}")
        print(f"Marriages: {len(marriages)}")
        for kind in ("person", "marriage", "spouse-pair"):
            print(f"{kind} nodes: {sum(1 for n in nodes if n.get('kind') == kind)}")
        print(f"Edges: {len(layout.get('edges', []))}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
