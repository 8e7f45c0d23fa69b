from __future__ import annotations
import argparse, os
from burrow_core.config import load_config
from burrow_core.diagrams.io import iterate_burrow_strings, filter_diagram


"""
Check every diagram under the configured sources and optionally write the
ids of the valid ones, ready for scripts.solve.run_batch --list.

Usage:
  python -m scripts.validate_diagrams --config configs/solve.yaml --out results/ids.list
"""

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/solve.yaml")
    p.add_argument("--out", type=str, default=None, help="write valid burrow ids here")
    args = p.parse_args()

    cfg = load_config(args.config)
    root = cfg.diagrams.get("root_dir", "burrow_core/diagrams")
    rels = cfg.diagrams.get("sources", ["examples"])
    max_depth = cfg.diagrams.get("max_depth")

    ok_ids = []
    bad = 0
    for ref, s in iterate_burrow_strings(root, rels):
        if filter_diagram(s, rooms=cfg.rooms, max_depth=max_depth):
            ok_ids.append(ref.burrow_id)
        else:
            bad += 1
            print(f"[skip] {ref.burrow_id}")
    print(f"valid: {len(ok_ids)}, skipped: {bad}")

    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            for bid in ok_ids:
                f.write(bid + "\n")

if __name__ == "__main__":
    main()
