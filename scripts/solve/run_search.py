from __future__ import annotations
import argparse
import logging

from burrow_core.config import load_config
from burrow_core.diagrams.resolve import load_burrow_by_id
from burrow_core.expand import expand_burrow
from burrow_core.render import render_ascii, render_path
from burrow_core.state import Topology
from search.dijkstra import dijkstra
from heuristics.selector import get_heuristic


def _solve_and_report(label, burrow, cfg, h_name, show_path):
    topo = Topology.for_size(burrow.size, cfg.rooms)
    h = get_heuristic(h_name, topo, cfg.costs)
    res = dijkstra(burrow, topo, cfg.costs, h_fn=h, time_limit_s=cfg.time_limit_s,
                   node_limit=cfg.node_limit, keep_path=show_path)
    print(f"{label}:", {k: v for k, v in vars(res).items() if k != "path"})
    if show_path and res.success:
        print(render_path(res.path, topo))
    return res


def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "burrow_id",
        nargs="?",
        default=None,
        help="Burrow id like 'path/to/diagrams.txt#idx'.",
    )
    p.add_argument("--config", type=str, default="configs/solve.yaml")
    p.add_argument("--h", type=str, default=None, choices=["zero", "assignment"], help="heuristic")
    p.add_argument("--show_path", action="store_true", help="print every step of the best path")
    p.add_argument("--log_level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.burrow_id is None:
        raise ValueError("Burrow id is required")

    cfg = load_config(args.config)
    h_name = args.h or cfg.heuristic

    s = load_burrow_by_id(args.burrow_id, rooms=cfg.rooms)
    print(render_ascii(s))

    small = _solve_and_report("Lowest energy for small burrow", s, cfg, h_name, args.show_path)
    expanded = expand_burrow(s, cfg.extra_rows)
    big = _solve_and_report("Lowest energy for expanded burrow", expanded, cfg, h_name, args.show_path)
    print(small.cost)
    print(big.cost)

if __name__ == "__main__":
    main()
