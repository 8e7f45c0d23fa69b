from __future__ import annotations
import argparse, csv, logging, os, time
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from burrow_core.config import load_config, SolveConfig
from burrow_core.diagrams.resolve import load_burrow_by_id
from burrow_core.expand import expand_burrow
from burrow_core.state import Topology
from search.dijkstra import dijkstra
from heuristics.selector import get_heuristic

logger = logging.getLogger(__name__)

FIELDS = ["burrow_id", "heuristic", "success", "cost", "expanded_cost", "nodes", "runtime", "error"]


def _run_one(args_tuple) -> Dict[str, object]:
    burrow_id, cfg, heur_name = args_tuple
    try:
        s = load_burrow_by_id(burrow_id, rooms=cfg.rooms)
        runs = []
        for b in (s, expand_burrow(s, cfg.extra_rows)):
            topo = Topology.for_size(b.size, cfg.rooms)
            h = get_heuristic(heur_name, topo, cfg.costs)
            runs.append(dijkstra(b, topo, cfg.costs, h_fn=h,
                                 time_limit_s=cfg.time_limit_s, node_limit=cfg.node_limit))
        base, big = runs
        return {
            "burrow_id": burrow_id,
            "heuristic": heur_name,
            "success": base.success and big.success,
            "cost": base.cost if base.cost is not None else -1,
            "expanded_cost": big.cost if big.cost is not None else -1,
            "nodes": base.nodes + big.nodes,
            "runtime": base.runtime + big.runtime,
            "error": "",
        }
    except (OSError, ValueError, IndexError) as e:
        logger.warning("failed on %s: %s", burrow_id, e)
        return {"burrow_id": burrow_id, "heuristic": heur_name, "success": False, "cost": -1,
                "expanded_cost": -1, "nodes": 0, "runtime": 0.0, "error": str(e)}


def main():
    p = argparse.ArgumentParser(description="Batch burrow solves → CSV (flags, parallel)")
    p.add_argument("--list", required=True)
    p.add_argument("--config", default="configs/solve.yaml")
    p.add_argument("--h", default=None, choices=["zero", "assignment"])
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    p.add_argument("--log_level", type=str, default="WARNING")
    args = p.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    cfg: SolveConfig = load_config(args.config)
    if args.time_limit is not None:
        cfg.time_limit_s = args.time_limit
    if args.node_limit is not None:
        cfg.node_limit = args.node_limit
    heur = args.h or cfg.heuristic

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        burrow_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith(";")]

    jobs = args.jobs or cpu_count()
    payload = [(bid, cfg, heur) for bid in burrow_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Solving", unit="burrow")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Solving", unit="burrow"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} burrows → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
