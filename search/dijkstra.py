from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import logging
import time

from burrow_core.state import Burrow, Topology
from burrow_core.goal_check import build_goal
from burrow_core.moves import DEFAULT_COSTS, Move, check_costs, successors
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

SuccFn = Callable[[Burrow, Topology, Sequence[int]], List[Move]]


@dataclass
class SearchResult:
    """Outcome of one search. `cost` is None when the goal was not reached."""

    success: bool
    cost: Optional[int]
    nodes: int
    runtime: float
    reason: str  # goal | exhausted | time_limit | node_limit
    path: List[Tuple[Burrow, int]] = field(default_factory=list)


def reconstruct(parent: Dict[Burrow, Optional[Burrow]], g: Dict[int, int],
                goal: Burrow) -> List[Tuple[Burrow, int]]:
    path = [(goal, g[goal.key])]
    cur = goal
    while parent[cur] is not None:
        cur = parent[cur]  # type: ignore
        path.append((cur, g[cur.key]))
    path.reverse()
    return path


def dijkstra(
    start: Burrow,
    topo: Optional[Topology] = None,
    costs: Sequence[int] = DEFAULT_COSTS,
    h_fn: Optional[Callable[[Burrow], int]] = None,
    succ_fn: SuccFn = successors,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    keep_path: bool = False,
) -> SearchResult:
    """Uniform-cost search from `start` to the sorted burrow.

    States are never materialised as a graph: `succ_fn` expands them on
    demand. With `h_fn` the queue is ordered by g + h (A*); the heuristic has
    to be admissible. Entries whose g is worse than the best recorded
    distance are stale and skipped.
    """
    if topo is None:
        topo = Topology.for_size(start.size)
    check_costs(costs, topo)
    goal = build_goal(topo.depth, topo.rooms)

    t0 = time.time()
    openq = PriorityQueue()
    g: Dict[int, int] = {start.key: 0}
    parent: Dict[Burrow, Optional[Burrow]] = {start: None}
    openq.push(h_fn(start) if h_fn else 0, (0, start))

    expanded = 0
    reason = "exhausted"
    found: Optional[Burrow] = None
    found_cost = 0

    while len(openq) > 0:
        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            reason = "time_limit"
            break
        _, (gs, s) = openq.pop()
        if s == goal:
            found = s
            found_cost = gs
            reason = "goal"
            break
        if gs > g[s.key]:
            continue  # stale
        expanded += 1
        if node_limit is not None and expanded >= node_limit:
            reason = "node_limit"
            break

        for ns, energy in succ_fn(s, topo, costs):
            ng = gs + energy
            old = g.get(ns.key)
            if old is None or ng < old:
                g[ns.key] = ng
                if keep_path:
                    parent[ns] = s
                openq.push(ng + h_fn(ns) if h_fn else ng, (ng, ns))

    runtime = time.time() - t0
    if found is None:
        logger.debug("no path from %s (%s) after %d expansions", start, reason, expanded)
        return SearchResult(success=False, cost=None, nodes=expanded, runtime=runtime, reason=reason)

    cost = found_cost
    logger.debug("solved %s: energy=%d nodes=%d runtime=%.3fs", start, cost, expanded, runtime)
    path = reconstruct(parent, g, found) if keep_path else []
    return SearchResult(success=True, cost=cost, nodes=expanded, runtime=runtime,
                        reason=reason, path=path)


def solve(start: Burrow, **kwargs) -> Optional[int]:
    """Minimum total energy to sort `start`, or None if it cannot be sorted."""
    return dijkstra(start, **kwargs).cost
