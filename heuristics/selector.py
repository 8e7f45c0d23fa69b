from __future__ import annotations
from typing import Callable, Sequence

from burrow_core.state import Topology
from burrow_core.moves import DEFAULT_COSTS
from heuristics.classic import h_zero, make_room_assignment


def get_heuristic(name: str, topo: Topology, costs: Sequence[int] = DEFAULT_COSTS) -> Callable:
    name = name.lower()
    if name == "zero":
        return h_zero
    if name == "assignment":
        return make_room_assignment(topo, costs)
    raise ValueError(f"unknown heuristic: {name}")
