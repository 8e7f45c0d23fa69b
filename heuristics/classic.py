from __future__ import annotations
from typing import Callable, Dict, List, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment
from burrow_core.state import Burrow, Topology, EMPTY
from burrow_core.moves import DEFAULT_COSTS, is_settled


# ---- helpers

def steps_to_slot(topo: Topology, pos: int, room: int, row: int) -> int:
    """Steps from `pos` to (room, row) ignoring every other unit."""
    mouth = topo.room_column(room)
    if topo.is_hallway(pos):
        return abs(topo.stop_column(pos) - mouth) + row + 1
    src_room, src_row = topo.cell_room_row(pos)
    if src_room == room:
        # out to a stop next to the mouth and back in
        return src_row + 1 + 2 + row + 1
    return src_row + 1 + abs(topo.room_column(src_room) - mouth) + row + 1


def _unsettled_by_kind(burrow: Burrow, topo: Topology) -> Dict[int, List[int]]:
    out: Dict[int, List[int]] = {}
    for pos, v in enumerate(burrow.cells()):
        if v != EMPTY and not is_settled(burrow, topo, pos):
            out.setdefault(v, []).append(pos)
    return out


# ---- classical heuristics

def h_zero(burrow: Burrow) -> int:
    return 0


def h_room_assignment(burrow: Burrow, topo: Topology,
                      costs: Sequence[int] = DEFAULT_COSTS) -> int:
    """Energy lower bound = optimal matching of unsettled units → free room slots.

    Each kind is matched independently; distances ignore blocking units,
    so this never overestimates."""
    total = 0
    for kind, positions in _unsettled_by_kind(burrow, topo).items():
        room = kind - 1
        free_rows = [row for row in range(topo.depth)
                     if not is_settled(burrow, topo, topo.room_cell(room, row))]
        if not free_rows:
            continue
        C = np.empty((len(positions), len(free_rows)), dtype=np.int64)
        for i, pos in enumerate(positions):
            for j, row in enumerate(free_rows):
                C[i, j] = steps_to_slot(topo, pos, room, row)
        r, c = linear_sum_assignment(C)
        total += int(C[r, c].sum()) * costs[kind - 1]
    return total


def make_room_assignment(topo: Topology,
                         costs: Sequence[int] = DEFAULT_COSTS) -> Callable[[Burrow], int]:
    return lambda b: h_room_assignment(b, topo, costs)
