from typing import List, Optional, Sequence, Tuple

from .state import Burrow, Topology, EMPTY

# Energy per step for A, B, C, D
DEFAULT_COSTS: Tuple[int, ...] = (1, 10, 100, 1000)

Move = Tuple[Burrow, int]


def check_costs(costs: Sequence[int], topo: Topology) -> None:
    if len(costs) < topo.rooms:
        raise ValueError(f"need {topo.rooms} step costs, got {len(costs)}")
    if any(c <= 0 for c in costs):
        raise ValueError(f"step costs must be positive: {list(costs)}")


def is_settled(burrow: Burrow, topo: Topology, pos: int) -> bool:
    """A unit in its own room with only its own kind below it never has to move."""
    if topo.is_hallway(pos):
        return False
    room, row = topo.cell_room_row(pos)
    want = room + 1
    for r in range(row, topo.depth):
        if burrow.get_at(topo.room_cell(room, r)) != want:
            return False
    return True


def _settle_target(burrow: Burrow, topo: Topology, room: int) -> Optional[Tuple[int, int]]:
    """(cell, row) of the deepest empty cell above the first unit, if the room only holds its own kind."""
    want = room + 1
    target = None
    blocked = False
    for row in range(topo.depth):
        cell = topo.room_cell(room, row)
        v = burrow.get_at(cell)
        if v == EMPTY:
            if not blocked:
                target = (cell, row)
        elif v == want:
            blocked = True
        else:
            return None
    return target


def _hallway_clear(burrow: Burrow, stop: int, room: int) -> bool:
    # stops room+1 / room+2 flank the mouth of `room`
    if stop <= room + 1:
        between = range(stop + 1, room + 2)
    else:
        between = range(room + 2, stop)
    return all(burrow.get_at(s) == EMPTY for s in between)


def moves_into_rooms(burrow: Burrow, topo: Topology, costs: Sequence[int]) -> List[Move]:
    """Hallway units walking straight into their own room."""
    out: List[Move] = []
    for stop in range(topo.hallway):
        unit = burrow.get_at(stop)
        if unit == EMPTY:
            continue
        room = unit - 1
        if not _hallway_clear(burrow, stop, room):
            continue
        target = _settle_target(burrow, topo, room)
        if target is None:
            continue
        cell, row = target
        steps = abs(topo.stop_column(stop) - topo.room_column(room)) + row + 1
        out.append((burrow.with_swap(stop, cell), steps * costs[unit - 1]))
    return out


def _top_unit(burrow: Burrow, topo: Topology, room: int) -> Optional[Tuple[int, int]]:
    for row in range(topo.depth):
        cell = topo.room_cell(room, row)
        if burrow.get_at(cell) != EMPTY:
            return (cell, row)
    return None


def moves_out_of_rooms(burrow: Burrow, topo: Topology, costs: Sequence[int]) -> List[Move]:
    """Top unit of every room stepping out to each reachable empty stop."""
    out: List[Move] = []
    for room in range(topo.rooms):
        top = _top_unit(burrow, topo, room)
        if top is None:
            continue
        cell, row = top
        if is_settled(burrow, topo, cell):
            continue
        unit = burrow.get_at(cell)
        mouth = topo.room_column(room)

        left = range(room + 1, -1, -1)
        right = range(room + 2, topo.hallway)
        for direction in (left, right):
            for stop in direction:
                if burrow.get_at(stop) != EMPTY:
                    break
                steps = row + 1 + abs(topo.stop_column(stop) - mouth)
                out.append((burrow.with_swap(cell, stop), steps * costs[unit - 1]))
    return out


def successors(burrow: Burrow, topo: Optional[Topology] = None,
               costs: Sequence[int] = DEFAULT_COSTS) -> List[Move]:
    """All (next burrow, energy) pairs one complete legal relocation away.

    Rules:
      1) a hallway unit only moves into its own room, along a clear hallway,
         and only once the room holds no foreign units; it goes to the
         deepest empty cell,
      2) the top unit of a room moves to any empty stop it can reach without
         passing another unit; settled units stay put,
      3) energy = steps * per-kind cost; passing a room mouth is one extra
         step, which is why stops next to a mouth are 2 steps apart.
    """
    if topo is None:
        topo = Topology.for_size(burrow.size)
    return moves_into_rooms(burrow, topo, costs) + moves_out_of_rooms(burrow, topo, costs)
