from functools import lru_cache

from .state import Burrow, Topology


@lru_cache(maxsize=None)
def build_goal(depth: int, rooms: int = 4) -> Burrow:
    """Sorted burrow: empty hallway, every room row reads A B C D ..."""
    topo = Topology(rooms=rooms, depth=depth)
    row = list(range(1, rooms + 1))
    return Burrow.from_cells([0] * topo.hallway + row * depth)


def room_depth(burrow: Burrow, rooms: int = 4) -> int:
    return Topology.for_size(burrow.size, rooms).depth


def is_goal(burrow: Burrow, rooms: int = 4) -> bool:
    return burrow == build_goal(room_depth(burrow, rooms), rooms)
