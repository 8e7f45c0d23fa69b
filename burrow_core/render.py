from typing import Iterable, List, Optional, Tuple

from .state import Burrow, Topology, LETTERS


def render_ascii(burrow: Burrow, topo: Optional[Topology] = None) -> str:
    """ASCII diagram of the burrow, the same shape the parser reads."""
    if topo is None:
        topo = Topology.for_size(burrow.size)
    width = 2 * topo.rooms + 3
    hall = ["."] * width
    for stop in range(topo.hallway):
        hall[topo.stop_column(stop)] = LETTERS[burrow.get_at(stop)]

    out_lines = ["#" * (width + 2), "#" + "".join(hall) + "#"]
    for row in range(topo.depth):
        chars = [LETTERS[burrow.get_at(topo.room_cell(r, row))] for r in range(topo.rooms)]
        body = "#" + "#".join(chars) + "#"
        out_lines.append("##" + body + "##" if row == 0 else "  " + body)
    out_lines.append("  " + "#" * (2 * topo.rooms + 1))
    return "\n".join(out_lines)


def render_path(path: Iterable[Tuple[Burrow, int]], topo: Optional[Topology] = None) -> str:
    """Step-by-step listing of (burrow, energy so far) pairs."""
    blocks: List[str] = []
    for i, (b, energy) in enumerate(path):
        blocks.append(f"-- step {i} (energy {energy}) --\n{render_ascii(b, topo)}")
    return "\n\n".join(blocks)
