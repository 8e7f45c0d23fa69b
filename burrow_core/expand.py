import logging
from typing import List, Optional, Sequence

from .state import Burrow, Topology

logger = logging.getLogger(__name__)

# The two rows hidden behind the fold of the unfolded diagram
EXTRA_ROWS = ("DCBA", "DBAC")


def expand_burrow(burrow: Burrow, extra_rows: Sequence[str] = EXTRA_ROWS,
                  topo: Optional[Topology] = None) -> Burrow:
    """Inserts `extra_rows` right below the top room row."""
    if topo is None:
        topo = Topology.for_size(burrow.size)
    for row in extra_rows:
        if len(row) != topo.rooms:
            raise ValueError(f"extra row {row!r} must have {topo.rooms} cells")
    as_str = str(burrow)
    offset = topo.hallway + topo.rooms
    expanded = Burrow.from_str(as_str[:offset] + "".join(extra_rows) + as_str[offset:])
    logger.debug("expanded %s -> %s", as_str, expanded)
    return expanded


def expand_diagram(burrow_str: str, extra_rows: Sequence[str] = EXTRA_ROWS) -> str:
    """Same transform on the ASCII diagram: new lines after the first room line."""
    lines: List[str] = [ln for ln in burrow_str.splitlines() if ln.strip() != ""]
    if len(lines) < 3:
        raise ValueError("Burrow diagram needs a wall, a hallway and at least one room row")
    inserted = ["  #" + "#".join(row) + "#" for row in extra_rows]
    return "\n".join(lines[:3] + inserted + lines[3:])
