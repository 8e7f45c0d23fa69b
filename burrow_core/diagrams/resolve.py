from __future__ import annotations
from typing import Tuple

from ..parser import parse_burrow
from ..state import Burrow
from .io import split_on_blank_lines


def parse_burrow_id(burrow_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in burrow_id:
        return burrow_id, 0
    path, idx = burrow_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        k = 0
    return path, k


def load_burrow_by_id(burrow_id: str, rooms: int = 4) -> Burrow:
    """Loads one diagram file#idx even if the file holds several diagrams.

    A block is either an ASCII diagram or the compact one-line form
    ('.......BCBDADCA').
    """
    path, wanted = parse_burrow_id(burrow_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_on_blank_lines(content)
    if not blocks:
        raise ValueError(f"No burrows found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_burrow(blocks[wanted], rooms=rooms)
