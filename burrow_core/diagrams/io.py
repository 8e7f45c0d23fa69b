from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Optional
import os

from burrow_core.parser import parse_burrow
from burrow_core.state import Topology

@dataclass
class DiagramRef:
    path: str
    index: int  # index of the diagram inside the file (if there are multiple diagrams)

    @property
    def burrow_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    """Blocks of non-blank lines; lines starting with ';' are comments."""
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith(";"):
            continue
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_burrow_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[DiagramRef, str]]:
    """Iterate over all .txt in the given subfolders and return (diagram reference, diagram string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(split_on_blank_lines(content)):
                yield DiagramRef(path=fpath, index=i), block


def filter_diagram(burrow_str: str, *, rooms: int = 4, max_depth: Optional[int] = None) -> bool:
    """True if the diagram parses and its rooms are not deeper than max_depth."""
    try:
        b = parse_burrow(burrow_str, rooms=rooms)
    except ValueError:
        return False
    depth = Topology.for_size(b.size, rooms).depth
    if max_depth is not None and depth > max_depth:
        return False
    return True
