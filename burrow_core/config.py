from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import yaml

from .expand import EXTRA_ROWS
from .moves import DEFAULT_COSTS


@dataclass
class SolveConfig:
    rooms: int = 4
    costs: Tuple[int, ...] = DEFAULT_COSTS
    extra_rows: Tuple[str, ...] = EXTRA_ROWS
    heuristic: str = "zero"
    time_limit_s: Optional[float] = None
    node_limit: Optional[int] = None
    diagrams: Dict[str, Any] = field(default_factory=dict)


def config_from_dict(cfg: Dict[str, Any]) -> SolveConfig:
    """Builds a SolveConfig from the parsed YAML; missing keys keep their defaults."""
    burrow = cfg.get("burrow", {}) or {}
    expand = cfg.get("expand", {}) or {}
    search = cfg.get("search", {}) or {}

    rooms = int(burrow.get("rooms", 4))
    costs = tuple(int(c) for c in burrow.get("costs", DEFAULT_COSTS))
    if len(costs) != rooms:
        raise ValueError(f"burrow.costs needs {rooms} entries, got {len(costs)}")
    extra_rows = tuple(str(r) for r in expand.get("extra_rows", EXTRA_ROWS))

    return SolveConfig(
        rooms=rooms,
        costs=costs,
        extra_rows=extra_rows,
        heuristic=str(search.get("heuristic", "zero")),
        time_limit_s=search.get("time_limit_s"),
        node_limit=search.get("node_limit"),
        diagrams=cfg.get("diagrams", {}) or {},
    )


def load_config(path: str) -> SolveConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    return config_from_dict(cfg)
