from __future__ import annotations
import heapq
from typing import Any, List, Tuple

class PriorityQueue:
    """Min-queue; equal priorities pop in insertion order."""
    def __init__(self) -> None:
        self._h: List[Tuple[int, int, Any]] = []
        self._tiebreak = 0

    def push(self, priority: int, item: Any) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (priority, self._tiebreak, item))

    def pop(self) -> Tuple[int, Any]:
        priority, _, item = heapq.heappop(self._h)
        return priority, item

    def __len__(self) -> int:
        return len(self._h)
