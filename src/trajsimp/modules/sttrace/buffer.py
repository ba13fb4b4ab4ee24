from dataclasses import dataclass
from typing import List, Optional
import logging

from trajsimp.core.point import Point
from trajsimp.metrics.distance import sed

logger = logging.getLogger(__name__)


@dataclass
class CostEntry:
    point: Point
    cost: float = 0.0


class SlidingCostBuffer:
    """
    Bounded STTrace buffer. The cost of an entry is the SED against its current
    neighbors only; evictions do not carry error over to the survivors.
    """

    def __init__(self, max_size: int):
        if max_size < 3:
            raise ValueError("Buffer size must be at least 3 to hold both anchors and one candidate.")
        self.max_size = max_size
        self.entries: List[CostEntry] = []
        self.evicted = 0

    def __len__(self) -> int:
        return len(self.entries)

    def points(self) -> List[Point]:
        return [e.point for e in self.entries]

    def insert(self, point: Point) -> None:
        self.entries.append(CostEntry(point=point))
        if len(self.entries) >= 3:
            self._update_cost(len(self.entries) - 2)

        if len(self.entries) > self.max_size:
            self.evict(self.find_min())

    def find_min(self) -> Optional[int]:
        """Lowest cost interior index; ties go to the lowest index."""
        min_index = None
        for i in range(1, len(self.entries) - 1):
            if min_index is None or self.entries[i].cost < self.entries[min_index].cost:
                min_index = i
        return min_index

    def evict(self, index: int) -> Point:
        if not 0 < index < len(self.entries) - 1:
            raise ValueError(f"Entry {index} is an anchor and cannot be evicted")

        victim = self.entries.pop(index)
        self.evicted += 1

        # Former neighbors are now at index - 1 and index
        self._update_cost(index - 1)
        self._update_cost(index)

        logger.debug("Evicted point t=%s cost=%.6g", victim.point.time, victim.cost)
        return victim.point

    def _update_cost(self, index: int) -> None:
        if index <= 0 or index >= len(self.entries) - 1:
            return
        self.entries[index].cost = sed(
            self.entries[index - 1].point, self.entries[index].point, self.entries[index + 1].point
        )
