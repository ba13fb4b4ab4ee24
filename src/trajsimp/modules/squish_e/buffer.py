from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging
import math

from trajsimp.core.point import Point
from trajsimp.metrics.distance import sed

logger = logging.getLogger(__name__)


class BufferState(Enum):
    GROWING = "growing"
    AT_CAPACITY = "at-capacity"
    CONVERGING = "converging"
    DONE = "done"


@dataclass
class BufferEntry:
    """
    A retained point annotated with its removal cost.

    `compensation` is the error already absorbed on this entry's behalf by
    evicted neighbors; it is folded into every cost recomputation and never decreases.
    """
    point: Point
    cost: float = math.inf
    compensation: float = 0.0
    anchor: bool = True


class PriorityBuffer:
    """
    Size-bounded SQUISH-E buffer.

    Capacity grows with the number of points consumed so the buffer tracks the
    target compression ratio without knowing the stream length. Whenever the
    buffer fills up, the interior entry with the lowest cost is evicted and its
    cost is pushed onto both neighbors as compensation.
    """

    def __init__(self, ratio: float, initial_capacity: int = 4):
        """
        Args:
            ratio: target compression ratio (input count / kept count).
            initial_capacity: capacity before any growth. Must leave room for both anchors.
        """
        if not ratio > 0:
            raise ValueError(f"Compression ratio must be positive, got {ratio}")
        if initial_capacity < 2:
            raise ValueError("Buffer capacity must be at least 2 to hold both anchors.")

        self.ratio = ratio
        self.capacity = initial_capacity
        self.entries: List[BufferEntry] = []
        self.inserted = 0
        self.evicted = 0
        self.state = BufferState.GROWING

    def __len__(self) -> int:
        return len(self.entries)

    def points(self) -> List[Point]:
        return [e.point for e in self.entries]

    def insert(self, point: Point) -> None:
        """
        Appends a point as the new tail and evicts at most one interior entry
        if the buffer reached its capacity.
        """
        if self.state in (BufferState.CONVERGING, BufferState.DONE):
            raise ValueError("Cannot insert into a buffer that has already converged")

        if self.inserted / self.ratio >= self.capacity:
            self.capacity += 1

        self.entries.append(BufferEntry(point=point))
        self.inserted += 1

        # The previous tail now has both neighbors
        if len(self.entries) > 2:
            prev = self.entries[-2]
            prev.anchor = False
            self._adjust_cost(len(self.entries) - 2)

        if len(self.entries) >= self.capacity and len(self.entries) > 2:
            self.state = BufferState.AT_CAPACITY
            self.evict(self.find_min())

        self.state = BufferState.AT_CAPACITY if len(self.entries) >= self.capacity else BufferState.GROWING

    def find_min(self) -> Optional[int]:
        """
        Index of the interior entry with the lowest cost, or None if only anchors remain.
        Ties go to the lowest index.
        """
        min_index = None
        for i in range(1, len(self.entries) - 1):
            entry = self.entries[i]
            if entry.anchor:
                continue
            if min_index is None or entry.cost < self.entries[min_index].cost:
                min_index = i
        return min_index

    def evict(self, index: int) -> Point:
        """
        Removes the interior entry at `index`, passing its cost on to both neighbors
        as compensation and re-estimating their costs against their new neighbors.
        """
        victim = self.entries[index]
        if victim.anchor:
            raise ValueError(f"Entry {index} is an anchor and cannot be evicted")

        prev_entry = self.entries[index - 1]
        next_entry = self.entries[index + 1]

        # The head never turns interior, so compensation on it would never be used
        if index - 1 > 0:
            prev_entry.compensation = max(prev_entry.compensation, victim.cost)
        next_entry.compensation = max(next_entry.compensation, victim.cost)

        del self.entries[index]
        self.evicted += 1

        self._adjust_cost(index - 1)
        self._adjust_cost(index)

        logger.debug(
            "Evicted point t=%s cost=%.6g (buffer %d/%d)",
            victim.point.time, victim.cost, len(self.entries), self.capacity
        )
        return victim.point

    def converge(self, error_bound: float) -> None:
        """
        Stream-end reduction: keep evicting the cheapest interior entry while
        its cost does not exceed error_bound.
        """
        self.state = BufferState.CONVERGING
        min_index = self.find_min()
        while min_index is not None and self.entries[min_index].cost <= error_bound:
            self.evict(min_index)
            min_index = self.find_min()
        self.state = BufferState.DONE

    def _adjust_cost(self, index: int) -> None:
        entry = self.entries[index]
        if entry.anchor:
            return
        entry.cost = entry.compensation + sed(
            self.entries[index - 1].point, entry.point, self.entries[index + 1].point
        )
