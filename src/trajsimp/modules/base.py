import abc
from typing import Iterable, List

from trajsimp.core.point import Point


class Compressor(abc.ABC):
    """Abstract base class for trajectory compressors."""

    @abc.abstractmethod
    def compress(self, points: Iterable[Point]) -> List[Point]:
        """Returns an order-preserving subset of points that keeps the first and last point."""
        pass
