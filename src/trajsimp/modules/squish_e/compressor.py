from typing import Iterable, List, Optional
import logging
import math

from trajsimp.core.point import Point
from trajsimp.modules.base import Compressor
from trajsimp.modules.squish_e.buffer import PriorityBuffer

logger = logging.getLogger(__name__)


class SquishECompressor(Compressor):
    """
    Online SQUISH-E compression.

    Points are fed one at a time through `process_point`; the buffer capacity
    follows the consumed point count so that roughly one point in `ratio` is kept.
    `flush` then evicts every remaining point whose cost is within `sed_error`.
    """

    def __init__(self, ratio: float = 2.0, sed_error: float = 0.0, initial_capacity: int = 4):
        """
        Args:
            ratio: target compression ratio (input count / kept count).
            sed_error: maximum SED accepted when converging at stream end.
            initial_capacity: buffer capacity before any growth.
        """
        _check_params(ratio, sed_error)
        if initial_capacity < 2:
            raise ValueError("Buffer capacity must be at least 2 to hold both anchors.")
        self.ratio = ratio
        self.sed_error = sed_error
        self.initial_capacity = initial_capacity
        self.buffer: Optional[PriorityBuffer] = None

    def process_point(self, point: Point) -> None:
        if self.buffer is None:
            self.buffer = PriorityBuffer(self.ratio, self.initial_capacity)
        self.buffer.insert(point)

    def flush(self) -> List[Point]:
        """
        Ends the stream, converges the buffer and returns the kept points.
        The compressor is reset afterwards and can take a new trajectory.
        """
        buffer, self.buffer = self.buffer, None
        if buffer is None or len(buffer) < 2:
            raise ValueError("At least 2 points are required to compress a trajectory")

        buffer.converge(self.sed_error)

        logger.info(
            "SQUISH-E kept %d of %d points (capacity %d, %d evictions)",
            len(buffer), buffer.inserted, buffer.capacity, buffer.evicted
        )
        return buffer.points()

    def compress(
        self,
        points: Iterable[Point],
        ratio: Optional[float] = None,
        sed_error: Optional[float] = None
    ) -> List[Point]:
        """
        Compresses a whole trajectory.

        Args:
            points: points to compress, in time order.
            ratio: optional ratio override for this call.
            sed_error: optional error bound override for this call.
        """
        points = list(points)
        if len(points) < 2:
            raise ValueError("At least 2 points are required to compress a trajectory")

        ratio = ratio if ratio is not None else self.ratio
        sed_error = sed_error if sed_error is not None else self.sed_error
        _check_params(ratio, sed_error)

        run = SquishECompressor(ratio, sed_error, self.initial_capacity)
        for p in points:
            run.process_point(p)
        return run.flush()


def _check_params(ratio: float, sed_error: float) -> None:
    if not ratio > 0:
        raise ValueError(f"Compression ratio must be positive, got {ratio}")
    if math.isnan(sed_error) or sed_error < 0:
        raise ValueError(f"SED error bound must be a non-negative number, got {sed_error}")
