from typing import Iterable, List, Optional
import logging
import math

from trajsimp.core.point import Point
from trajsimp.modules.base import Compressor
from trajsimp.modules.sttrace.buffer import SlidingCostBuffer

logger = logging.getLogger(__name__)


class STTraceCompressor(Compressor):
    def __init__(self, compression_ratio: float = 0.5):
        """
        Args:
            compression_ratio: fraction of the original points to keep.
        """
        _check_ratio(compression_ratio)
        self.compression_ratio = compression_ratio

    def compress(self, points: Iterable[Point], compression_ratio: Optional[float] = None) -> List[Point]:
        """
        Compresses a trajectory with a sliding buffer of floor(compression_ratio * len(points)) entries.
        Points are evicted while streaming, as soon as the buffer overflows.
        """
        points = list(points)
        if len(points) < 2:
            raise ValueError("At least 2 points are required to compress a trajectory")

        ratio = compression_ratio if compression_ratio is not None else self.compression_ratio
        _check_ratio(ratio)

        max_buffer_size = math.floor(min(ratio * len(points), len(points)))
        if max_buffer_size <= 2:
            logger.debug("Buffer size %d leaves room for anchors only", max_buffer_size)
            return [points[0], points[-1]]

        buffer = SlidingCostBuffer(max_buffer_size)
        for p in points:
            buffer.insert(p)

        logger.info(
            "STTrace kept %d of %d points (buffer size %d)",
            len(buffer), len(points), max_buffer_size
        )
        return buffer.points()


def _check_ratio(ratio: float) -> None:
    if not (ratio > 0 and math.isfinite(ratio)):
        raise ValueError(f"Compression ratio must be a positive finite number, got {ratio}")
