from typing import Dict, Iterable, List, Type
import logging

from trajsimp.core.point import Point
from trajsimp.modules.base import Compressor
from trajsimp.modules.squish_e import SquishECompressor
from trajsimp.modules.sttrace import STTraceCompressor

logger = logging.getLogger(__name__)

COMPRESSORS: Dict[str, Type[Compressor]] = {
    'squish_e': SquishECompressor,
    'sttrace': STTraceCompressor,
}

def get_compressor(method: str, **params) -> Compressor:
    """
    Builds the compressor registered under `method` with the given parameters.
    """
    try:
        cls = COMPRESSORS[method]
    except KeyError:
        raise ValueError(f"Unknown compression method '{method}'. Available: {sorted(COMPRESSORS)}") from None
    return cls(**params)

def simplify(points: Iterable[Point], method: str = 'squish_e', **params) -> List[Point]:
    """
    Batch helper: compresses a whole trajectory with the chosen method.
    """
    compressor = get_compressor(method, **params)
    points = list(points)
    logger.info(f"Simplifying {len(points)} points with {method}")
    return compressor.compress(points)

def simplify_stream(stream: Iterable[Point], method: str = 'squish_e', **params) -> List[Point]:
    """
    Feeds a point stream into the chosen engine.
    SQUISH-E consumes the stream lazily; STTrace needs the total length up front
    so the stream is collected first.
    """
    compressor = get_compressor(method, **params)
    if isinstance(compressor, SquishECompressor):
        for point in stream:
            compressor.process_point(point)
        return compressor.flush()
    return compressor.compress(list(stream))
