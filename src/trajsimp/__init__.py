from trajsimp.core.point import Point
from trajsimp.core.stream import TrajectoryStream, write_points
from trajsimp.driver import get_compressor, simplify, simplify_stream
from trajsimp.metrics import calculate_compression_ratio, calculate_kept_fraction, calculate_sed_stats, ped, sed
from trajsimp.modules import Compressor, SquishECompressor, STTraceCompressor

__all__ = [
    "Point",
    "TrajectoryStream",
    "write_points",
    "get_compressor",
    "simplify",
    "simplify_stream",
    "calculate_compression_ratio",
    "calculate_kept_fraction",
    "calculate_sed_stats",
    "ped",
    "sed",
    "Compressor",
    "SquishECompressor",
    "STTraceCompressor",
]
