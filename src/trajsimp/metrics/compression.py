from typing import Sequence
from trajsimp.core.point import Point

def calculate_compression_ratio(original: Sequence[Point], compressed: Sequence[Point]) -> float:
    """
    Original count / compressed count, the `ratio` a SQUISH-E run aims for.
    Returns 1.0 if compressed is empty.
    """
    if not compressed:
        return 1.0
    return len(original) / len(compressed)

def calculate_kept_fraction(original: Sequence[Point], compressed: Sequence[Point]) -> float:
    """
    Compressed count / original count, the `compression_ratio` an STTrace run aims for.
    """
    if not original:
        return 0.0
    return len(compressed) / len(original)
