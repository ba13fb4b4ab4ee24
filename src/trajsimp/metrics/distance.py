import math
from trajsimp.core.point import Point

def sed(start: Point, mid: Point, end: Point) -> float:
    """
    Synchronized Euclidean Distance (SED) of `mid` against the chord start -> end.

    The position expected at mid.time is linearly interpolated along the chord;
    the result is the Euclidean distance between that position and mid.
    A zero-duration chord uses ratio 1 (the interpolated position is `end`).
    """
    denominator = end.time - start.time
    ratio = (mid.time - start.time) / denominator if denominator != 0.0 else 1.0

    pred_lat = start.lat + (end.lat - start.lat) * ratio
    pred_lon = start.lon + (end.lon - start.lon) * ratio

    d_lat = pred_lat - mid.lat
    d_lon = pred_lon - mid.lon
    return math.sqrt(d_lat*d_lat + d_lon*d_lon)

def ped(start: Point, mid: Point, end: Point) -> float:
    """
    Perpendicular Euclidean Distance (PED) from `mid` to the infinite line through start and end.
    Returns 0.0 when start and end share a position.
    """
    a = end.lon - start.lon
    b = start.lat - end.lat
    c = end.lat * start.lon - start.lat * end.lon
    if a == 0.0 and b == 0.0:
        return 0.0
    return abs(a * mid.lat + b * mid.lon + c) / math.sqrt(a*a + b*b)
