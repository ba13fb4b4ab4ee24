from typing import List, Dict
import math
from trajsimp.core.point import Point
from trajsimp.metrics.distance import sed

def _planar_distance(p: Point, q: Point) -> float:
    d_lat = p.lat - q.lat
    d_lon = p.lon - q.lon
    return math.sqrt(d_lat*d_lat + d_lon*d_lon)

def calculate_sed_stats(original: List[Point], compressed: List[Point]) -> Dict[str, float | List[float]]:
    """
    Calculates statistics of the Synchronized Euclidean Distance (SED) error
    a compressed trajectory introduces over the original one.
    
    Metrics:
    - average_sed: Mean SED error over all original points.
    - max_sed: Maximum SED error encountered.
    - rmse: Root Mean Square Error.
    
    Args:
        original: List of original points.
        compressed: Ordered subset of original.
        
    Returns:
        Dictionary containing 'average_sed', 'max_sed', 'rmse', and 'sed_errors'.
    """
    if not original or not compressed:
        return {'average_sed': 0.0, 'max_sed': 0.0, 'rmse': 0.0, 'sed_errors': []}

    sed_errors = []

    # compressed[comp_idx] and compressed[comp_idx+1] bound the current chord
    comp_idx = 0
    for p in original:
        while comp_idx < len(compressed) - 1 and p.time > compressed[comp_idx+1].time:
            comp_idx += 1

        if comp_idx >= len(compressed) - 1:
            # Past the last chord, distance to the last kept point
            sed_errors.append(_planar_distance(p, compressed[-1]))
            continue

        p_start = compressed[comp_idx]
        p_end = compressed[comp_idx+1]

        if p.time < p_start.time:
            sed_errors.append(_planar_distance(p, p_start))
            continue

        sed_errors.append(sed(p_start, p, p_end))

    avg_sed = sum(sed_errors) / len(sed_errors)
    max_sed = max(sed_errors)
    mse = sum(e*e for e in sed_errors) / len(sed_errors)
    rmse = math.sqrt(mse)

    return {
        'average_sed': avg_sed,
        'max_sed': max_sed,
        'rmse': rmse,
        'sed_errors': sed_errors
    }
