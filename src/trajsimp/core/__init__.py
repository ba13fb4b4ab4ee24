from .point import Point
from .stream import TrajectoryStream, write_points

__all__ = ["Point", "TrajectoryStream", "write_points"]
