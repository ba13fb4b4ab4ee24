from dataclasses import dataclass

@dataclass(frozen=True)
class Point:
    """
    Represents a single GPS fix (lat, lon, t).
    frozen=True makes the class immutable, so buffers can hold it without copying.
    """
    lat: float
    lon: float
    time: float

    @property
    def tuple(self):
        return (self.lat, self.lon, self.time)
