import pandas as pd
from typing import Iterator, Dict, Iterable, Optional
from pathlib import Path
from .point import Point

COLUMNS = ('lat', 'lon', 'time')

class TrajectoryStream:
    """
    Streams a trajectory file line-by-line as Point objects.
    Handles both headerless "lat lon time" files (whitespace separated) and
    headered CSV files (via column mapping).
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: Optional[str] = None,
        col_mapping: Dict[str, str] = None,
        has_header: bool = False,
        chunksize: int = 1000
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.sep = sep if sep is not None else r'\s+'
        self.has_header = has_header
        self.chunksize = chunksize

        self.mapping = col_mapping or {
            'lat': 'lat',
            'lon': 'lon',
            'time': 'time'
        }

    def _reader(self):
        if self.has_header:
            header = pd.read_csv(self.filepath, nrows=0, sep=self.sep)
            missing = [self.mapping[c] for c in COLUMNS if self.mapping[c] not in header.columns]
            if missing:
                raise ValueError(f"Trajectory file is missing columns {missing}. Found: {list(header.columns)}")
            return pd.read_csv(self.filepath, sep=self.sep, chunksize=self.chunksize)

        names = [self.mapping[c] for c in COLUMNS]
        return pd.read_csv(
            self.filepath,
            sep=self.sep,
            header=None,
            names=names,
            usecols=range(len(names)),
            chunksize=self.chunksize
        )

    def stream(self) -> Iterator[Point]:
        """
        Yields points from the file one by one.
        """
        with self._reader() as reader:
            for chunk in reader:
                for _, row in chunk.iterrows():
                    yield Point(
                        lat=float(row[self.mapping['lat']]),
                        lon=float(row[self.mapping['lon']]),
                        time=float(row[self.mapping['time']])
                    )

    def __iter__(self) -> Iterator[Point]:
        return self.stream()

    def read(self) -> list[Point]:
        return list(self.stream())


def write_points(points: Iterable[Point], filepath: str | Path, sep: str = ',') -> Path:
    """
    Writes points as headerless "lat,lon,time" rows.
    """
    filepath = Path(filepath)
    df = pd.DataFrame([p.tuple for p in points], columns=list(COLUMNS))
    df.to_csv(filepath, sep=sep, header=False, index=False)
    return filepath
