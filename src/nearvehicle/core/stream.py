import pandas as pd
from typing import Iterator, Dict, Optional
from pathlib import Path
import logging
from .point import Point

logger = logging.getLogger(__name__)

COLUMNS = ['vehicle_id', 'registration', 'lat', 'lon', 'recorded_time_utc']

class VehiclePositionStream:
    """
    Reads vehicle position records from a delimited text file chunk by chunk.
    By default the file has no header and holds the columns
    vehicle_id, registration, lat, lon, recorded_time_utc in that order (tab separated).
    Rows whose numeric fields cannot be parsed are skipped.
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: str = '\t',
        col_mapping: Optional[Dict[str, str]] = None,
        has_header: bool = False,
        chunksize: int = 1000
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.sep = sep
        self.has_header = has_header
        self.chunksize = chunksize
        self.skipped = 0

        # Without a header the positional names are the column names
        self.mapping = {name: name for name in COLUMNS}
        if col_mapping:
            self.mapping.update(col_mapping)

    def __iter__(self) -> Iterator[Point]:
        return self.stream()

    def stream(self) -> Iterator[Point]:
        """
        Yields points from the file one by one, in file order.
        """
        self.skipped = 0
        if self.filepath.stat().st_size == 0:
            return

        read_kwargs = dict(
            sep=self.sep,
            chunksize=self.chunksize,
            dtype=str,
            keep_default_na=False,
            index_col=False,
        )
        if self.has_header:
            read_kwargs['header'] = 0
        else:
            read_kwargs['header'] = None
            read_kwargs['names'] = COLUMNS

        with pd.read_csv(self.filepath, **read_kwargs) as reader:
            for chunk in reader:
                missing = [col for col in self.mapping.values() if col not in chunk.columns]
                if missing:
                    raise ValueError(f"Input is missing columns {missing}. Found: {list(chunk.columns)}")

                ids = pd.to_numeric(chunk[self.mapping['vehicle_id']], errors='coerce')
                lats = pd.to_numeric(chunk[self.mapping['lat']], errors='coerce')
                lons = pd.to_numeric(chunk[self.mapping['lon']], errors='coerce')
                times = pd.to_numeric(chunk[self.mapping['recorded_time_utc']], errors='coerce')
                registrations = chunk[self.mapping['registration']]

                valid = ids.notna() & lats.notna() & lons.notna() & times.notna() & registrations.notna()
                valid &= times.fillna(-1) >= 0
                # Ids and timestamps are whole numbers; 1.5 is malformed, not 1
                valid &= (ids.fillna(0.5) % 1 == 0) & (times.fillna(0.5) % 1 == 0)
                self.skipped += int((~valid).sum())

                for vehicle_id, registration, lat, lon, recorded in zip(
                    ids[valid], registrations[valid], lats[valid], lons[valid], times[valid]
                ):
                    yield Point(
                        vehicle_id=int(vehicle_id),
                        registration=str(registration),
                        lat=float(lat),
                        lon=float(lon),
                        recorded_time_utc=int(recorded)
                    )

        if self.skipped:
            logger.warning("Skipped %d malformed rows in %s", self.skipped, self.filepath)
