from dataclasses import dataclass
from datetime import datetime, timezone

@dataclass(frozen=True)
class Point:
    """
    Represents a single recorded vehicle position.
    frozen=True keeps records immutable once loaded, so the index can share them.
    """
    vehicle_id: int
    registration: str
    lat: float
    lon: float
    recorded_time_utc: int = 0

    @property
    def tuple(self):
        return (self.vehicle_id, self.registration, self.lat, self.lon, self.recorded_time_utc)

    @property
    def recorded_at(self) -> datetime:
        return datetime.fromtimestamp(self.recorded_time_utc, tz=timezone.utc)
