from .logger import configure_logging
from .point import Point
from .stream import VehiclePositionStream

__all__ = ["configure_logging", "Point", "VehiclePositionStream"]
