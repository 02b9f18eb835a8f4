from typing import NamedTuple

from shapely.geometry import Polygon, box


class Coordinate(NamedTuple):
    lon: float  # grados
    lat: float  # grados


class SunPosition(NamedTuple):
    azimuth: float   # rad, desde el Norte en sentido horario
    altitude: float  # rad sobre el horizonte (negativo = noche)


class Rect(NamedTuple):
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def to_polygon(self) -> Polygon:
        return box(self.min_lon, self.min_lat, self.max_lon, self.max_lat)


def as_coordinate(p) -> Coordinate:
    """Coordinate, tupla (lon, lat) o shapely Point."""
    if isinstance(p, Coordinate):
        return p
    if hasattr(p, "x") and hasattr(p, "y"):
        return Coordinate(float(p.x), float(p.y))
    lon, lat = p[0], p[1]
    return Coordinate(float(lon), float(lat))
