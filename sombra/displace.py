import math
from typing import Protocol

from pyproj import Geod

from sombra.errors import InvalidDistanceError, NumericOverflowError
from sombra.models import Coordinate, as_coordinate
from sombra.utils.geo import EARTH_RADIUS_M, haversine_destination, normalize_lon


class Displace(Protocol):
    def __call__(self, coordinate: Coordinate, bearing: float, distance: float) -> Coordinate: ...


def check_distance(distance, radius):
    if math.isnan(distance) or distance < 0:
        raise InvalidDistanceError(f"Distancia inválida: {distance!r} m")
    # a media circunferencia el punto es antipodal y el rumbo deja de tener sentido
    if math.isinf(distance) or distance >= math.pi * radius:
        raise NumericOverflowError(f"Distancia fuera de rango: {distance!r} m")


class HaversineDisplace:
    """Destino sobre una esfera de radio fijo."""

    def __init__(self, radius_m=EARTH_RADIUS_M):
        self.radius_m = float(radius_m)

    def __call__(self, coordinate, bearing, distance):
        check_distance(distance, self.radius_m)
        return haversine_destination(as_coordinate(coordinate), bearing, distance, self.radius_m)


class GeodDisplace:
    """Destino geodésico sobre el elipsoide (pyproj.Geod)."""

    def __init__(self, ellps="WGS84"):
        self.ellps = ellps
        self.geod = Geod(ellps=ellps)

    def __call__(self, coordinate, bearing, distance):
        check_distance(distance, self.geod.a)
        lon, lat = as_coordinate(coordinate)
        lon2, lat2, _ = self.geod.fwd(lon, lat, math.degrees(bearing), distance)
        return Coordinate(normalize_lon(float(lon2)), float(lat2))
