import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Protocol

from astral import Observer
from astral.sun import azimuth as sun_azimuth, elevation as sun_elevation
from suncalc import get_position

from sombra.errors import NumericOverflowError
from sombra.models import Coordinate, SunPosition, as_coordinate

log = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
TWO_PI = 2 * math.pi


class SunPositionProvider(Protocol):
    def sun_position(self, coordinate: Coordinate, unixtime_ms: int) -> SunPosition: ...


def utc_datetime(unixtime_ms: int) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=int(unixtime_ms))
    except OverflowError as e:
        raise NumericOverflowError(f"Instante fuera de rango: {unixtime_ms} ms") from e


class SunCalcPosition:
    """Posición solar con suncalc (algoritmo de suncalc.js, sin refracción)."""

    def sun_position(self, coordinate, unixtime_ms):
        lon, lat = as_coordinate(coordinate)
        pos = get_position(utc_datetime(unixtime_ms), lon, lat)
        # suncalc mide el azimut desde el Sur hacia el Oeste
        az = (float(pos["azimuth"]) + math.pi) % TWO_PI
        return SunPosition(az, float(pos["altitude"]))


class AstralSunPosition:
    """Posición solar NOAA vía astral."""

    def __init__(self, with_refraction=True):
        self.with_refraction = with_refraction

    def sun_position(self, coordinate, unixtime_ms):
        lon, lat = as_coordinate(coordinate)
        dt = utc_datetime(unixtime_ms)
        obs = Observer(latitude=lat, longitude=lon)
        az = sun_azimuth(obs, dt) % 360.0  # grados desde el Norte, sentido horario
        elev = sun_elevation(obs, dt, with_refraction=self.with_refraction)
        return SunPosition(math.radians(az), math.radians(elev))


class FixedSunPosition:
    """Ángulos dados de antemano, iguales para cualquier punto e instante."""

    def __init__(self, azimuth, altitude):
        self.position = SunPosition(float(azimuth) % TWO_PI, float(altitude))

    @classmethod
    def from_degrees(cls, azimuth_deg, altitude_deg):
        return cls(math.radians(azimuth_deg), math.radians(altitude_deg))

    def sun_position(self, coordinate, unixtime_ms):
        return self.position
