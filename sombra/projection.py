import math

from sombra.errors import (
    DegenerateSunAngleError,
    InvalidHeightError,
    NumericOverflowError,
)


def check_height(height):
    if not math.isfinite(height) or height < 0:
        raise InvalidHeightError(f"Altura inválida: {height!r} (se espera >= 0 m)")


def shadow_length(sun_position, height, coordinate=None) -> float:
    # d = h / tan(alt)
    check_height(height)
    if sun_position.altitude <= 0:
        raise DegenerateSunAngleError(coordinate, sun_position.altitude)
    if height == 0:
        return 0.0
    d = height / math.tan(sun_position.altitude)
    if not math.isfinite(d):
        raise NumericOverflowError(
            f"Largo de sombra no finito para altitud {sun_position.altitude!r} rad"
        )
    return d


def shadow_bearing(sun_position) -> float:
    # la sombra se proyecta en sentido opuesto al sol
    return (sun_position.azimuth + math.pi) % (2 * math.pi)
