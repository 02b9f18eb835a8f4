"""Sombra proyectada en el suelo por la planta de un edificio en un instante dado."""

from sombra.config import load_config
from sombra.displace import Displace, GeodDisplace, HaversineDisplace
from sombra.errors import (
    ConfigError,
    DegenerateGeometryError,
    DegenerateSunAngleError,
    InvalidDistanceError,
    InvalidHeightError,
    NumericOverflowError,
    ShadowError,
)
from sombra.hull import ConvexHull, ShapelyConvexHull
from sombra.models import Coordinate, Rect, SunPosition
from sombra.projection import shadow_bearing, shadow_length
from sombra.projector import (
    ShadowProjector,
    build_projector,
    default_projector,
    shadow,
    sun_position,
    to_polygon,
)
from sombra.sun import (
    AstralSunPosition,
    FixedSunPosition,
    SunCalcPosition,
    SunPositionProvider,
)
