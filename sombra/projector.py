import logging
import math
from collections.abc import Mapping
from functools import lru_cache

from shapely.geometry import Polygon, shape as to_shape

from sombra.config import load_config
from sombra.displace import GeodDisplace, HaversineDisplace
from sombra.errors import DegenerateGeometryError, DegenerateSunAngleError
from sombra.hull import ShapelyConvexHull
from sombra.models import Coordinate, Rect, as_coordinate
from sombra.projection import check_height, shadow_bearing, shadow_length
from sombra.sun import AstralSunPosition, SunCalcPosition

log = logging.getLogger(__name__)


def ring_from_coords(coords):
    ring = [tuple(float(v) for v in c[:2]) for c in coords]
    if not all(math.isfinite(v) for c in ring for v in c):
        raise DegenerateGeometryError("Coordenadas no finitas en el anillo")
    if len(ring) < 4 or ring[0] != ring[-1]:
        raise DegenerateGeometryError("El anillo debe estar cerrado y tener al menos 3 vértices")
    return ring


def to_polygon(shape) -> Polygon:
    """Polygon, Rect, GeoJSON (dict o __geo_interface__) o lista de (lon, lat) cerrada."""
    if isinstance(shape, Rect):
        if shape.min_lon >= shape.max_lon or shape.min_lat >= shape.max_lat:
            raise DegenerateGeometryError(f"Rectángulo vacío: {tuple(shape)}")
        g = shape.to_polygon()
    elif isinstance(shape, Polygon):
        g = shape
    elif isinstance(shape, Mapping) or hasattr(shape, "__geo_interface__"):
        gi = shape if isinstance(shape, Mapping) else shape.__geo_interface__
        if gi.get("type") == "Polygon":
            # shape() cierra los anillos abiertos sin avisar
            for r in gi.get("coordinates") or []:
                if len(r) < 4 or tuple(r[0]) != tuple(r[-1]):
                    raise DegenerateGeometryError("El anillo debe estar cerrado y tener al menos 3 vértices")
        g = to_shape(gi)
    else:
        g = Polygon(ring_from_coords(shape))

    if g.geom_type != "Polygon":
        raise DegenerateGeometryError(f"Se espera un Polygon, llegó {g.geom_type}")
    if g.is_empty:
        raise DegenerateGeometryError("Polígono vacío")
    ring = [tuple(c[:2]) for c in g.exterior.coords]
    if not all(math.isfinite(v) for c in ring for v in c):
        raise DegenerateGeometryError("Coordenadas no finitas en el polígono")
    if len(set(ring)) < 3:
        raise DegenerateGeometryError("El polígono necesita al menos 3 vértices distintos")
    if g.area == 0:
        raise DegenerateGeometryError("Polígono de área nula (vértices colineales)")
    return g


def unwrap_lon(lon, ref):
    # mantiene el vértice desplazado contiguo a su origen si cruza el antimeridiano
    return lon + 360.0 * round((ref - lon) / 360.0)


class ShadowProjector:
    def __init__(self, sun=None, displace=None, hull=None, min_altitude_deg=0.0):
        self.sun = sun or SunCalcPosition()
        self.displace = displace or HaversineDisplace()
        self.hull = hull or ShapelyConvexHull()
        self.min_altitude = math.radians(min_altitude_deg)

    def sun_position(self, point, unixtime_ms):
        return self.sun.sun_position(as_coordinate(point), unixtime_ms)

    def shadow_extent(self, footprint: Polygon, height: float, unixtime_ms: int) -> Polygon:
        moved = []
        for c in footprint.exterior.coords[:-1]:
            v = Coordinate(float(c[0]), float(c[1]))
            sp = self.sun.sun_position(v, unixtime_ms)
            if sp.altitude <= max(self.min_altitude, 0.0):
                log.warning("Altitud solar %.2f° en %s (mínimo %.2f°)",
                            math.degrees(sp.altitude), v, math.degrees(self.min_altitude))
                raise DegenerateSunAngleError(v, sp.altitude)
            d = shadow_length(sp, height, v)
            lon, lat = self.displace(v, shadow_bearing(sp), d)
            log.debug("%s az=%.2f° alt=%.2f° d=%.2f m",
                      v, math.degrees(sp.azimuth), math.degrees(sp.altitude), d)
            moved.append((unwrap_lon(lon, v.lon), lat))
        return Polygon(moved)

    def shadow(self, shape, height: float, unixtime_ms: int) -> Polygon:
        check_height(height)
        footprint = to_polygon(shape)
        extent = self.shadow_extent(footprint, height, unixtime_ms)
        hull = self.hull([footprint, extent])
        log.debug("sombra: %d vértices -> %d, h=%.2f m t=%d",
                  len(footprint.exterior.coords) - 1, len(hull.exterior.coords) - 1, height, unixtime_ms)
        return hull


def build_projector(cfg) -> ShadowProjector:
    if cfg["sun_provider"] == "astral":
        sun = AstralSunPosition(with_refraction=cfg["with_refraction"])
    else:
        sun = SunCalcPosition()
    if cfg["displacement"] == "geod":
        displace = GeodDisplace(ellps=cfg["geod_ellps"])
    else:
        displace = HaversineDisplace(radius_m=cfg["earth_radius_m"])
    return ShadowProjector(sun=sun, displace=displace, min_altitude_deg=cfg["min_altitude_deg"])


@lru_cache(maxsize=1)
def default_projector() -> ShadowProjector:
    return build_projector(load_config())


def shadow(shape, height, unixtime_ms) -> Polygon:
    return default_projector().shadow(shape, height, unixtime_ms)


def sun_position(point, unixtime_ms):
    return default_projector().sun_position(point, unixtime_ms)
