from typing import Iterable, Protocol

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.polygon import orient

from sombra.errors import DegenerateGeometryError


class ConvexHull(Protocol):
    def __call__(self, polygons: Iterable[Polygon]) -> Polygon: ...


class ShapelyConvexHull:
    def __call__(self, polygons):
        hull = MultiPolygon(list(polygons)).convex_hull
        if hull.geom_type != "Polygon" or hull.is_empty:
            raise DegenerateGeometryError(f"Envolvente degenerada: {hull.geom_type}")
        # exterior antihorario (regla de la mano derecha de GeoJSON)
        return orient(hull, sign=1.0)
