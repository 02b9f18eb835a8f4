import math

from sombra.models import Coordinate

EARTH_RADIUS_M = 6371000.0


def normalize_lon(lon):
    # [-180, 180)
    return (lon + 180.0) % 360.0 - 180.0


def haversine_m(a, b, radius=EARTH_RADIUS_M):
    lon1, lat1 = a[0], a[1]
    lon2, lat2 = b[0], b[1]
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    y = math.sin(dlat/2)**2 + math.cos(math.radians(lat1))*math.cos(math.radians(lat2))*math.sin(dlon/2)**2
    return 2*radius*math.asin(min(1.0, math.sqrt(y)))


def haversine_destination(coord, bearing, distance, radius=EARTH_RADIUS_M) -> Coordinate:
    # bearing en rad desde el Norte, distance en metros
    lon1, lat1 = math.radians(coord[0]), math.radians(coord[1])
    delta = distance / radius
    sin_lat2 = math.sin(lat1)*math.cos(delta) + math.cos(lat1)*math.sin(delta)*math.cos(bearing)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))  # evita NaN en los polos
    lon2 = lon1 + math.atan2(
        math.sin(bearing)*math.sin(delta)*math.cos(lat1),
        math.cos(delta) - math.sin(lat1)*math.sin(lat2),
    )
    return Coordinate(normalize_lon(math.degrees(lon2)), math.degrees(lat2))
