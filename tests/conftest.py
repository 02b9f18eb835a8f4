import math

import pytest
from shapely.geometry import Polygon

from sombra.utils.geo import EARTH_RADIUS_M

NYC = (-74.005941, 40.712784)
WINTER_MS = 1_419_184_800_000
SUMMER_MS = 1_655_830_800_000


def square(lon0, lat0, side_m):
    dlat = math.degrees(side_m / EARTH_RADIUS_M)
    dlon = dlat / math.cos(math.radians(lat0))
    return Polygon([(lon0, lat0), (lon0 + dlon, lat0), (lon0 + dlon, lat0 + dlat), (lon0, lat0 + dlat)])


@pytest.fixture
def nyc_footprint():
    return square(*NYC, 20.0)
