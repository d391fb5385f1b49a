"""Great-circle distance helpers."""

import math

EARTH_RADIUS_MILES = 3959


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the Haversine distance in miles between two points in signed degrees.

    Inputs are not validated; out-of-range degrees give a defined but
    meaningless result.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c
