# leaselib/geo.py - distance between rentable item locations
import math

RADIUS_OF_EARTH_IN_KM = 6371
KM_PER_MILE = 1.60934


def haversine_distance(coords1, coords2, is_miles: bool = False) -> float:
    """Great-circle distance between two (lat, lon) pairs, floored to 2 decimals."""
    lat1, lon1 = coords1
    lat2, lon2 = coords2
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = math.sin(d_lat / 2) ** 2 + math.sin(d_lon / 2) ** 2 * math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
    distance = RADIUS_OF_EARTH_IN_KM * 2 * math.asin(math.sqrt(a))
    if is_miles:
        distance /= KM_PER_MILE
    return math.floor(distance * 100) / 100
