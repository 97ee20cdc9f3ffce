"""
boundary-scan geohash encoding and decoding

Bisects the coordinate domain one bit at a time rather than going through
a 64-bit integer, which lets it reach 20 characters (100 bits). Even bit
indices bisect longitude and odd ones latitude, matching the bit order of
the interleaved integer, so both paths agree up to 12 characters.
"""

import numpy as np

from .base32 import char_index, indices2text
from .bits import LAT_MAX, LNG_MAX

# weight of each bit inside one 5-bit character, most significant first
BIT_WEIGHTS = (16, 8, 4, 2, 1)


def scan_encode(lats, lons, precision):
    """Encode coordinates to geohash strings by bisection

    Parameters
    ----------
    lats, lons : float or array-like
        Coordinates in degrees, broadcast against each other
    precision : int
        Number of characters to produce (no clamping here)

    Returns
    -------
    str or ndarray of str
    """
    is_scalar = np.ndim(lats) == 0 and np.ndim(lons) == 0
    lats, lons = np.broadcast_arrays(np.atleast_1d(np.asarray(lats, dtype=np.float64)).ravel(),
                                     np.atleast_1d(np.asarray(lons, dtype=np.float64)).ravel())

    lat_lo = np.full(lats.shape, -LAT_MAX)
    lat_hi = np.full(lats.shape, LAT_MAX)
    lng_lo = np.full(lons.shape, -LNG_MAX)
    lng_hi = np.full(lons.shape, LNG_MAX)

    indices = np.zeros((len(lats), precision), dtype=np.int64)
    even = True
    for column in range(precision):
        for weight in BIT_WEIGHTS:
            if even:
                mid = (lng_lo + lng_hi) / 2
                upper = lons >= mid
                lng_lo = np.where(upper, mid, lng_lo)
                lng_hi = np.where(upper, lng_hi, mid)
            else:
                mid = (lat_lo + lat_hi) / 2
                upper = lats >= mid
                lat_lo = np.where(upper, mid, lat_lo)
                lat_hi = np.where(upper, lat_hi, mid)
            indices[:, column] |= np.where(upper, weight, 0)
            even = not even

    texts = indices2text(indices)
    return texts[0] if is_scalar else np.array(texts, dtype=str)


def scan_bounds(geohash):
    """Cell bounds of a geohash string of any length

    Returns
    -------
    tuple of float
        (lat_min, lat_max, lng_min, lng_max)

    Raises
    ------
    InvalidCharacterError
        If a character is not in the alphabet
    """
    lat_lo, lat_hi = -LAT_MAX, LAT_MAX
    lng_lo, lng_hi = -LNG_MAX, LNG_MAX
    even = True

    for position in range(len(geohash)):
        idx = char_index(geohash, position)
        for shift in range(4, -1, -1):
            bit = (idx >> shift) & 1
            if even:
                mid = (lng_lo + lng_hi) / 2
                if bit:
                    lng_lo = mid
                else:
                    lng_hi = mid
            else:
                mid = (lat_lo + lat_hi) / 2
                if bit:
                    lat_lo = mid
                else:
                    lat_hi = mid
            even = not even

    return lat_lo, lat_hi, lng_lo, lng_hi


def scan_decode(hashes):
    """Decode geohash string(s) to the center of their cell

    Returns
    -------
    lat, lon : float or ndarray
    """
    if isinstance(hashes, str):
        lat_lo, lat_hi, lng_lo, lng_hi = scan_bounds(hashes)
        return (lat_lo + lat_hi) / 2, (lng_lo + lng_hi) / 2

    bounds = np.array([scan_bounds(h) for h in hashes], dtype=np.float64).reshape(-1, 4)
    lats = (bounds[:, 0] + bounds[:, 1]) / 2
    lons = (bounds[:, 2] + bounds[:, 3]) / 2
    return lats, lons
