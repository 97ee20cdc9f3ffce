"""
functions for geohash encoding and decoding
"""

import numpy as np

from .base32 import TEXT_WIDTH, int2text, text2int
from .bits import (LAT_MAX, LNG_MAX, MASK64, deinterleave, denormalize,
                   interleave, normalize)
from .scan import scan_bounds, scan_decode, scan_encode

PRECISION_MIN = 1
PRECISION_MAX = TEXT_WIDTH
PRECISION_HIGH = 20
BITS_MIN = 1
BITS_MAX = 64


def _clamp(lo, hi, value):
    return max(lo, min(hi, int(value)))


def precision2res(precision):
    """Cell size in degrees for a character precision

    Returns
    -------
    (lat_degrees, lng_degrees) : tuple of float
    """
    precision = _clamp(PRECISION_MIN, PRECISION_HIGH, precision)
    bits = precision * 5
    # longitude takes the extra bit when the count is odd
    lng_bits = (bits + 1) // 2
    lat_bits = bits // 2
    return 2 * LAT_MAX / 2**lat_bits, 2 * LNG_MAX / 2**lng_bits


def res2display():
    '''prints cell sizes for each character precision'''
    for precision in range(PRECISION_MIN, PRECISION_HIGH + 1):
        lat_deg, lng_deg = precision2res(precision)
        print(f"{lat_deg:.3e} x {lng_deg:.3e} degrees (~{lat_deg * 111.32:.3e} km tall) "
              f"at precision {precision}")


def geo2int(lats, lons, bits=BITS_MAX):
    """Calculates geohash integers from geographic coordinates

    The result holds `bits` significant bits right aligned, so a 64-bit
    hash is the full interleave and lower precisions are its top bits.

    Parameters
    ----------
    lats, lons : float or array-like
        Coordinates in degrees, flattened to 1-D. Values outside
        [-90, 90) / [-180, 180) are not checked and give meaningless hashes.
    bits : int
        Bit precision, clamped to 1-64

    Returns
    -------
    int or ndarray of uint64
    """
    bits = _clamp(BITS_MIN, BITS_MAX, bits)
    lat32 = normalize(lats, LAT_MAX)
    lng32 = normalize(lons, LNG_MAX)
    hashes = interleave(lat32, lng32)
    return hashes >> (BITS_MAX - bits)


def int2hash(hashes, precision=PRECISION_MAX):
    """Convert geohash integers to strings of `precision` characters

    Assumes the integers were produced with precision*5 bits; anything else
    gives a malformed string. A 64-bit hash should be shifted right by 4
    to get a 12 character string.
    """
    precision = _clamp(PRECISION_MIN, PRECISION_MAX, precision)
    texts = int2text(hashes)
    if isinstance(texts, str):
        return texts[TEXT_WIDTH - precision:]
    return np.array([t[TEXT_WIDTH - precision:] for t in texts], dtype=str)


def hash2int(hashes):
    """Convert geohash strings of any precision to integers

    See `base32.text2int` for the width rules.
    """
    return text2int(hashes)


def geo2hash(lats, lons, precision=PRECISION_MAX):
    """Calculates geohash strings from geographic coordinates

    lats: float or array-like
    lons: float or array-like
    precision: int ; characters, clamped to 1-12

    Array inputs are flattened to 1-D, as geo2int does. The upper domain
    edge wraps (see `bits.normalize`), so geo2hash(90, 180) is
    "000000000000" where geo2hash_high gives "zzzzzzzzzzzz"."""

    precision = _clamp(PRECISION_MIN, PRECISION_MAX, precision)
    hashes = geo2int(lats, lons, precision * 5)
    return int2hash(hashes, precision)


def geo2hash_high(lats, lons, precision=PRECISION_HIGH):
    """Calculates geohash strings of up to 20 characters

    Uses the slower boundary-scan bisection, the only path able to go past
    the 64 bits of an integer hash.

    lats: float or array-like
    lons: float or array-like
    precision: int ; characters, clamped to 1-20"""

    precision = _clamp(PRECISION_MIN, PRECISION_HIGH, precision)
    return scan_encode(lats, lons, precision)


def _shift_to_top(hashes, bits):
    """Left align hashes of `bits` significant bits within 64 bits"""
    hashes = np.atleast_1d(np.asarray(hashes)).ravel().astype(np.uint64)
    shift = np.uint64(BITS_MAX) - np.atleast_1d(np.asarray(bits)).ravel().astype(np.uint64)
    aligned = hashes << shift
    # a shift by the full width is undefined for uint64
    return np.where(shift >= np.uint64(BITS_MAX), np.uint64(0), aligned)


def _int2geo(hashes, bits, is_scalar):
    lat32, lng32 = deinterleave(_shift_to_top(hashes, bits))
    lats = denormalize(lat32, LAT_MAX)
    lons = denormalize(lng32, LNG_MAX)
    if is_scalar:
        return float(lats[0]), float(lons[0])
    return lats, lons


def int2geo(hashes, bits=BITS_MAX):
    """Calculates coordinates from geohash integers

    Parameters
    ----------
    hashes : int or array-like
        Geohash integer(s) holding `bits` significant bits
    bits : int
        Bit precision, clamped to 1-64. A request for 0 bits decodes as 1
        bit (the lowest bit of the hash), not as an empty hash at
        (-90, -180).

    Returns
    -------
    lat, lon : float or ndarray
        Lower left corner of the 32-bit cell addressed by the hash
    """
    bits = _clamp(BITS_MIN, BITS_MAX, bits)
    is_scalar = np.ndim(hashes) == 0
    if is_scalar:
        hashes = int(hashes) & MASK64
    return _int2geo(hashes, bits, is_scalar)


def _truncate(hashes, limit):
    if isinstance(hashes, str):
        return hashes[:limit]
    return [h[:limit] for h in np.ravel(hashes)]


def hash2geo(hashes):
    """Calculates coordinates from geohash strings

    Strings longer than 12 characters are truncated to 12. Each string's
    bit precision comes from its own length, so mixed lengths are fine.

    Returns
    -------
    lat, lon : float or ndarray
    """
    hashes = _truncate(hashes, PRECISION_MAX)
    is_scalar = isinstance(hashes, str)
    if is_scalar:
        bits = len(hashes) * 5
    else:
        bits = np.array([len(h) * 5 for h in hashes], dtype=np.int64)
    return _int2geo(text2int(hashes), bits, is_scalar)


def hash2geo_high(hashes):
    """Calculates coordinates from geohash strings of up to 20 characters

    Longer strings are truncated to 20. Returns the center of each cell.
    """
    return scan_decode(_truncate(hashes, PRECISION_HIGH))


def hash2bbox(hashes):
    """Bounding box of the cell named by each geohash string

    Strings longer than 20 characters are truncated to 20.

    Returns
    -------
    bbox : dict or list of dicts
        {"west": min_lon, "south": min_lat, "east": max_lon, "north": max_lat}
    """
    is_scalar = isinstance(hashes, str)
    hashes = _truncate(hashes, PRECISION_HIGH)
    if is_scalar:
        hashes = [hashes]

    bboxes = []
    for geohash in hashes:
        lat_lo, lat_hi, lng_lo, lng_hi = scan_bounds(geohash)
        bboxes.append({
            "west": float(lng_lo),
            "south": float(lat_lo),
            "east": float(lng_hi),
            "north": float(lat_hi),
        })

    if is_scalar:
        return bboxes[0]
    return bboxes
