"""
bit-level primitives for geohash integers

Each axis is normalized onto an unsigned 32-bit integer and the two are
merged into one 64-bit Morton (Z-order) code. Latitude sits on the even
bits and longitude on the odd bits, so the most significant bit of a hash
is always a longitude bit.
"""

import math
import os

import numpy as np

# Allow forcing pure Python for testing/comparison
FORCE_PYTHON = os.environ.get('GEOHASHIE_FORCE_PYTHON', '0') == '1'

LAT_MAX = 90.0
LNG_MAX = 180.0

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# (shift, mask) applied in order to move a 32-bit value onto the even bits
SPREAD_STEPS = (
    (16, 0x0000FFFF0000FFFF),
    (8, 0x00FF00FF00FF00FF),
    (4, 0x0F0F0F0F0F0F0F0F),
    (2, 0x3333333333333333),
    (1, 0x5555555555555555),
)

EVEN_BITS = 0x5555555555555555

# inverse of SPREAD_STEPS, strides in reverse order
COMPACT_STEPS = (
    (1, 0x3333333333333333),
    (2, 0x0F0F0F0F0F0F0F0F),
    (4, 0x00FF00FF00FF00FF),
    (8, 0x0000FFFF0000FFFF),
    (16, 0x00000000FFFFFFFF),
)

_TWO32 = 2.0**32


def _python_normalize_scalar(x, bound):
    """Pure Python scalar implementation of normalize"""
    return int(math.floor(_TWO32 * (x + bound) / (bound * 2))) & MASK32


def _numpy_normalize(x, bound):
    scaled = np.floor(_TWO32 * (x + bound) / (bound * 2))
    # go through int64 so negative values wrap instead of saturating
    return scaled.astype(np.int64).astype(np.uint64) & np.uint64(MASK32)


def normalize(x, bound):
    """Map a coordinate in [-bound, bound] onto [0, 2**32)

    Values outside the range are not rejected; they wrap to 32 bits. The
    upper edge itself wraps too: x == bound maps to 2**32 and comes out as 0,
    so (90, 180) encodes like (-90, -180). Array input is flattened.

    Args:
        x: float or array - latitude or longitude
        bound: float - half width of the axis (90 or 180)

    Returns:
        int or uint64 array
    """
    is_scalar = np.ndim(x) == 0
    x = np.atleast_1d(np.asarray(x, dtype=np.float64)).ravel()

    if FORCE_PYTHON:
        result = np.array([_python_normalize_scalar(float(v), bound) for v in x],
                          dtype=np.uint64)
    else:
        result = _numpy_normalize(x, bound)

    return int(result[0]) if is_scalar else result


def denormalize(v, bound):
    """Inverse of normalize, returns the lower edge of the 32-bit cell"""
    is_scalar = np.ndim(v) == 0
    p = np.atleast_1d(np.asarray(v)).ravel().astype(np.float64) / _TWO32
    result = 2 * bound * p - bound
    return float(result[0]) if is_scalar else result


def _python_spread(v):
    v &= MASK32
    for shift, mask in SPREAD_STEPS:
        v = (v | (v << shift)) & mask
    return v


def _python_compact(v):
    v &= EVEN_BITS
    for shift, mask in COMPACT_STEPS:
        v = (v | (v >> shift)) & mask
    return v


def _python_interleave_scalar(lat32, lng32):
    """Pure Python scalar implementation of interleave"""
    return _python_spread(lat32) | (_python_spread(lng32) << 1)


def _python_deinterleave_scalar(hash_int):
    """Pure Python scalar implementation of deinterleave"""
    hash_int &= MASK64
    return _python_compact(hash_int), _python_compact(hash_int >> 1)


def _numpy_spread(v):
    v = v & np.uint64(MASK32)
    for shift, mask in SPREAD_STEPS:
        v = (v | (v << np.uint64(shift))) & np.uint64(mask)
    return v


def _numpy_compact(v):
    v = v & np.uint64(EVEN_BITS)
    for shift, mask in COMPACT_STEPS:
        v = (v | (v >> np.uint64(shift))) & np.uint64(mask)
    return v


def _as_uint64(values):
    return np.atleast_1d(np.asarray(values)).ravel().astype(np.uint64)


def interleave(lat32, lng32):
    """Merge two 32-bit axis values into a 64-bit Morton code

    Bit k of lat32 lands on bit 2k, bit k of lng32 on bit 2k+1.

    Args:
        lat32: int or array - normalized latitude
        lng32: int or array - normalized longitude

    Returns:
        int or uint64 array
    """
    is_scalar = np.ndim(lat32) == 0 and np.ndim(lng32) == 0
    lat32, lng32 = np.broadcast_arrays(_as_uint64(lat32), _as_uint64(lng32))

    if FORCE_PYTHON:
        result = np.array([_python_interleave_scalar(int(a), int(b))
                           for a, b in zip(lat32, lng32)], dtype=np.uint64)
    else:
        result = _numpy_spread(lat32) | (_numpy_spread(lng32) << np.uint64(1))

    return int(result[0]) if is_scalar else result


def deinterleave(hash_int):
    """Split a 64-bit Morton code back into (lat32, lng32)"""
    is_scalar = np.ndim(hash_int) == 0
    hash_int = _as_uint64(hash_int)

    if FORCE_PYTHON:
        pairs = [_python_deinterleave_scalar(int(h)) for h in hash_int]
        lat32 = np.array([p[0] for p in pairs], dtype=np.uint64)
        lng32 = np.array([p[1] for p in pairs], dtype=np.uint64)
    else:
        lat32 = _numpy_compact(hash_int)
        lng32 = _numpy_compact(hash_int >> np.uint64(1))

    if is_scalar:
        return int(lat32[0]), int(lng32[0])
    return lat32, lng32
