"""
geohashie: a library for encoding and decoding geohashes
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("geohashie")
except PackageNotFoundError:
    # package is not installed
    pass

from .base32 import ALPHABET, InvalidCharacterError
from .tools import (
    PRECISION_MIN,
    PRECISION_MAX,
    PRECISION_HIGH,
    BITS_MIN,
    BITS_MAX,
    precision2res,
    res2display,
    geo2int,
    geo2hash,
    geo2hash_high,
    int2hash,
    hash2int,
    int2geo,
    hash2geo,
    hash2geo_high,
    hash2bbox,
)

__all__ = [
    'tools',
    'bits',
    'base32',
    'scan',
    'ALPHABET',
    'InvalidCharacterError',
    'PRECISION_MIN',
    'PRECISION_MAX',
    'PRECISION_HIGH',
    'BITS_MIN',
    'BITS_MAX',
    'geo2hash',
    'geo2hash_high',
    'geo2int',
    'int2hash',
    'hash2int',
    'hash2geo',
    'hash2geo_high',
    'int2geo',
    'hash2bbox',
    'precision2res',
    'res2display',
]
