#!/usr/bin/env python3
"""
Direct comparison test: pure Python vs numpy

Runs the same coordinates through the pure Python integer backend and the
numpy uint64 backend and checks they produce bit-identical results.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from geohashie import bits, tools


@pytest.fixture
def points():
    rng = np.random.default_rng(1411)
    lats = np.concatenate([rng.uniform(-90, 90, 1000), [-90.0, 0.0, 89.999999]])
    lons = np.concatenate([rng.uniform(-180, 180, 1000), [-180.0, 0.0, 179.999999]])
    return lats, lons


def _run(monkeypatch, force_python, func, *args):
    monkeypatch.setattr(bits, 'FORCE_PYTHON', force_python)
    return func(*args)


def test_scalar(monkeypatch):
    python_hash = _run(monkeypatch, True, tools.geo2int, 38.05339909138269, -84.70121386485815)
    numpy_hash = _run(monkeypatch, False, tools.geo2int, 38.05339909138269, -84.70121386485815)
    print(f"Python: {python_hash:#x}  numpy: {numpy_hash:#x}")
    assert python_hash == numpy_hash == 0x651ea174d3a37371


def test_normalize(monkeypatch, points):
    lats, lons = points
    for values, bound in ((lats, bits.LAT_MAX), (lons, bits.LNG_MAX)):
        python_norm = _run(monkeypatch, True, bits.normalize, values, bound)
        numpy_norm = _run(monkeypatch, False, bits.normalize, values, bound)
        assert_array_equal(python_norm, numpy_norm)


def test_geo2int(monkeypatch, points):
    lats, lons = points
    for n_bits in (1, 25, 60, 64):
        python_hashes = _run(monkeypatch, True, tools.geo2int, lats, lons, n_bits)
        numpy_hashes = _run(monkeypatch, False, tools.geo2int, lats, lons, n_bits)
        assert python_hashes.dtype == numpy_hashes.dtype == np.uint64
        assert_array_equal(python_hashes, numpy_hashes)


def test_decode(monkeypatch, points):
    lats, lons = points
    hashes = tools.geo2int(lats, lons)
    python_lat, python_lon = _run(monkeypatch, True, tools.int2geo, hashes)
    numpy_lat, numpy_lon = _run(monkeypatch, False, tools.int2geo, hashes)
    assert_array_equal(python_lat, numpy_lat)
    assert_array_equal(python_lon, numpy_lon)


def test_text(monkeypatch, points):
    lats, lons = points
    python_text = _run(monkeypatch, True, tools.geo2hash, lats, lons, 9)
    numpy_text = _run(monkeypatch, False, tools.geo2hash, lats, lons, 9)
    assert_array_equal(python_text, numpy_text)
