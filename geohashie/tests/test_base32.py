"""
Test the base-32 text codec
"""
import pytest
import numpy as np
from numpy.testing import assert_array_equal

from geohashie import base32


def test_alphabet():
    assert len(base32.ALPHABET) == 32
    assert len(set(base32.ALPHABET)) == 32
    for missing in "ailo":
        assert missing not in base32.ALPHABET


def test_int2text_padding():
    assert base32.int2text(0) == "000000000000"
    assert base32.int2text(31) == "00000000000z"
    assert base32.int2text(2**60 - 1) == "zzzzzzzzzzzz"
    # the top 4 bits of a 64-bit value do not fit in 12 characters
    assert base32.int2text(2**64 - 1) == "zzzzzzzzzzzz"


def test_text2int():
    assert base32.text2int("00000000000z") == 31
    assert base32.text2int("10") == 32
    assert base32.text2int(base32.int2text(0x651ea174d3a37371 >> 4)) == 0x651ea174d3a37371 >> 4


def test_arrays():
    values = np.array([0, 31, 0x651ea174d3a37371 >> 4], dtype=np.uint64)
    texts = base32.int2text(values)
    assert_array_equal(texts, ["000000000000", "00000000000z", "dngb2x6mnetr"])
    assert_array_equal(base32.text2int(texts), values)


def test_invalid_character():
    with pytest.raises(base32.InvalidCharacterError, match="'i' at position 1"):
        base32.text2int("bi")
