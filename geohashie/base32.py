"""
base-32 text codec for geohash integers
"""

import numpy as np

ALPHABET = '0123456789bcdefghjkmnpqrstuvwxyz'

# twelve 5-bit characters fit in 64 bits, the top 4 bits are always zero
TEXT_WIDTH = 12

_CHARS = np.array(list(ALPHABET))
_INDEX = {c: i for i, c in enumerate(ALPHABET)}


class InvalidCharacterError(ValueError):
    """A geohash string contains a character outside the base-32 alphabet

    Attributes
    ----------
    geohash : str
        The string being parsed
    char : str
        The offending character
    position : int
        Index of the offending character within geohash
    """

    def __init__(self, geohash, char, position):
        self.geohash = geohash
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid geohash character {char!r} at position {position} in {geohash!r}")


def char_index(geohash, position):
    """Alphabet index of geohash[position]"""
    char = geohash[position]
    try:
        return _INDEX[char]
    except KeyError:
        raise InvalidCharacterError(geohash, char, position) from None


def indices2text(indices):
    """Map rows of alphabet indices (2D array) to strings"""
    return [''.join(row) for row in _CHARS[indices]]


def int2text(hashes):
    """Convert geohash integers to 12 character strings

    Low precision hashes come out left padded with '0'; callers wanting p
    characters take the last p, which is only meaningful when the hash was
    produced at p*5 bits.

    Parameters
    ----------
    hashes : int or array-like
        Geohash integer(s), at most 64 bits

    Returns
    -------
    str or ndarray of str
    """
    is_scalar = np.ndim(hashes) == 0
    hashes = np.atleast_1d(np.asarray(hashes)).ravel().astype(np.uint64)

    indices = np.empty((len(hashes), TEXT_WIDTH), dtype=np.int64)
    for i in range(TEXT_WIDTH):
        chunk = (hashes >> np.uint64(5 * i)) & np.uint64(0x1F)
        indices[:, TEXT_WIDTH - 1 - i] = chunk.astype(np.int64)

    texts = indices2text(indices)
    return texts[0] if is_scalar else np.array(texts, dtype=str)


def _text2int_scalar(geohash):
    hash_int = 0
    for position in range(len(geohash)):
        hash_int = (hash_int << 5) | char_index(geohash, position)
    return hash_int


def text2int(hashes):
    """Convert geohash string(s) to integer(s)

    A single string gives a Python int of 5 bits per character with no
    upper limit. Arrays give uint64 and so only accept up to 12 characters.

    Raises
    ------
    InvalidCharacterError
        If a character is not in the alphabet
    ValueError
        If an array element is longer than 12 characters
    """
    if isinstance(hashes, str):
        return _text2int_scalar(hashes)

    values = []
    for geohash in np.ravel(hashes):
        if len(geohash) > TEXT_WIDTH:
            raise ValueError(f"Geohash {geohash!r} has {len(geohash)} characters, "
                             f"at most {TEXT_WIDTH} fit in a 64-bit integer")
        values.append(_text2int_scalar(geohash))
    return np.array(values, dtype=np.uint64)
