"""Reader and writer for the farbfeld image format.

farbfeld is an uncompressed, big-endian RGBA raster format with 16 bits
per channel. This package provides an in-memory pixel buffer with clamped
indexing and a codec that converts it to and from the binary layout.

Example:
    Round-trip an image through bytes:

    >>> from farbfeld import FarbfeldImage, Pixel, decode, encode
    >>>
    >>> image = FarbfeldImage(2, 2, fill=Pixel(65535, 0, 0, 65535))
    >>> image[1, 1] = Pixel(0, 0, 65535, 65535)
    >>> decode(encode(image)) == image
    True
"""

from farbfeld.byte_order import ByteOrder, bytes_to_int, int_to_bytes
from farbfeld.codec import (
    FarbfeldError,
    FarbfeldIOError,
    FormatError,
    RangeError,
    decode,
    encode,
    read_exact,
    write,
)
from farbfeld.models import CodecParams, FarbfeldImage, Pixel, clamp_index
