"""Binary encoder and decoder for the farbfeld image format.

A farbfeld file is a 16-byte header followed by raw pixel data, all
big-endian::

    offset  size     field
    0       8        magic "farbfeld"
    8       4        width  (uint32)
    12      4        height (uint32)
    16      8*W*H    pixels, each R, G, B, A as uint16

Pixels are stored in the same order as ``FarbfeldImage.pixels``, so a
decode followed by an encode reproduces the input byte for byte.
"""

import io
import logging

import numpy as np

from farbfeld.byte_order import ByteOrder, bytes_to_int, int_to_bytes
from farbfeld.models.core_models import CHANNEL_MAX, CHANNEL_MIN, Pixel
from farbfeld.models.image_models import FarbfeldImage
from farbfeld.models.settings_models import CodecParams


logger = logging.getLogger(__name__)

MAGIC = b"farbfeld"
HEADER_SIZE = 16
DIMENSION_SIZE = 4
CHANNEL_SIZE = 2
PIXEL_SIZE = 4 * CHANNEL_SIZE
READ_CHUNK_SIZE = 1 << 16
BYTE_ORDER = ByteOrder.BIG_ENDIAN


# Custom exceptions
class FarbfeldError(Exception):
    """Base exception for farbfeld codec errors."""

    pass


class FarbfeldIOError(FarbfeldError, OSError):
    """Exception raised when a stream cannot supply or accept enough bytes."""

    pass


class FormatError(FarbfeldError, ValueError):
    """Exception raised when input is not acceptable farbfeld data."""

    pass


class RangeError(FarbfeldError, ValueError):
    """Exception raised when a channel is out of range under the reject policy."""

    pass


def _channel_dtype() -> np.dtype:
    return np.dtype(f"{BYTE_ORDER.dtype_prefix}u{CHANNEL_SIZE}")


def read_exact(source, size: int) -> bytes:
    """Read exactly ``size`` bytes from a binary stream.

    Reads in chunks of at most ``READ_CHUNK_SIZE`` bytes until enough data
    has arrived, so a header declaring a huge image never makes the stream
    allocate the whole payload up front. Streams such as sockets and pipes
    may also return fewer bytes than requested.

    Args:
        source: Object with a ``read(n)`` method returning bytes.
        size: Number of bytes required.

    Returns:
        Exactly ``size`` bytes.

    Raises:
        FarbfeldIOError: If the stream ends early or the read fails.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        try:
            chunk = source.read(min(remaining, READ_CHUNK_SIZE))
        except OSError as e:
            raise FarbfeldIOError(f"Read failed: {e}") from e
        if not chunk:
            got = size - remaining
            logger.warning(f"Short read: expected {size} bytes, got {got}")
            raise FarbfeldIOError(f"Unexpected end of data: expected {size} bytes, got {got}")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def decode(source, params: CodecParams | None = None) -> FarbfeldImage:
    """Decode a farbfeld image from bytes or a binary stream.

    Args:
        source: ``bytes``-like object or binary stream positioned at the
            start of the image. Data after the pixel payload is not read.
        params: Codec configuration, defaults to ``CodecParams()``.

    Returns:
        FarbfeldImage with the decoded dimensions and pixels.

    Raises:
        FarbfeldIOError: If the data ends before the declared pixel count.
        FormatError: If the magic tag is wrong (when validated) or the
            image exceeds ``params.max_pixels``.
    """
    params = params or CodecParams()
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(source)

    header = read_exact(source, HEADER_SIZE)
    magic = header[: len(MAGIC)]
    if params.validate_magic and magic != MAGIC:
        logger.warning(f"Bad magic tag {magic!r}")
        raise FormatError(f"Incorrect magic: got {magic!r}, expected {MAGIC!r}")

    width = bytes_to_int(header[8 : 8 + DIMENSION_SIZE], BYTE_ORDER)
    height = bytes_to_int(header[12 : 12 + DIMENSION_SIZE], BYTE_ORDER)
    count = width * height
    if params.max_pixels is not None and count > params.max_pixels:
        raise FormatError(
            f"Image of {width}x{height} exceeds the limit of {params.max_pixels} pixels"
        )

    pixels = []
    if count:
        payload = read_exact(source, count * PIXEL_SIZE)
        channels = np.frombuffer(payload, dtype=_channel_dtype()).reshape(-1, 4)
        pixels = [Pixel(*row) for row in channels.tolist()]

    logger.debug(f"Decoded {width}x{height} farbfeld image")
    return FarbfeldImage(width, height, pixels=pixels)


def encode(image: FarbfeldImage, params: CodecParams | None = None) -> bytes:
    """Encode an image to farbfeld bytes.

    Pixels are taken at flat indices ``0 .. width*height - 1`` through the
    image's clamped accessor, so the output is always
    ``16 + 8 * width * height`` bytes long.

    Args:
        image: Image to serialize.
        params: Codec configuration, defaults to ``CodecParams()``.

    Returns:
        The complete farbfeld file contents.

    Raises:
        RangeError: If ``params.channel_overflow`` is "reject" and a
            channel falls outside [0, 65535].
    """
    params = params or CodecParams()
    width, height = image.width, image.height
    count = width * height

    rows = []
    for i in range(count):
        pixel = image.get(i)
        clamped = pixel.clamped()
        if params.channel_overflow == "reject" and clamped != pixel:
            raise RangeError(
                f"Pixel {i} has a channel outside [{CHANNEL_MIN}, {CHANNEL_MAX}]"
            )
        rows.append(clamped.channels)
    channels = np.array(rows, dtype=np.int64).reshape(-1, 4)

    data = b"".join(
        (
            MAGIC,
            int_to_bytes(width, DIMENSION_SIZE, BYTE_ORDER),
            int_to_bytes(height, DIMENSION_SIZE, BYTE_ORDER),
            channels.astype(_channel_dtype()).tobytes(),
        )
    )

    logger.debug(f"Encoded {width}x{height} farbfeld image ({len(data)} bytes)")
    return data


def write(image: FarbfeldImage, sink, params: CodecParams | None = None) -> int:
    """Encode an image and write it to a binary stream.

    Args:
        image: Image to serialize.
        sink: Object with a ``write(b)`` method.
        params: Codec configuration, defaults to ``CodecParams()``.

    Returns:
        Number of bytes written.

    Raises:
        FarbfeldIOError: If the stream fails or accepts fewer bytes than
            were produced.
    """
    data = encode(image, params)
    view = memoryview(data)
    written = 0
    while written < len(data):
        try:
            result = sink.write(view[written:])
        except OSError as e:
            raise FarbfeldIOError(f"Write failed: {e}") from e
        # Buffered streams return None or the full length.
        if result is None:
            written = len(data)
        elif result == 0:
            raise FarbfeldIOError(
                f"Short write: {written} of {len(data)} bytes accepted"
            )
        else:
            written += result
    return written
