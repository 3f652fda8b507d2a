"""In-memory pixel buffer for farbfeld images.

``FarbfeldImage`` owns a flat list of pixels plus the declared width and
height. Every index, flat or two-dimensional, is clamped into range
instead of raising, so ``image[-5, 3]`` reads the same pixel as
``image[0, 3]``.

Two things are deliberately left to the caller:

- ``resize`` changes only the list length and the stored dimensions. It
  never moves existing pixels to match the new geometry, so after a width
  change a given ``(x, y)`` may address a different pixel than before.
- Replacing ``pixels`` wholesale performs no consistency check against
  ``width * height``.
"""

import numpy as np
from pydantic import BaseModel, Field

from farbfeld.models.core_models import CHANNEL_MAX, CHANNEL_MIN, Pixel


def clamp_index(value: int, low: int, high: int) -> int:
    """Constrain ``value`` to the inclusive range [low, high]."""
    return max(low, min(high, value))


class FarbfeldImage(BaseModel):
    """A width x height farbfeld raster backed by a flat pixel list.

    The pixel at ``(x, y)`` lives at flat index ``x + y * width``.

    Attributes:
        width: Declared image width in pixels.
        height: Declared image height in pixels.
        pixels: Backing pixel list, normally ``width * height`` long.
    """

    width: int = Field(0, ge=0, description="Image width in pixels")
    height: int = Field(0, ge=0, description="Image height in pixels")
    pixels: list[Pixel] = Field(default_factory=list, description="Pixel data")

    class Config:
        validate_assignment = True

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        fill: Pixel | None = None,
        pixels: list[Pixel] | None = None,
    ):
        """Create an image, either filled with one pixel or from a pixel list.

        Args:
            width: Image width.
            height: Image height.
            fill: Pixel repeated over the whole image when ``pixels`` is not
                given. Defaults to transparent black.
            pixels: Explicit backing list, used verbatim.
        """
        if pixels is None:
            fill = fill if fill is not None else Pixel()
            pixels = [fill for _ in range(width) for _ in range(height)]
        super().__init__(width=width, height=height, pixels=pixels)

    def __len__(self) -> int:
        return len(self.pixels)

    def _flat_limit(self) -> int:
        # Clamp against whichever is shorter so a replaced list never
        # turns a clamped read into an IndexError.
        size = min(self.width * self.height, len(self.pixels))
        if size == 0:
            raise IndexError("image has no pixels")
        return size - 1

    def flat_index(self, x: int, y: int | None = None) -> int:
        """Translate a flat index or an (x, y) pair into a clamped list index."""
        if y is None:
            return clamp_index(x, 0, self._flat_limit())

        limit = self._flat_limit()
        column = clamp_index(x, 0, max(self.width - 1, 0))
        row = clamp_index(y, 0, max(self.height - 1, 0))
        return clamp_index(column + row * self.width, 0, limit)

    @staticmethod
    def _split_key(key) -> tuple[int, int | None]:
        if isinstance(key, tuple):
            x, y = key
            return x, y
        return key, None

    def get(self, x: int, y: int | None = None) -> Pixel:
        """Return the pixel at flat index ``x``, or at ``(x, y)``."""
        return self.pixels[self.flat_index(x, y)]

    def set(self, pixel: Pixel, x: int, y: int | None = None) -> Pixel:
        """Store ``pixel`` at flat index ``x``, or at ``(x, y)``.

        Returns:
            The pixel that was written.
        """
        self.pixels[self.flat_index(x, y)] = pixel
        return pixel

    def __getitem__(self, key) -> Pixel:
        return self.get(*self._split_key(key))

    def __setitem__(self, key, pixel: Pixel) -> None:
        self.set(pixel, *self._split_key(key))

    def resize(self, new_width: int, new_height: int) -> None:
        """Change the capacity of the image without remapping its contents.

        Grows the backing list with transparent black pixels or truncates
        it to ``new_width * new_height``, then overwrites the stored
        dimensions. Existing pixels keep their flat positions.

        Args:
            new_width: New declared width.
            new_height: New declared height.
        """
        if new_width < 0 or new_height < 0:
            raise ValueError(
                f"dimensions must be non-negative, got {new_width}x{new_height}"
            )

        new_length = new_width * new_height
        current = len(self.pixels)
        if new_length > current:
            self.pixels.extend(Pixel() for _ in range(new_length - current))
        elif new_length < current:
            del self.pixels[new_length:]

        self.width = new_width
        self.height = new_height

    def to_array(self) -> np.ndarray:
        """Return the image as a ``(height, width, 4)`` uint16 array.

        ``array[y, x]`` holds the channels of ``image[x, y]``. Channels are
        clamped to the 16-bit range.
        """
        count = self.width * self.height
        channels = np.array(
            [self.get(i).clamped().channels for i in range(count)], dtype=np.int64
        )
        return channels.astype(np.uint16).reshape(self.height, self.width, 4)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "FarbfeldImage":
        """Build an image from a ``(height, width, 4)`` array of channels.

        Args:
            array: Integer array of RGBA channels; values are clamped.

        Returns:
            A new FarbfeldImage with ``image[x, y] == array[y, x]``.

        Raises:
            ValueError: If the array is not three-dimensional with four
                channels on the last axis.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(
                f"expected an array of shape (height, width, 4), got {array.shape}"
            )

        height, width = array.shape[:2]
        flat = np.clip(array.astype(np.int64), CHANNEL_MIN, CHANNEL_MAX).reshape(-1, 4)
        pixels = [Pixel(*row) for row in flat.tolist()]
        return cls(width, height, pixels=pixels)
