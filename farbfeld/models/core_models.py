"""Core pixel model for farbfeld images."""

import numbers
import operator

from pydantic import BaseModel, Field

CHANNEL_MIN = 0
CHANNEL_MAX = 65535


class Pixel(BaseModel):
    """A single RGBA pixel with 16-bit logical channels.

    Channels are stored as plain Python integers so intermediate values may
    leave the 16-bit range; every arithmetic result is clamped back into
    [0, 65535]. Pixels are immutable, arithmetic always returns a new one.
    To change a single channel build a modified copy, e.g.
    ``pixel.model_copy(update={"a": 65535})``.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
        a: Alpha channel (0 is fully transparent).
    """

    r: int = Field(0, description="Red channel")
    g: int = Field(0, description="Green channel")
    b: int = Field(0, description="Blue channel")
    a: int = Field(0, description="Alpha channel")

    class Config:
        frozen = True

    def __init__(self, r: int = 0, g: int = 0, b: int = 0, a: int = 0, **data):
        super().__init__(r=r, g=g, b=b, a=a, **data)

    @staticmethod
    def clamp_channel(value: int) -> int:
        """Clamp a channel value into the 16-bit range."""
        return max(CHANNEL_MIN, min(CHANNEL_MAX, value))

    @property
    def channels(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def clamped(self) -> "Pixel":
        """Return a copy of this pixel with every channel in [0, 65535]."""
        return Pixel(*(self.clamp_channel(c) for c in self.channels))

    def luminance709(self) -> float:
        """Relative luminance using ITU-R BT.709 weights. Alpha is ignored."""
        return self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722

    def luminance601(self) -> float:
        """Luma using ITU-R BT.601 weights. Alpha is ignored."""
        return self.r * 0.3 + self.g * 0.59 + self.b * 0.11

    def luminance_average(self) -> float:
        """Unweighted mean of the three color channels. Alpha is ignored."""
        return (self.r + self.g + self.b) / 3.0

    luminance = luminance709

    def _apply(self, op, other) -> "Pixel":
        """Apply a binary operator channel-wise and clamp the result.

        Args:
            op: Binary function from the ``operator`` module.
            other: Another Pixel (channel-by-channel) or a scalar applied to
                every channel.

        Returns:
            A new Pixel with each channel truncated to int and clamped.
        """
        if isinstance(other, Pixel):
            operands = other.channels
        elif isinstance(other, numbers.Real):
            operands = (other,) * 4
        else:
            return NotImplemented

        return Pixel(
            *(
                self.clamp_channel(int(op(channel, operand)))
                for channel, operand in zip(self.channels, operands)
            )
        )

    def __add__(self, other):
        return self._apply(operator.add, other)

    __radd__ = __add__

    def __sub__(self, other):
        return self._apply(operator.sub, other)

    def __mul__(self, other):
        return self._apply(operator.mul, other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._apply(operator.truediv, other)

    def __floordiv__(self, other):
        return self._apply(operator.floordiv, other)

    def __mod__(self, other):
        return self._apply(operator.mod, other)

    def __pow__(self, other):
        return self._apply(operator.pow, other)

    # Bitwise operators only make sense against integers.
    def __and__(self, other):
        return self._apply(operator.and_, other)

    def __or__(self, other):
        return self._apply(operator.or_, other)

    def __xor__(self, other):
        return self._apply(operator.xor, other)

    def __lshift__(self, other):
        return self._apply(operator.lshift, other)

    def __rshift__(self, other):
        return self._apply(operator.rshift, other)
