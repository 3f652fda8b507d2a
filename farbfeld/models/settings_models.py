"""Parameter models for codec configuration.

This module defines the Pydantic model that collects every switch the
farbfeld encoder and decoder honor. Passing ``None`` to a codec function
is the same as passing ``CodecParams()``.
"""

from typing import Literal

from pydantic import BaseModel, Field


class CodecParams(BaseModel):
    """Configuration parameters for decoding and encoding farbfeld data.

    Attributes:
        validate_magic: Reject input whose first 8 bytes are not ``farbfeld``.
        max_pixels: Upper bound on width * height accepted by the decoder,
            or None for no limit.
        channel_overflow: What the encoder does with channels outside
            [0, 65535]: "clamp" them or "reject" the image.
    """

    validate_magic: bool = Field(True, description="Check the magic tag on decode")
    max_pixels: int | None = Field(
        None, ge=1, description="Largest width * height the decoder accepts"
    )
    channel_overflow: Literal["clamp", "reject"] = Field(
        "clamp", description="Encoder policy for out-of-range channels"
    )
