"""Options for the EWKB encoder and decoder."""

from dataclasses import dataclass

from .scalars import ByteOrder


@dataclass(frozen=True)
class EncoderOptions:
    """
    Encoder settings.

    Attributes:
        byte_order: Byte order written for every geometry object
    """

    byte_order: ByteOrder = ByteOrder.BIG_ENDIAN


@dataclass(frozen=True)
class DecoderOptions:
    """
    Decoder settings.

    The decoder has no byte order setting: each object's own marker decides.

    Attributes:
        max_depth: Deepest collection nesting accepted before the input is
            rejected as malformed
    """

    max_depth: int = 64
