"""
Fixed-width scalar reading and writing for (E)WKB streams.

Every geometry object, nested or top-level, starts with a one byte marker
selecting the byte order of the fields that follow:

    - 0x00: big-endian (XDR)
    - 0x01: little-endian (NDR)
"""

import struct
from enum import Enum
from typing import BinaryIO

from .errors import FormatError
from .geometry import Coordinate

UINT32_SIZE = 4
DOUBLE_SIZE = 8


class ByteOrder(Enum):
    """Byte order of a geometry object, valued by its wire marker"""

    BIG_ENDIAN = 0
    LITTLE_ENDIAN = 1

    @property
    def struct_prefix(self) -> str:
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"

    @property
    def marker(self) -> bytes:
        return bytes([self.value])


class ByteWriter:
    """
    Writes scalars to a binary stream in one byte order.

    Args:
        stream: Writable binary file-like object
        byte_order: Order used for all multi-byte fields
    """

    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order
        self._prefix = byte_order.struct_prefix

    def _write(self, data: bytes) -> None:
        written = self.stream.write(data)
        # Raw (unbuffered) streams may accept fewer bytes than offered
        if written is not None and written != len(data):
            raise OSError(f"Short write: {written} of {len(data)} bytes")

    def write_byte_order(self) -> None:
        self._write(self.byte_order.marker)

    def write_uint32(self, value: int) -> None:
        self._write(struct.pack(f"{self._prefix}I", value))

    def write_int32(self, value: int) -> None:
        self._write(struct.pack(f"{self._prefix}i", value))

    def write_double(self, value: float) -> None:
        self._write(struct.pack(f"{self._prefix}d", value))

    def write_coordinate(self, coord: Coordinate) -> None:
        self._write(struct.pack(f"{self._prefix}{len(coord)}d", *coord))


class ByteReader:
    """
    Cursor over an in-memory EWKB buffer.

    The active byte order is whatever the most recent marker selected;
    callers re-read the marker at the start of every geometry object.

    Args:
        data: The bytes to decode
    """

    def __init__(self, data: bytes | bytearray | memoryview):
        self._base = memoryview(data)
        self.data = self._base.cast("B")
        self.offset = 0
        self.byte_order = ByteOrder.BIG_ENDIAN
        self._prefix = self.byte_order.struct_prefix

    def __enter__(self) -> "ByteReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def release(self) -> None:
        """Release the views on the caller's buffer so it can be resized again"""
        self.data.release()
        self._base.release()

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def ensure(self, count: int, item_size: int, what: str = "bytes") -> None:
        """
        Check that `count` items of `item_size` bytes can still be read.

        Raises:
            FormatError: If the buffer is too short
        """
        needed = count * item_size
        if needed > self.remaining:
            raise FormatError(
                f"Truncated input reading {what}",
                offset=self.offset,
                expected=f"{needed} bytes",
                found=f"{self.remaining} bytes",
            )

    def _unpack(self, fmt: str, size: int, what: str) -> tuple[float, ...]:
        self.ensure(1, size, what)
        values = struct.unpack_from(self._prefix + fmt, self.data, self.offset)
        self.offset += size
        return values

    def read_byte_order(self) -> ByteOrder:
        self.ensure(1, 1, "byte order marker")
        marker = self.data[self.offset]
        try:
            byte_order = ByteOrder(marker)
        except ValueError:
            raise FormatError(
                "Invalid byte order marker",
                offset=self.offset,
                expected="0x00 or 0x01",
                found=f"0x{marker:02x}",
            ) from None
        self.offset += 1
        self.byte_order = byte_order
        self._prefix = byte_order.struct_prefix
        return byte_order

    def read_uint32(self, what: str = "uint32") -> int:
        return int(self._unpack("I", UINT32_SIZE, what)[0])

    def read_int32(self, what: str = "int32") -> int:
        return int(self._unpack("i", UINT32_SIZE, what)[0])

    def read_double(self, what: str = "double") -> float:
        return self._unpack("d", DOUBLE_SIZE, what)[0]

    def read_coordinate(self, ordinates: int) -> Coordinate:
        return self._unpack(f"{ordinates}d", ordinates * DOUBLE_SIZE, "coordinate")
