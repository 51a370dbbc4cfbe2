"""Integer wire codecs for C5517H payloads.

All multi-byte values use little-endian byte order.
"""

import struct
from typing import BinaryIO

from c5517h.protocol.errors import EncodeError


class NeedMoreBytes(Exception):
    """Input ended before a value could be parsed.

    Raised by the parse helpers and turned into a need-more outcome by the
    decoder; it never escapes the protocol package.

    Attributes:
        needed: Number of additional bytes required
    """

    def __init__(self, needed: int):
        self.needed = needed
        super().__init__(f"need {needed} more byte(s)")


class NullSink:
    """Sink that discards everything written to it."""

    def write(self, data: bytes) -> int:
        return len(data)

    def flush(self) -> None:
        pass


def write_all(sink: BinaryIO, data: bytes) -> int:
    """
    Write bytes to a sink.

    Args:
        sink: Binary file-like object
        data: Bytes to write

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the sink write fails or comes up short
    """
    try:
        written = sink.write(data)
    except OSError as e:
        raise EncodeError(f"write failed: {e}") from e
    if written is None:
        written = len(data)
    if written != len(data):
        raise EncodeError(f"short write: {written} of {len(data)} bytes")
    return written


def take(data: bytes, size: int) -> tuple[bytes, bytes]:
    """
    Split ``size`` bytes off the front of ``data``.

    Returns:
        Tuple of (taken bytes, remaining bytes)

    Raises:
        NeedMoreBytes: If ``data`` is shorter than ``size``
    """
    if len(data) < size:
        raise NeedMoreBytes(size - len(data))
    return bytes(data[:size]), bytes(data[size:])


class IntCodec:
    """Fixed-width unsigned integer codec."""

    def __init__(self, fmt: str):
        self._struct = struct.Struct(fmt)
        self.size = self._struct.size
        self.maximum = (1 << (8 * self.size)) - 1

    def dump(self, value: int, sink: BinaryIO) -> int:
        """Write ``value`` to ``sink`` and return the byte count."""
        return write_all(sink, self.pack(value))

    def pack(self, value: int) -> bytes:
        if not 0 <= value <= self.maximum:
            raise ValueError(f"value {value} does not fit in {self.size} byte(s)")
        return self._struct.pack(value)

    def parse(self, data: bytes) -> tuple[int, bytes]:
        """
        Parse one value from the front of ``data``.

        Returns:
            Tuple of (value, remaining bytes)

        Raises:
            NeedMoreBytes: If ``data`` holds fewer than ``size`` bytes
        """
        raw, rest = take(data, self.size)
        return self._struct.unpack(raw)[0], rest

    def __repr__(self) -> str:
        return f"IntCodec(size={self.size})"


UINT8 = IntCodec("<B")
UINT16 = IntCodec("<H")
UINT32 = IntCodec("<I")
