"""XOR checksum used by both request and reply frames."""

from typing import BinaryIO


class XORChecksum:
    """
    Running XOR accumulator.

    XOR is associative and commutative, so feeding a byte sequence in
    chunks gives the same value as feeding it whole.

    Example:
        >>> c = XORChecksum()
        >>> c.consume(b'\\x01\\x02')
        2
        >>> c.consume(b'\\x04')
        1
        >>> c.value
        7
    """

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        """Current accumulator value (0 before any bytes are consumed)."""
        return self._value

    def consume(self, data: bytes) -> int:
        """
        Fold bytes into the accumulator.

        Args:
            data: Bytes to fold in

        Returns:
            Number of bytes consumed
        """
        value = self._value
        for byte in data:
            value ^= byte
        self._value = value
        return len(data)


class ChecksumWriter:
    """Sink wrapper that checksums every byte written through it.

    The final checksum byte of a frame must not be folded into its own
    computation; write it to ``inner`` directly.
    """

    def __init__(self, inner: BinaryIO, checksum: XORChecksum | None = None):
        self.inner = inner
        self.checksum = checksum if checksum is not None else XORChecksum()

    def write(self, data: bytes) -> int:
        written = self.inner.write(data)
        if written is None:
            written = len(data)
        return self.checksum.consume(data[:written])

    def flush(self) -> None:
        self.inner.flush()


def calculate_checksum(data: bytes) -> int:
    """
    Calculate the XOR checksum of a byte sequence.

    Args:
        data: Bytes to checksum

    Returns:
        8-bit checksum value

    Example:
        >>> hex(calculate_checksum(b'\\x37\\x51\\x02\\xeb\\x20'))
        '0xaf'
    """
    checksum = XORChecksum()
    checksum.consume(data)
    return checksum.value


def verify_checksum(frame: bytes) -> bool:
    """
    Verify a complete frame, trailing checksum byte included.

    A valid frame reduces to zero.

    Args:
        frame: Frame bytes including the checksum byte

    Returns:
        True if the frame checksum is valid, False otherwise
    """
    return calculate_checksum(frame) == 0
