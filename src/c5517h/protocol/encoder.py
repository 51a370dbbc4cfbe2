"""Request frame encoder.

Frame structure:
[0x37][0x51][LEN][DIR][OPCODE][PAYLOAD...][CHECKSUM]

LEN counts DIR, OPCODE and PAYLOAD. CHECKSUM is the XOR of every byte
before it.
"""

import io
from typing import BinaryIO

from c5517h.protocol.checksum import ChecksumWriter
from c5517h.protocol.codec import write_all
from c5517h.protocol.command import Command
from c5517h.protocol.constants import LENGTH_OVERHEAD, REQUEST_PREFIX


def encode(command: Command, sink: BinaryIO) -> int:
    """
    Write a command frame to a sink.

    Args:
        command: Command to encode
        sink: Binary file-like object to write to

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If writing to the sink fails

    Example:
        >>> buf = io.BytesIO()
        >>> encode(Get(PowerState), buf)
        6
        >>> buf.getvalue().hex(' ')
        '37 51 02 eb 20 af'
    """
    writer = ChecksumWriter(sink)

    size = write_all(writer, REQUEST_PREFIX)
    size += write_all(writer, bytes([command.length() + LENGTH_OVERHEAD]))
    size += write_all(writer, bytes([command.direction, command.opcode]))
    size += command.dump(writer)
    size += write_all(writer.inner, bytes([writer.checksum.value]))

    return size


def encode_bytes(command: Command) -> bytes:
    """Encode a command frame into a new bytes object."""
    buf = io.BytesIO()
    encode(command, buf)
    return buf.getvalue()
