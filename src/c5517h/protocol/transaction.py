"""Request/response transaction driver.

One transaction writes an encoded command and then reads the reply,
growing its buffer until the decoder has either a value or an error.
Replies are matched to requests by order alone, so a transport must
never carry two transactions at once.
"""

import logging
from typing import Any, BinaryIO

from c5517h.protocol.command import Command
from c5517h.protocol.constants import REPLY_MAX_LEN, REPLY_MIN_LEN
from c5517h.protocol.decoder import Complete, Incomplete, decode
from c5517h.protocol.encoder import encode
from c5517h.protocol.errors import (
    EncodeError,
    MalformedFrameError,
    TransactionDecodeError,
    TransactionReadError,
    TransactionWriteError,
)
from c5517h.protocol.reply import ReplyParser

logger = logging.getLogger(__name__)


def read_at_least(reader: BinaryIO, buffer: bytearray, size: int) -> int:
    """
    Read from ``reader`` until ``buffer`` holds at least ``size`` bytes.

    Interrupted reads are retried.

    Args:
        reader: Object with a blocking ``read(n)`` method
        buffer: Buffer to append to
        size: Total number of bytes the buffer must hold

    Returns:
        Number of bytes appended

    Raises:
        TimeoutError: If the reader returns no data
        OSError: If the reader fails
    """
    start = len(buffer)
    while len(buffer) < size:
        try:
            chunk = reader.read(size - len(buffer))
        except InterruptedError:
            continue
        if not chunk:
            raise TimeoutError(f"no data received after {len(buffer)} of {size} byte(s)")
        buffer.extend(chunk)
    return len(buffer) - start


def complete_transaction(reader: BinaryIO, reply_type: ReplyParser) -> Any:
    """
    Read and decode one reply.

    Raises:
        TransactionReadError: If reading fails or times out
        TransactionDecodeError: If the reply is invalid or reports a device error
    """
    buffer = bytearray()
    required = REPLY_MIN_LEN

    while True:
        if required > REPLY_MAX_LEN:
            error = MalformedFrameError(f"reply exceeds {REPLY_MAX_LEN} bytes ({required} required)")
            raise TransactionDecodeError(error) from error

        try:
            read_at_least(reader, buffer, required)
        except OSError as e:
            logger.debug("Read failed with %d byte(s) buffered: %s", len(buffer), bytes(buffer).hex(" "))
            raise TransactionReadError(e) from e

        result = decode(bytes(buffer), reply_type)
        if isinstance(result, Complete):
            logger.debug("Reply received: %s", bytes(buffer).hex(" "))
            return result.value
        if isinstance(result, Incomplete):
            required = len(buffer) + result.needed
            continue

        logger.debug("Reply rejected (%s): %s", result.error, bytes(buffer).hex(" "))
        raise TransactionDecodeError(result.error) from result.error


def transaction(
    command: Command,
    writer: BinaryIO,
    reader: BinaryIO,
    reply_type: ReplyParser | None = None,
) -> Any:
    """
    Send a command and wait for its reply.

    Args:
        command: Command to send
        writer: Object with a ``write(data)`` method
        reader: Object with a blocking ``read(n)`` method
        reply_type: Expected reply; defaults to ``command.reply_type()``

    Returns:
        The decoded setting value for ``Get``, an ``Acknowledgement`` otherwise

    Raises:
        TransactionWriteError: If the command cannot be written
        TransactionReadError: If the reply cannot be read
        TransactionDecodeError: If the reply is invalid or the device reports an error

    Example:
        >>> transaction(Get(PowerState), io.BytesIO(), io.BytesIO(bytes.fromhex("6f 37 04 02 00 20 01 7f")))
        <PowerState.ON: 1>
    """
    if reply_type is None:
        reply_type = command.reply_type()

    logger.debug("Sending %r", command)
    try:
        encode(command, writer)
        flush = getattr(writer, "flush", None)
        if flush is not None:
            flush()
    except EncodeError as e:
        raise TransactionWriteError(e) from e
    except OSError as e:
        raise TransactionWriteError(e) from e

    return complete_transaction(reader, reply_type)
