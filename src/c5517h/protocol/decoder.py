"""Incremental reply frame decoder.

Frame structure:
[0x6F][0x37][LEN][0x02][RESULT][OPCODE][VALUE...][CHECKSUM]

LEN counts the body (OPCODE + VALUE) plus 2, so a frame is LEN + 4 bytes long.
A valid frame XORs to zero over all of its bytes, checksum included.

``decode`` never raises for bad input. It returns one of three outcomes:

- ``Complete``: a reply value was decoded
- ``Incomplete``: the buffer is a valid start of a frame, more bytes needed
- ``Failed``: the frame is invalid or the device reported an error
"""

import logging
from dataclasses import dataclass
from typing import Any

from c5517h.protocol.checksum import XORChecksum
from c5517h.protocol.codec import UINT8, NeedMoreBytes, take
from c5517h.protocol.constants import LENGTH_OVERHEAD, REPLY_MIN_LEN, REPLY_PREFIX, REPLY_TAG, ResultCode
from c5517h.protocol.errors import (
    ChecksumError,
    DecodeError,
    DeviceError,
    MalformedFrameError,
    OpcodeMismatchError,
    ParseError,
)
from c5517h.protocol.reply import ReplyParser

logger = logging.getLogger(__name__)

# PREFIX(2) + LEN(1) + TAG(1) + RESULT(1) + CHECKSUM(1) around a body of LEN - 2 bytes
FRAME_OVERHEAD = 6 - LENGTH_OVERHEAD


@dataclass(frozen=True)
class Complete:
    """Decoded reply value."""

    value: Any


@dataclass(frozen=True)
class Incomplete:
    """Buffer holds the start of a frame; ``needed`` more bytes at least."""

    needed: int


@dataclass(frozen=True)
class Failed:
    """Frame could not be decoded."""

    error: DecodeError


DecodeResult = Complete | Incomplete | Failed


def _check_prefix(buffer: bytes) -> None:
    available = bytes(buffer[: len(REPLY_PREFIX)])
    if available != REPLY_PREFIX[: len(available)]:
        raise MalformedFrameError(f"bad prefix {available.hex(' ')}")


def _match_prefix(buffer: bytes) -> bytes:
    _check_prefix(buffer)
    _, rest = take(buffer, len(REPLY_PREFIX))
    return rest


def _split_frame(buffer: bytes) -> tuple[int, bytes, int]:
    """
    Split a frame into its result code, body and total length.

    Raises:
        NeedMoreBytes: If the buffer ends before the frame does
        MalformedFrameError: If the frame structure is invalid
    """
    if len(buffer) < len(REPLY_PREFIX) + 1:
        # Frame length unknown yet; check what is there, then ask for a minimum frame
        _check_prefix(buffer)
        raise NeedMoreBytes(REPLY_MIN_LEN - len(buffer))

    rest = _match_prefix(buffer)
    length, rest = UINT8.parse(rest)
    if length < LENGTH_OVERHEAD:
        raise MalformedFrameError(f"invalid length field {length}")
    total = length + FRAME_OVERHEAD
    try:
        tag, rest = UINT8.parse(rest)
        if tag != REPLY_TAG:
            raise MalformedFrameError(f"bad tag 0x{tag:02X}")
        result_code, rest = UINT8.parse(rest)
        try:
            ResultCode(result_code)
        except ValueError:
            raise MalformedFrameError(f"unknown result code {result_code}") from None
        body, rest = take(rest, length - LENGTH_OVERHEAD)
        take(rest, 1)
    except NeedMoreBytes:
        raise NeedMoreBytes(total - len(buffer)) from None

    return result_code, body, total


def _validate_checksum(frame: bytes) -> None:
    checksum = XORChecksum()
    checksum.consume(frame)
    if checksum.value != 0:
        raise ChecksumError(checksum.value)


def _decode_body(body: bytes, reply_type: ReplyParser) -> Any:
    try:
        opcode, rest = UINT8.parse(body)
    except NeedMoreBytes:
        raise MalformedFrameError("reply body is empty") from None
    if opcode != reply_type.opcode:
        raise OpcodeMismatchError(reply_type.opcode, opcode)

    try:
        value, rest = reply_type.parse(rest)
    except NeedMoreBytes as e:
        # The frame is complete, so a short body can never be completed later
        raise MalformedFrameError(f"reply body too short ({e.needed} byte(s) missing)") from None

    if rest:
        logger.debug("Ignoring %d trailing body byte(s): %s", len(rest), rest.hex(" "))
    return value


def decode(buffer: bytes, reply_type: ReplyParser) -> DecodeResult:
    """
    Decode a reply frame from the start of a buffer.

    Args:
        buffer: Bytes received so far
        reply_type: Expected reply (a setting type or ``NullaryReply``)

    Returns:
        ``Complete`` with the decoded value, ``Incomplete`` with the number of
        additional bytes required, or ``Failed`` with a ``DecodeError``

    Example:
        >>> decode(bytes([0x6F, 0x37, 0x04, 0x02, 0x00, 0x20, 0x01, 0x7F]), PowerState)
        Complete(value=<PowerState.ON: 1>)
    """
    try:
        result_code, body, total = _split_frame(buffer)
    except NeedMoreBytes as e:
        return Incomplete(max(e.needed, 1))
    except ParseError as e:
        return Failed(e)

    if result_code != ResultCode.SUCCESS:
        return Failed(DeviceError(ResultCode(result_code)))

    try:
        _validate_checksum(bytes(buffer[:total]))
        return Complete(_decode_body(body, reply_type))
    except DecodeError as e:
        return Failed(e)
