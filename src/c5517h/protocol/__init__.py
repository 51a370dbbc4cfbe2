"""C5517H protocol implementation."""

from c5517h.protocol.checksum import ChecksumWriter, XORChecksum, calculate_checksum, verify_checksum
from c5517h.protocol.command import Command, Get, NullaryCommand, ResetPower, Set
from c5517h.protocol.constants import Direction, Opcode, ResultCode
from c5517h.protocol.decoder import Complete, Failed, Incomplete, decode
from c5517h.protocol.encoder import encode, encode_bytes
from c5517h.protocol.errors import (
    ChecksumError,
    DecodeError,
    DeviceError,
    EncodeError,
    MalformedFrameError,
    OpcodeMismatchError,
    OutOfRangeError,
    ParseError,
    ProtocolError,
    TransactionDecodeError,
    TransactionError,
    TransactionReadError,
    TransactionWriteError,
    UnknownValueError,
)
from c5517h.protocol.handler import ProtocolHandler
from c5517h.protocol.reply import Acknowledgement, NullaryReply
from c5517h.protocol.transaction import transaction
from c5517h.protocol.types import SETTINGS, lookup_setting, setting_for_opcode

__all__ = [
    "Acknowledgement",
    "ChecksumError",
    "ChecksumWriter",
    "Command",
    "Complete",
    "DecodeError",
    "DeviceError",
    "Direction",
    "EncodeError",
    "Failed",
    "Get",
    "Incomplete",
    "MalformedFrameError",
    "NullaryCommand",
    "NullaryReply",
    "Opcode",
    "OpcodeMismatchError",
    "OutOfRangeError",
    "ParseError",
    "ProtocolError",
    "ProtocolHandler",
    "ResetPower",
    "ResultCode",
    "SETTINGS",
    "Set",
    "TransactionDecodeError",
    "TransactionError",
    "TransactionReadError",
    "TransactionWriteError",
    "UnknownValueError",
    "XORChecksum",
    "calculate_checksum",
    "decode",
    "encode",
    "encode_bytes",
    "lookup_setting",
    "setting_for_opcode",
    "transaction",
    "verify_checksum",
]
