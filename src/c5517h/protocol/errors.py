"""Exception hierarchy for the C5517H protocol.

Five kinds of failure are kept apart so callers can tell them from one
another: transport (read/write) failures, encode failures, decode failures,
errors reported by the device itself, and invalid setting values.
"""

from c5517h.protocol.constants import RESULT_CODE_NAMES, ResultCode


class ProtocolError(Exception):
    """Base class for all protocol errors."""


class OutOfRangeError(ProtocolError, ValueError):
    """A bounded setting was constructed with a value outside its range."""

    def __init__(self, value: int, minimum: int, maximum: int):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"value {value} must be between {minimum} and {maximum}")


class EncodeError(ProtocolError):
    """Writing a command frame to its sink failed."""


# ============================================================================
# Decode Errors
# ============================================================================


class DecodeError(ProtocolError):
    """Base class for errors raised while decoding a reply frame."""


class ChecksumError(DecodeError):
    """Reply frame checksum does not reduce to zero."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"incorrect checksum (residue 0x{value:02X})")


class ParseError(DecodeError):
    """Reply frame bytes do not form a valid frame or value."""


class MalformedFrameError(ParseError):
    """Frame structure is invalid (prefix, tag, length or result code)."""


class OpcodeMismatchError(ParseError):
    """Reply body echoes a different opcode than the one expected."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected opcode 0x{expected:02X}, got 0x{actual:02X}")


class UnknownValueError(ParseError):
    """Enumerated wire code is not a known member of its setting."""

    def __init__(self, setting: str, raw: int):
        self.setting = setting
        self.raw = raw
        super().__init__(f"unknown {setting} code 0x{raw:02X}")


class DeviceError(DecodeError):
    """The device replied with a non-success result code."""

    def __init__(self, result_code: ResultCode):
        self.result_code = result_code
        super().__init__(f"device error: {RESULT_CODE_NAMES[result_code]}")


# ============================================================================
# Transaction Errors
# ============================================================================


class TransactionError(ProtocolError):
    """A request/response transaction failed.

    Attributes:
        error: The underlying exception (also chained as ``__cause__``)
    """

    prefix = "transaction error"

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(f"{self.prefix}: {error}")


class TransactionWriteError(TransactionError):
    """Encoding or writing the command failed."""

    prefix = "write error"


class TransactionReadError(TransactionError):
    """Reading the reply from the transport failed or timed out."""

    prefix = "read error"


class TransactionDecodeError(TransactionError):
    """The reply could not be decoded or the device reported an error."""

    prefix = "decode error"

    @property
    def device_error(self) -> DeviceError | None:
        """The device-reported error, if that is what failed the transaction."""
        return self.error if isinstance(self.error, DeviceError) else None
