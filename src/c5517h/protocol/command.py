"""Command model for C5517H requests.

A command is a direction, an opcode and an optional payload. ``Get`` reads a
setting, ``Set`` writes one and ``NullaryCommand`` subclasses carry a fixed
direction and opcode with no payload.
"""

from typing import BinaryIO

from c5517h.protocol.constants import Direction, Opcode
from c5517h.protocol.reply import NullaryReply, ReplyParser
from c5517h.protocol.types import Setting


class Command:
    """Base class for commands understood by the encoder.

    Subclasses set ``direction`` and ``opcode`` and must override
    ``reply_type``; ``length`` and ``dump`` default to an empty payload.
    """

    direction: Direction
    opcode: int

    def length(self) -> int:
        """Payload length; must equal the number of bytes ``dump`` writes."""
        return 0

    def dump(self, sink: BinaryIO) -> int:
        """Write the payload to ``sink`` and return the byte count."""
        return 0

    def reply_type(self) -> ReplyParser:
        """Reply parser matching this command's response.

        Raises:
            NotImplementedError: Always; concrete commands override this
        """
        raise NotImplementedError(f"{type(self).__name__} does not define a reply type")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dir={self.direction.name}, opcode=0x{self.opcode:02X})"


class Get(Command):
    """
    Read a setting.

    Example:
        >>> cmd = Get(PowerState)
        >>> cmd.opcode
        32
    """

    direction = Direction.READ

    def __init__(self, setting: type[Setting]):
        self.setting = setting
        self.opcode = setting.opcode

    def reply_type(self) -> ReplyParser:
        return self.setting

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Get) and other.setting is self.setting

    def __hash__(self) -> int:
        return hash((Get, self.setting))


class Set(Command):
    """
    Write a setting value.

    Raises:
        ValueError: If the setting is read-only
    """

    direction = Direction.WRITE

    def __init__(self, value: Setting):
        setting = type(value)
        if not setting.writable:
            raise ValueError(f"Setting {setting.__name__} is read-only")
        self.value = value
        self.opcode = setting.opcode

    def length(self) -> int:
        return self.value.length()

    def dump(self, sink: BinaryIO) -> int:
        return self.value.dump(sink)

    def reply_type(self) -> ReplyParser:
        return NullaryReply(self.opcode)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Set) and other.value == self.value

    def __hash__(self) -> int:
        return hash((Set, self.value))

    def __repr__(self) -> str:
        return f"Set({self.value!r})"


class NullaryCommand(Command):
    """Command with a hard-coded direction and opcode and no payload."""

    def reply_type(self) -> ReplyParser:
        return NullaryReply(self.opcode)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class ResetPower(NullaryCommand):
    """Power-cycle the display."""

    direction = Direction.WRITE
    opcode = Opcode.RESET_POWER
