"""Reply model for C5517H responses.

Anything with an ``opcode`` and a ``parse(data) -> (value, rest)`` can be
used as a reply type; every setting type qualifies. ``NullaryReply`` covers
replies that only acknowledge a command.
"""

from dataclasses import dataclass
from typing import Any, Protocol


class ReplyParser(Protocol):
    """What the decoder needs to know about an expected reply."""

    opcode: int

    def parse(self, data: bytes) -> tuple[Any, bytes]: ...


@dataclass(frozen=True)
class Acknowledgement:
    """Reply carrying no value beyond the echoed opcode."""

    opcode: int

    def __repr__(self) -> str:
        return f"Acknowledgement(opcode=0x{self.opcode:02X})"


@dataclass(frozen=True)
class NullaryReply:
    """
    Reply parser for acknowledgements.

    Example:
        >>> NullaryReply(0x20).parse(b'')
        (Acknowledgement(opcode=0x20), b'')
    """

    opcode: int

    @classmethod
    def for_setting(cls, setting: Any) -> "NullaryReply":
        """Acknowledgement parser sharing ``setting``'s opcode."""
        return cls(setting.opcode)

    def parse(self, data: bytes) -> tuple[Acknowledgement, bytes]:
        return Acknowledgement(self.opcode), data
