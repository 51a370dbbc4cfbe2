"""Shared test fixtures."""

from collections.abc import Callable

import pytest


class ChunkedReader:
    """Reader returning at most ``chunk`` bytes per call.

    Raises ``InterruptedError`` for the first ``interrupts`` calls and
    returns ``b""`` once the data is exhausted, like a timed-out port.
    """

    def __init__(self, data: bytes, chunk: int | None = None, interrupts: int = 0):
        self.data = bytes(data)
        self.chunk = chunk
        self.interrupts = interrupts
        self.pos = 0
        self.calls = 0

    def read(self, n: int) -> bytes:
        self.calls += 1
        if self.interrupts:
            self.interrupts -= 1
            raise InterruptedError
        if self.chunk is not None:
            n = min(n, self.chunk)
        out = self.data[self.pos : self.pos + n]
        self.pos += len(out)
        return out


class FakeConnection:
    """In-memory transport with the SerialConnection interface."""

    def __init__(self, reply: bytes = b"", chunk: int | None = None):
        self.reader = ChunkedReader(reply, chunk)
        self.written = bytearray()
        self.resets = 0
        self.connected = False

    def connect(self) -> bool:
        self.connected = True
        return True

    def disconnect(self) -> None:
        self.connected = False

    def read(self, n: int = 1) -> bytes:
        return self.reader.read(n)

    def write(self, data: bytes) -> int:
        self.written.extend(data)
        return len(data)

    def flush(self) -> None:
        pass

    def reset_input_buffer(self) -> None:
        self.resets += 1

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


def _build_reply(opcode: int, value: bytes = b"", result: int = 0) -> bytes:
    body = bytes([opcode]) + value
    frame = bytes([0x6F, 0x37, len(body) + 2, 0x02, result]) + body
    checksum = 0
    for byte in frame:
        checksum ^= byte
    return frame + bytes([checksum])


@pytest.fixture
def build_reply() -> Callable[..., bytes]:
    """Build a valid reply frame for an opcode and value bytes."""
    return _build_reply


@pytest.fixture
def power_on_reply() -> bytes:
    """Reply to Get(PowerState) reporting ON."""
    return bytes([0x6F, 0x37, 0x04, 0x02, 0x00, 0x20, 0x01, 0x7F])


@pytest.fixture
def make_reader() -> Callable[..., ChunkedReader]:
    """Factory for chunked readers."""
    return ChunkedReader


@pytest.fixture
def make_connection() -> Callable[..., FakeConnection]:
    """Factory for in-memory connections."""
    return FakeConnection
