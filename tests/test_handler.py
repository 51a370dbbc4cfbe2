"""Tests for ProtocolHandler."""

import logging

import pytest

from c5517h.protocol.errors import TransactionDecodeError, TransactionReadError
from c5517h.protocol.handler import ProtocolHandler
from c5517h.protocol.reply import Acknowledgement
from c5517h.protocol.types import Brightness, PowerState, VideoInput


class TestProtocolHandler:
    """Tests for high-level display access."""

    def test_get(self, make_connection, power_on_reply):
        """get reads a setting through the connection."""
        conn = make_connection(power_on_reply)
        handler = ProtocolHandler(conn)

        assert handler.get(PowerState) is PowerState.ON
        assert bytes(conn.written) == bytes.fromhex("37 51 02 eb 20 af")

    def test_set(self, make_connection, build_reply):
        """set writes a value and returns the acknowledgement."""
        conn = make_connection(build_reply(0x62))
        handler = ProtocolHandler(conn)

        assert handler.set(VideoInput.VGA1) == Acknowledgement(0x62)
        assert bytes(conn.written) == bytes.fromhex("37 51 06 ea 62 40 00 00 00 a8")

    def test_reset_power(self, make_connection, build_reply):
        """reset_power sends the power reset command."""
        conn = make_connection(build_reply(0x2F))
        handler = ProtocolHandler(conn)

        assert handler.reset_power() == Acknowledgement(0x2F)
        assert bytes(conn.written) == bytes.fromhex("37 51 02 ea 2f a1")

    def test_input_buffer_reset_per_request(self, make_connection, build_reply):
        """Stale input is discarded before every request."""
        conn = make_connection(build_reply(0x30, b"\x10") + build_reply(0x30, b"\x20"))
        handler = ProtocolHandler(conn)

        assert handler.get(Brightness) == Brightness(0x10)
        assert handler.get(Brightness) == Brightness(0x20)
        assert conn.resets == 2

    def test_stats(self, make_connection, power_on_reply):
        """Transactions and failures are counted."""
        conn = make_connection(power_on_reply)
        handler = ProtocolHandler(conn)

        handler.get(PowerState)
        with pytest.raises(TransactionReadError):
            handler.get(PowerState)

        assert handler.stats == {"transactions": 2, "failures": 1}

    def test_stats_is_a_copy(self, make_connection):
        """Callers cannot modify the counters."""
        handler = ProtocolHandler(make_connection())
        handler.stats["transactions"] = 10
        assert handler.stats["transactions"] == 0

    def test_failure_logged(self, make_connection, build_reply, caplog):
        """Failed transactions are logged and re-raised."""
        conn = make_connection(build_reply(0x30, b"\x10", result=4))
        handler = ProtocolHandler(conn)

        with caplog.at_level(logging.WARNING, logger="c5517h.protocol.handler"):
            with pytest.raises(TransactionDecodeError):
                handler.get(Brightness)

        assert "other unknown error" in caplog.text

    def test_connection_without_reset(self, power_on_reply, make_reader):
        """Connections without reset_input_buffer are supported."""

        class Minimal:
            def __init__(self):
                self.reader = make_reader(power_on_reply)

            def read(self, n):
                return self.reader.read(n)

            def write(self, data):
                return len(data)

        assert ProtocolHandler(Minimal()).get(PowerState) is PowerState.ON
