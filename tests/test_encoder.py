"""Tests for request frame encoding."""

import io

import pytest

from c5517h.protocol.checksum import calculate_checksum
from c5517h.protocol.command import Get, ResetPower, Set
from c5517h.protocol.encoder import encode, encode_bytes
from c5517h.protocol.errors import EncodeError
from c5517h.protocol.types import (
    SETTINGS,
    AspectRatio,
    AutoSelect,
    Brightness,
    ColorFormat,
    ColorPreset,
    ColorTemperature,
    Contrast,
    PowerLED,
    PowerState,
    PowerUSB,
    Sharpness,
    VideoInput,
)


class BrokenSink:
    def write(self, data: bytes) -> int:
        raise OSError("broken pipe")


class TestEncodeGet:
    """Tests for read request frames."""

    def test_power_state(self):
        """Get(PowerState) encodes to the documented frame."""
        assert encode_bytes(Get(PowerState)) == bytes.fromhex("37 51 02 eb 20 af")

    @pytest.mark.parametrize("setting", list(SETTINGS.values()), ids=lambda s: s.__name__)
    def test_every_setting(self, setting):
        """Every Get frame is six bytes with a checksum of 0x8F ^ opcode."""
        op = setting.opcode
        assert encode_bytes(Get(setting)) == bytes([0x37, 0x51, 0x02, 0xEB, op, 0x8F ^ op])

    def test_returns_byte_count(self):
        """encode returns the number of bytes written."""
        buf = io.BytesIO()
        assert encode(Get(Brightness), buf) == 6
        assert len(buf.getvalue()) == 6


class TestEncodeSet:
    """Tests for write request frames."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (PowerState.ON, "37 51 03 ea 20 01 ae"),
            (PowerLED.ON, "37 51 03 ea 21 01 af"),
            (PowerUSB.ON, "37 51 03 ea 22 01 ac"),
            (Brightness(64), "37 51 03 ea 30 40 ff"),
            (Contrast(64), "37 51 03 ea 31 40 fe"),
            (AspectRatio.RATIO_5X4, "37 51 03 ea 33 04 b8"),
            (Sharpness(42), "37 51 03 ea 34 2a 91"),
            (ColorTemperature.K10000, "37 51 06 ea 43 20 00 00 00 e9"),
            (ColorFormat.RGB, "37 51 03 ea 46 00 c9"),
            (ColorPreset.COLOR_TEMP, "37 51 06 ea 48 20 00 00 00 e2"),
            (AutoSelect.ON, "37 51 03 ea 60 01 ee"),
            (VideoInput.VGA1, "37 51 06 ea 62 40 00 00 00 a8"),
        ],
        ids=repr,
    )
    def test_known_frames(self, value, expected):
        """Set frames match captured byte sequences."""
        assert encode_bytes(Set(value)) == bytes.fromhex(expected)

    def test_length_field_counts_payload(self):
        """LEN is payload size plus two."""
        frame = encode_bytes(Set(ColorPreset.STANDARD))
        assert frame[2] == 4 + 2
        assert len(frame) == frame[2] + 4

    def test_frame_xors_to_zero(self):
        """The checksum makes the whole frame XOR to zero."""
        frame = encode_bytes(Set(VideoInput.DP1))
        assert calculate_checksum(frame) == 0


class TestEncodeResetPower:
    """Tests for the power reset frame."""

    def test_reset_power(self):
        """ResetPower encodes as a payload-less write."""
        assert encode_bytes(ResetPower()) == bytes.fromhex("37 51 02 ea 2f a1")


class TestEncodeErrors:
    """Tests for sink failures."""

    def test_sink_failure(self):
        """A failing sink raises EncodeError."""
        with pytest.raises(EncodeError):
            encode(Get(PowerState), BrokenSink())
