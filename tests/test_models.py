"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from c5517h.core.models import CommandResult, SettingInfo, SettingValue
from c5517h.protocol.types import (
    SETTINGS,
    BacklightHours,
    Brightness,
    ColorTemperature,
    MonitorName,
    OSDTimer,
    PowerState,
)


class TestSettingInfo:
    """Tests for SettingInfo model."""

    def test_ranged(self):
        """Ranged settings report their bounds."""
        info = SettingInfo.from_setting(OSDTimer)

        assert info.name == "OSDTimer"
        assert info.opcode == 0x83
        assert info.kind == "uint8"
        assert info.writable is True
        assert (info.minimum, info.maximum) == (5, 60)
        assert info.choices == []

    def test_enum(self):
        """Enumerated settings list their choices."""
        info = SettingInfo.from_setting(ColorTemperature)

        assert info.kind == "enum32"
        assert info.choices == ["k5000", "k5700", "k6500", "k7500", "k9300", "k10000"]
        assert info.minimum is None

    def test_text(self):
        """Text settings are read-only with a length bound."""
        info = SettingInfo.from_setting(MonitorName)

        assert info.kind == "text"
        assert info.writable is False
        assert (info.minimum, info.maximum) == (0, 12)

    def test_read_only_counter(self):
        """Backlight hours are a read-only 16-bit value."""
        info = SettingInfo.from_setting(BacklightHours)

        assert info.kind == "uint16"
        assert info.writable is False
        assert info.maximum == 0xFFFF

    def test_whole_catalog(self):
        """Every registered setting can be described."""
        infos = [SettingInfo.from_setting(setting) for setting in SETTINGS.values()]
        assert len(infos) == 22

    def test_invalid_range(self):
        """Maximum below minimum is rejected."""
        with pytest.raises(ValidationError):
            SettingInfo(name="X", opcode=1, kind="uint8", writable=True, minimum=10, maximum=5)

    def test_invalid_opcode(self):
        """Opcodes are single bytes."""
        with pytest.raises(ValidationError):
            SettingInfo(name="X", opcode=0x100, kind="uint8", writable=True)


class TestSettingValue:
    """Tests for SettingValue model."""

    def test_enum_value(self):
        """Enum values carry their code and label."""
        value = SettingValue.from_reply(PowerState.ON)

        assert value.model_dump() == {"setting": "PowerState", "opcode": 0x20, "value": 1, "label": "on"}

    def test_ranged_value(self):
        """Ranged values carry the number only."""
        value = SettingValue.from_reply(Brightness(64))

        assert value.value == 64
        assert value.label is None

    def test_text_value(self):
        """Text values carry the string."""
        value = SettingValue.from_reply(MonitorName("C5517H"))

        assert value.value == "C5517H"
        assert value.opcode == 0x01


class TestCommandResult:
    """Tests for CommandResult model."""

    def test_defaults(self):
        """Results are acknowledged by default."""
        result = CommandResult(command="reset-power", opcode=0x2F)

        assert result.acknowledged is True

    def test_empty_command(self):
        """Command names cannot be empty."""
        with pytest.raises(ValidationError):
            CommandResult(command="", opcode=0x2F)
