"""Data models for C5517H command-line output."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from c5517h.protocol.types import RangedSetting, Setting, TextSetting


class SettingInfo(BaseModel):
    """Describes one entry of the setting catalog."""

    name: str = Field(..., min_length=1, description="Setting name")
    opcode: int = Field(..., ge=0, le=0xFF, description="Setting opcode")
    kind: str = Field(..., description="Wire representation")
    writable: bool = Field(..., description="Whether the setting can be written")
    minimum: int | None = Field(None, description="Minimum allowed value")
    maximum: int | None = Field(None, description="Maximum allowed value")
    choices: list[str] = Field(default_factory=list, description="Enumerated values")

    @field_validator("maximum")
    @classmethod
    def validate_range(cls, v: int | None, info) -> int | None:
        """Ensure maximum >= minimum if both are set."""
        if v is not None and info.data.get("minimum") is not None:
            if v < info.data["minimum"]:
                raise ValueError("maximum must be >= minimum")
        return v

    @classmethod
    def from_setting(cls, setting: type[Setting]) -> "SettingInfo":
        """Build the description of a setting type."""
        minimum = maximum = None
        choices: list[str] = []
        if issubclass(setting, RangedSetting):
            minimum, maximum = setting.minimum, setting.maximum
        elif issubclass(setting, TextSetting):
            minimum, maximum = 0, setting.max_length
        elif issubclass(setting, IntEnum):
            choices = [member.name.lower() for member in setting]

        return cls(
            name=setting.__name__,
            opcode=setting.opcode,
            kind=setting.kind,
            writable=setting.writable,
            minimum=minimum,
            maximum=maximum,
            choices=choices,
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Brightness",
                "opcode": 48,
                "kind": "uint8",
                "writable": True,
                "minimum": 0,
                "maximum": 100,
                "choices": [],
            }
        }
    )


class SettingValue(BaseModel):
    """A setting value read from the display."""

    setting: str = Field(..., min_length=1, description="Setting name")
    opcode: int = Field(..., ge=0, le=0xFF, description="Setting opcode")
    value: int | str = Field(..., description="Raw value")
    label: str | None = Field(None, description="Name of an enumerated value")

    @classmethod
    def from_reply(cls, value: Any) -> "SettingValue":
        """Build from a decoded setting value."""
        setting = type(value)
        if isinstance(value, IntEnum):
            return cls(setting=setting.__name__, opcode=setting.opcode, value=int(value), label=value.name.lower())
        return cls(setting=setting.__name__, opcode=setting.opcode, value=value.value)


class CommandResult(BaseModel):
    """Outcome of a write command."""

    command: str = Field(..., min_length=1, description="Command name")
    opcode: int = Field(..., ge=0, le=0xFF, description="Command opcode")
    acknowledged: bool = Field(True, description="Whether the display acknowledged")
