"""Setting catalog for the C5517H display.

Every controllable attribute of the display is one setting type. A setting
type knows its opcode (assigned by ``register_setting``), how to write its
value to a sink and how to parse it back from reply bytes. Four wire
representations exist:

- ``ByteEnumSetting``: 1-byte enumerated code
- ``DWordEnumSetting``: 4-byte little-endian code
- ``RangedSetting``: raw unsigned integer with a validated range
- ``TextSetting``: length-prefixed ASCII string
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, ClassVar, TypeVar

from c5517h.protocol.codec import UINT8, UINT16, UINT32, IntCodec, NullSink, take, write_all
from c5517h.protocol.constants import Opcode
from c5517h.protocol.errors import OutOfRangeError, ParseError, UnknownValueError

S = TypeVar("S", bound=type)

# ============================================================================
# Registry
# ============================================================================

SETTINGS: dict[str, type["Setting"]] = {}
_BY_OPCODE: dict[int, type["Setting"]] = {}


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def register_setting(opcode: int) -> Callable[[S], S]:
    """
    Class decorator binding a setting type to its opcode.

    Args:
        opcode: 1-byte opcode shared by the setting's commands and replies

    Raises:
        ValueError: If the opcode or name is already registered
    """

    def decorator(cls: S) -> S:
        if opcode in _BY_OPCODE:
            raise ValueError(f"Opcode 0x{opcode:02X} already bound to {_BY_OPCODE[opcode].__name__}")
        if cls.__name__ in SETTINGS:
            raise ValueError(f"Setting {cls.__name__} already registered")
        cls.opcode = int(opcode)
        SETTINGS[cls.__name__] = cls
        _BY_OPCODE[int(opcode)] = cls
        return cls

    return decorator


def lookup_setting(name: str) -> type["Setting"]:
    """
    Find a setting type by name.

    Matching ignores case, underscores and dashes, so ``power-state``,
    ``power_state`` and ``PowerState`` are equivalent.

    Raises:
        KeyError: If no setting has that name
    """
    wanted = _normalize(name)
    for setting_name, cls in SETTINGS.items():
        if _normalize(setting_name) == wanted:
            return cls
    raise KeyError(f"Unknown setting: {name}")


def setting_for_opcode(opcode: int) -> type["Setting"]:
    """Return the setting type bound to ``opcode``."""
    try:
        return _BY_OPCODE[opcode]
    except KeyError:
        raise KeyError(f"No setting with opcode 0x{opcode:02X}") from None


# ============================================================================
# Setting Kinds
# ============================================================================


class Setting:
    """Capabilities shared by every setting type."""

    opcode: ClassVar[int]
    kind: ClassVar[str] = "setting"
    writable: ClassVar[bool] = True

    def dump(self, sink: BinaryIO) -> int:
        """Write the value's wire bytes to ``sink`` and return the count."""
        raise NotImplementedError

    def length(self) -> int:
        """Number of bytes ``dump`` writes."""
        return self.dump(NullSink())

    @classmethod
    def parse(cls, data: bytes):
        """
        Parse a value from the front of ``data``.

        Returns:
            Tuple of (value, remaining bytes)

        Raises:
            NeedMoreBytes: If ``data`` is too short
            ParseError: If the bytes do not form a valid value
        """
        raise NotImplementedError

    @classmethod
    def from_text(cls, text: str):
        """Build a value from user input."""
        raise NotImplementedError


class _EnumSetting(Setting):
    codec: ClassVar[IntCodec]

    def dump(self, sink: BinaryIO) -> int:
        return self.codec.dump(int(self), sink)

    def length(self) -> int:
        return self.codec.size

    @classmethod
    def parse(cls, data: bytes):
        raw, rest = cls.codec.parse(data)
        try:
            return cls(raw), rest
        except ValueError:
            raise UnknownValueError(cls.__name__, raw) from None

    @classmethod
    def from_text(cls, text: str):
        try:
            return cls(int(text, 0))
        except ValueError:
            pass
        for member in cls:
            if member.name.lower() == text.strip().lower():
                return member
        choices = ", ".join(member.name.lower() for member in cls)
        raise ValueError(f"Invalid {cls.__name__} value {text!r} (choices: {choices})")


class _ByteCode(_EnumSetting):
    codec = UINT8
    kind = "enum8"


class _DWordCode(_EnumSetting):
    codec = UINT32
    kind = "enum32"


# Enum bodies turn plain attributes into members, so codecs live on the mixins
class ByteEnumSetting(_ByteCode, IntEnum):
    """Setting encoded as a 1-byte enumerated code."""


class DWordEnumSetting(_DWordCode, IntEnum):
    """Setting encoded as a 4-byte little-endian code."""


@dataclass(frozen=True)
class RangedSetting(Setting):
    """Unsigned integer setting with an inclusive valid range.

    Raises:
        OutOfRangeError: On construction with a value outside the range
    """

    value: int

    codec: ClassVar[IntCodec] = UINT8
    kind: ClassVar[str] = "uint8"
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 100

    def __post_init__(self) -> None:
        if not self.minimum <= self.value <= self.maximum:
            raise OutOfRangeError(self.value, self.minimum, self.maximum)

    def dump(self, sink: BinaryIO) -> int:
        return self.codec.dump(self.value, sink)

    def length(self) -> int:
        return self.codec.size

    @classmethod
    def parse(cls, data: bytes):
        raw, rest = cls.codec.parse(data)
        try:
            return cls(raw), rest
        except OutOfRangeError as e:
            raise ParseError(f"{cls.__name__}: {e}") from e

    @classmethod
    def from_text(cls, text: str):
        try:
            value = int(text, 0)
        except ValueError:
            raise ValueError(f"Invalid {cls.__name__} value {text!r} (expected an integer)") from None
        return cls(value)


@dataclass(frozen=True)
class TextSetting(Setting):
    """ASCII string preceded by a 1-byte length."""

    value: str

    kind: ClassVar[str] = "text"
    writable: ClassVar[bool] = False
    # A reply frame is at most 20 bytes, leaving 12 for the string itself
    max_length: ClassVar[int] = 12

    def __post_init__(self) -> None:
        if not self.value.isascii():
            raise ValueError(f"{type(self).__name__} must be ASCII: {self.value!r}")
        if len(self.value) > self.max_length:
            raise OutOfRangeError(len(self.value), 0, self.max_length)

    def dump(self, sink: BinaryIO) -> int:
        encoded = self.value.encode("ascii")
        return write_all(sink, bytes([len(encoded)]) + encoded)

    def length(self) -> int:
        return 1 + len(self.value)

    @classmethod
    def parse(cls, data: bytes):
        size, rest = UINT8.parse(data)
        raw, rest = take(rest, size)
        try:
            return cls(raw.decode("ascii")), rest
        except (UnicodeDecodeError, ValueError) as e:
            raise ParseError(f"{cls.__name__}: invalid text {raw!r}") from e

    @classmethod
    def from_text(cls, text: str):
        return cls(text)


# ============================================================================
# Catalog
# ============================================================================


@register_setting(Opcode.MONITOR_NAME)
class MonitorName(TextSetting):
    """Model name reported by the display."""


@register_setting(Opcode.SERIAL_NUMBER)
class SerialNumber(TextSetting):
    """Serial number of the display."""


@register_setting(Opcode.BACKLIGHT_HOURS)
class BacklightHours(RangedSetting):
    """Backlight operating hours."""

    codec = UINT16
    kind = "uint16"
    writable = False
    maximum = 0xFFFF


@register_setting(Opcode.POWER_STATE)
class PowerState(ByteEnumSetting):
    OFF = 0
    ON = 1


@register_setting(Opcode.POWER_LED)
class PowerLED(ByteEnumSetting):
    OFF = 0
    ON = 1


@register_setting(Opcode.POWER_USB)
class PowerUSB(ByteEnumSetting):
    OFF = 0
    ON = 1


@register_setting(Opcode.BRIGHTNESS)
class Brightness(RangedSetting):
    """Brightness in percent."""


@register_setting(Opcode.CONTRAST)
class Contrast(RangedSetting):
    """Contrast in percent."""


@register_setting(Opcode.ASPECT_RATIO)
class AspectRatio(ByteEnumSetting):
    RATIO_16X9 = 0
    RATIO_4X3 = 2
    RATIO_5X4 = 4


@register_setting(Opcode.SHARPNESS)
class Sharpness(RangedSetting):
    """Sharpness in percent."""


@register_setting(Opcode.COLOR_TEMPERATURE)
class ColorTemperature(DWordEnumSetting):
    K5000 = 0x01
    K5700 = 0x02
    K6500 = 0x04
    K7500 = 0x08
    K9300 = 0x10
    K10000 = 0x20


@register_setting(Opcode.COLOR_FORMAT)
class ColorFormat(ByteEnumSetting):
    RGB = 0
    YPBPR = 1


@register_setting(Opcode.COLOR_PRESET)
class ColorPreset(DWordEnumSetting):
    STANDARD = 0x01
    MULTIMEDIA = 0x02
    COLOR_TEMP = 0x20
    CUSTOM_COLOR = 0x80


@register_setting(Opcode.AUTO_SELECT)
class AutoSelect(ByteEnumSetting):
    """Automatic video input selection."""

    OFF = 0
    ON = 1


@register_setting(Opcode.VIDEO_INPUT)
class VideoInput(DWordEnumSetting):
    HDMI1 = 0x01
    HDMI2 = 0x02
    DP1 = 0x08
    VGA1 = 0x40


@register_setting(Opcode.OSD_TRANSPARENCY)
class OSDTransparency(RangedSetting):
    """On-screen display transparency in percent."""


@register_setting(Opcode.OSD_LANGUAGE)
class OSDLanguage(ByteEnumSetting):
    ENGLISH = 0
    SPANISH = 1
    FRENCH = 2
    GERMAN = 3
    PORTUGUESE = 4
    RUSSIAN = 5
    CHINESE = 6
    JAPANESE = 7


@register_setting(Opcode.OSD_TIMER)
class OSDTimer(RangedSetting):
    """Seconds before the on-screen display closes."""

    minimum = 5
    maximum = 60


@register_setting(Opcode.OSD_BUTTON_LOCK)
class OSDButtonLock(ByteEnumSetting):
    UNLOCK = 0
    LOCK = 1


@register_setting(Opcode.VERSION_FIRMWARE)
class VersionFirmware(TextSetting):
    """Firmware version string."""


@register_setting(Opcode.DDCCI)
class DDCCI(ByteEnumSetting):
    DISABLED = 0
    ENABLED = 1


@register_setting(Opcode.LCD_CONDITIONING)
class LCDConditioning(ByteEnumSetting):
    DISABLED = 0
    ENABLED = 1
