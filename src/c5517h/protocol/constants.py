"""Protocol constants for C5517H communication."""

from enum import IntEnum

# ============================================================================
# Frame Structure
# ============================================================================

REQUEST_PREFIX = b"\x37\x51"
REPLY_PREFIX = b"\x6f\x37"
REPLY_TAG = 0x02

# Direction + opcode bytes counted by the LEN field on top of the payload
LENGTH_OVERHEAD = 2

# PREFIX(2) + LEN(1) + TAG(1) + RESULT(1) + OPCODE(1) + CHECKSUM(1)
REPLY_MIN_LEN = 7
REPLY_MAX_LEN = 20

# ============================================================================
# Direction
# ============================================================================


class Direction(IntEnum):
    """Command direction byte."""

    READ = 0xEB
    WRITE = 0xEA


# ============================================================================
# Result Codes
# ============================================================================


class ResultCode(IntEnum):
    """Device-reported result code carried by every reply."""

    SUCCESS = 0
    TIMEOUT = 1
    PARAMETERS_ERROR = 2
    NOT_CONNECTED = 3
    OTHER = 4


RESULT_CODE_NAMES = {
    ResultCode.SUCCESS: "success",
    ResultCode.TIMEOUT: "timeout",
    ResultCode.PARAMETERS_ERROR: "parameters error",
    ResultCode.NOT_CONNECTED: "not connected",
    ResultCode.OTHER: "other unknown error",
}

# ============================================================================
# Opcodes
# ============================================================================


class Opcode(IntEnum):
    """Setting and command opcodes."""

    MONITOR_NAME = 0x01
    SERIAL_NUMBER = 0x02
    BACKLIGHT_HOURS = 0x04
    POWER_STATE = 0x20
    POWER_LED = 0x21
    POWER_USB = 0x22
    RESET_POWER = 0x2F
    BRIGHTNESS = 0x30
    CONTRAST = 0x31
    ASPECT_RATIO = 0x33
    SHARPNESS = 0x34
    COLOR_TEMPERATURE = 0x43
    COLOR_FORMAT = 0x46
    COLOR_PRESET = 0x48
    AUTO_SELECT = 0x60
    VIDEO_INPUT = 0x62
    OSD_TRANSPARENCY = 0x80
    OSD_LANGUAGE = 0x81
    OSD_TIMER = 0x83
    OSD_BUTTON_LOCK = 0x84
    VERSION_FIRMWARE = 0xA0
    DDCCI = 0xA2
    LCD_CONDITIONING = 0xA3


# ============================================================================
# Communication Settings
# ============================================================================

SERIAL_BAUD = 9600
SERIAL_TIMEOUT = 1.0  # Serial read/write timeout (seconds)
