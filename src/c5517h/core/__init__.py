"""Core application functionality."""

from c5517h.core.config import Settings, setup_logging
from c5517h.core.models import CommandResult, SettingInfo, SettingValue

__all__ = [
    "CommandResult",
    "SettingInfo",
    "SettingValue",
    "Settings",
    "setup_logging",
]
