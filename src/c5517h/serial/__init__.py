"""Serial communication layer."""

from c5517h.serial.connection import SerialConnection

__all__ = ["SerialConnection"]
