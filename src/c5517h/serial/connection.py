"""Serial port connection management using pyserial."""

import logging

import serial
from serial import SerialException

from c5517h.protocol.constants import SERIAL_BAUD, SERIAL_TIMEOUT

logger = logging.getLogger(__name__)


class SerialConnection:
    """Blocking serial connection to the display (8N1, no flow control)."""

    def __init__(
        self,
        port: str,
        baudrate: int = SERIAL_BAUD,
        timeout: float = SERIAL_TIMEOUT,
    ):
        """
        Initialize serial connection manager.

        Args:
            port: Serial port path (e.g., '/dev/ttyS1')
            baudrate: Communication speed (default: 9600)
            timeout: Read/write timeout in seconds
        """
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout

        self._serial: serial.Serial | None = None
        self._connected = False

    @property
    def connected(self) -> bool:
        """Check if currently connected."""
        return self._connected and self._serial is not None and self._serial.is_open

    def connect(self) -> bool:
        """
        Open serial port connection.

        Returns:
            True if connection successful, False otherwise
        """
        if self.connected:
            logger.debug("Already connected to %s", self.port)
            return True

        try:
            logger.info("Connecting to serial port %s at %d baud", self.port, self.baudrate)

            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                timeout=self.timeout,
                write_timeout=self.timeout,
            )

            self._connected = True
            logger.info("Successfully connected to %s", self.port)
            return True

        except (OSError, SerialException) as e:
            logger.error("Failed to connect to %s: %s", self.port, e)
            self._connected = False
            return False

    def disconnect(self) -> None:
        """Close serial port connection."""
        if not self._connected:
            return

        logger.info("Disconnecting from %s", self.port)

        if self._serial:
            try:
                self._serial.close()
            except (OSError, SerialException) as e:
                logger.error("Error closing port: %s", e)

        self._serial = None
        self._connected = False
        logger.info("Disconnected from %s", self.port)

    def read(self, n: int = 1) -> bytes:
        """
        Read up to ``n`` bytes, blocking until they arrive or the timeout expires.

        Returns:
            Bytes read (empty on timeout)

        Raises:
            ConnectionError: If not connected
        """
        if not self.connected or not self._serial:
            raise ConnectionError("Not connected to serial port")

        try:
            data = self._serial.read(n)
        except SerialException as e:
            logger.error("Read error: %s", e)
            self._connected = False
            raise

        if len(data) < n:
            logger.debug("Read timeout after %ss (%d of %d bytes)", self.timeout, len(data), n)
        return data

    def write(self, data: bytes) -> int:
        """
        Write to serial port.

        Raises:
            ConnectionError: If not connected
        """
        if not self.connected or not self._serial:
            raise ConnectionError("Not connected to serial port")

        try:
            written = self._serial.write(data)
        except SerialException as e:
            logger.error("Write error: %s", e)
            self._connected = False
            raise
        return written if written is not None else len(data)

    def flush(self) -> None:
        """Block until all written data has been transmitted."""
        if self._serial:
            self._serial.flush()

    def reset_input_buffer(self) -> None:
        """Discard any bytes received but not yet read."""
        if self._serial:
            self._serial.reset_input_buffer()

    def __enter__(self):
        """Context manager entry."""
        if not self.connect():
            raise ConnectionError(f"Could not open serial port {self.port}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
