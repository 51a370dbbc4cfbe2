"""High-level access to one display over one transport."""

import logging
import threading
from typing import Any

from c5517h.protocol.command import Command, Get, ResetPower, Set
from c5517h.protocol.errors import TransactionError
from c5517h.protocol.reply import Acknowledgement
from c5517h.protocol.transaction import transaction
from c5517h.protocol.types import Setting

logger = logging.getLogger(__name__)


class ProtocolHandler:
    """Runs transactions against a display, one at a time.

    The connection must provide ``read(n)`` and ``write(data)``; if it also
    offers ``reset_input_buffer()`` stale bytes are dropped before each
    request.
    """

    def __init__(self, connection: Any):
        """
        Initialize protocol handler.

        Args:
            connection: Transport used for both requests and replies
        """
        self.connection = connection
        self._lock = threading.Lock()
        self._stats = {
            "transactions": 0,
            "failures": 0,
        }

    @property
    def stats(self) -> dict:
        """Get transaction statistics."""
        return self._stats.copy()

    def execute(self, command: Command) -> Any:
        """
        Run one transaction.

        Raises:
            TransactionError: If the transaction fails
        """
        with self._lock:
            reset = getattr(self.connection, "reset_input_buffer", None)
            if reset is not None:
                reset()

            self._stats["transactions"] += 1
            try:
                return transaction(command, self.connection, self.connection)
            except TransactionError as e:
                self._stats["failures"] += 1
                logger.warning("%r failed: %s", command, e)
                raise

    def get(self, setting: type[Setting]) -> Setting:
        """Read the current value of a setting."""
        value = self.execute(Get(setting))
        logger.debug("%s is %r", setting.__name__, value)
        return value

    def set(self, value: Setting) -> Acknowledgement:
        """Write a setting value."""
        ack = self.execute(Set(value))
        logger.info("%s set to %r", type(value).__name__, value)
        return ack

    def reset_power(self) -> Acknowledgement:
        """Power-cycle the display."""
        ack = self.execute(ResetPower())
        logger.info("Power reset acknowledged")
        return ack
