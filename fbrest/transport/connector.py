import logging
import time
from typing import Callable

from .base import Transport
from fbrest.utils.constants import CONNECT_MAX_ATTEMPTS, CONNECT_RETRY_DELAY

_LOGGER = logging.getLogger(__name__)


class Connector:
    """Opens a transport with a fixed-interval, bounded retry.

    Failure is reported through the return value only; the caller may go on
    to write to a transport that never opened.
    """

    def __init__(self, max_attempts: int = CONNECT_MAX_ATTEMPTS,
                 retry_delay: float = CONNECT_RETRY_DELAY,
                 sleep: Callable[[float], None] = time.sleep):
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._sleep = sleep
        self.last_attempts = 0

    def connect(self, transport: Transport, host: str, port: int) -> bool:
        for attempt in range(1, self.max_attempts + 1):
            self.last_attempts = attempt
            if transport.open(host, port):
                _LOGGER.debug("Connected to %s:%d on attempt %d", host, port, attempt)
                return True
            if attempt < self.max_attempts:
                self._sleep(self.retry_delay)

        _LOGGER.warning("Giving up on %s:%d after %d attempts", host, port, self.max_attempts)
        return False
