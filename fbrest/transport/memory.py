from typing import Optional

from .base import Transport


class MemoryTransport(Transport):
    """
    Scripted transport that replays a canned response.

    The connection counts as open while unread response bytes remain, which
    mimics a server that closes right after its last byte. With
    close_on_flush=True the connection reports closed as soon as the request
    is written, leaving the response only in the receive buffer.
    fail_opens is the number of open() calls that fail before one succeeds;
    None makes every attempt fail.
    """

    def __init__(self, response: bytes = b"", fail_opens: Optional[int] = 0,
                 close_on_flush: bool = False):
        self.response = response
        self.fail_opens = fail_opens
        self.close_on_flush = close_on_flush
        self.sent = bytearray()
        self.open_calls = 0
        self.closed = False
        self._connected = False
        self._flushed = False
        self._rx = bytearray()

    def open(self, host: str, port: int) -> bool:
        self.open_calls += 1
        self.host, self.port = host, port
        if self.fail_opens is None or self.open_calls <= self.fail_opens:
            return False
        self._connected = True
        self._rx = bytearray(self.response)
        return True

    def write(self, data: bytes) -> int:
        if not self._connected:
            return 0
        self.sent.extend(data)
        self._flushed = True
        return len(data)

    def read_line(self) -> bytes:
        idx = self._rx.find(b"\n")
        end = idx + 1 if idx >= 0 else len(self._rx)
        line = bytes(self._rx[:end])
        del self._rx[:end]
        return line

    def in_waiting(self) -> int:
        return len(self._rx)

    def close(self) -> None:
        self._connected = False
        self.closed = True
        self._rx.clear()

    @property
    def is_open(self) -> bool:
        if not self._connected:
            return False
        if self.close_on_flush and self._flushed:
            return False
        return bool(self._rx)
