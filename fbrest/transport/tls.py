import logging
import select
import socket
import ssl
from typing import Optional

from .base import Transport
from fbrest.utils.exceptions import TlsError, TransportError
from fbrest.utils.constants import SOCKET_TIMEOUT, RECV_CHUNK_SIZE

_LOGGER = logging.getLogger(__name__)


class TlsTransport(Transport):

    def __init__(self, verify: bool = True, timeout: float = SOCKET_TIMEOUT):
        self.verify = verify
        self.timeout = timeout
        self._sock: Optional[ssl.SSLSocket] = None
        self._rx = bytearray()
        self._peer_closed = False

    def _make_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self.verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def open(self, host: str, port: int) -> bool:
        self.close()
        raw = None
        try:
            raw = socket.create_connection((host, port), timeout=self.timeout)
            self._sock = self._make_context().wrap_socket(raw, server_hostname=host)
        except (OSError, ssl.SSLError) as e:
            _LOGGER.debug("TLS connect to %s:%d failed: %s", host, port, e)
            if raw is not None:
                raw.close()
            self._sock = None
            return False
        self._rx.clear()
        self._peer_closed = False
        return True

    def write(self, data: bytes) -> int:
        if not self.is_open:
            _LOGGER.debug("Dropping %d byte write on a closed connection", len(data))
            return 0
        try:
            self._sock.sendall(data)
        except socket.timeout as e:
            raise TransportError(f"TLS write timed out: {e}") from e
        except ssl.SSLError as e:
            raise TlsError(f"TLS write error: {e}") from e
        except OSError as e:
            raise TransportError(f"Socket write error: {e}") from e
        return len(data)

    def _fill(self, block: bool) -> int:
        """Receive one chunk into the buffer; returns the number of bytes added."""
        if self._sock is None or self._peer_closed:
            return 0
        if not block and not self._sock.pending():
            ready, _, _ = select.select([self._sock], [], [], 0)
            if not ready:
                return 0
        try:
            chunk = self._sock.recv(RECV_CHUNK_SIZE)
        except socket.timeout:
            _LOGGER.warning("TLS read timed out after %.1fs; treating connection as closed", self.timeout)
            self._peer_closed = True
            return 0
        except ssl.SSLWantReadError:
            return 0
        except ssl.SSLError as e:
            raise TlsError(f"TLS read error: {e}") from e
        except OSError as e:
            raise TransportError(f"Socket read error: {e}") from e
        if not chunk:
            self._peer_closed = True
            return 0
        self._rx.extend(chunk)
        return len(chunk)

    def read_line(self) -> bytes:
        while b"\n" not in self._rx and self.is_open:
            self._fill(block=True)
        idx = self._rx.find(b"\n")
        end = idx + 1 if idx >= 0 else len(self._rx)
        line = bytes(self._rx[:end])
        del self._rx[:end]
        return line

    def in_waiting(self) -> int:
        if not self._rx:
            self._fill(block=False)
        return len(self._rx)

    def close(self) -> None:
        if self._sock:
            try:
                self._sock.close()
            except OSError:
                pass
            finally:
                self._sock = None
        self._rx.clear()
        self._peer_closed = False

    @property
    def is_open(self) -> bool:
        return self._sock is not None and not self._peer_closed
