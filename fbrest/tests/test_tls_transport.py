import socket
import ssl
import unittest
from unittest import mock

from fbrest.transport.tls import TlsTransport
from fbrest.utils.exceptions import TlsError, TransportError


def _attached(chunks):
    """A TlsTransport wired to a fake socket that returns *chunks* from recv()."""
    transport = TlsTransport()
    sock = mock.MagicMock()
    sock.recv.side_effect = list(chunks)
    sock.pending.return_value = 0
    transport._sock = sock
    return transport, sock


class TestTlsTransport(unittest.TestCase):
    def test_read_line_splits_across_chunks(self):
        transport, _ = _attached([b"HTTP/1.1 200 OK\r\nab", b"c\r\n", b""])
        self.assertEqual(transport.read_line(), b"HTTP/1.1 200 OK\r\n")
        self.assertEqual(transport.read_line(), b"abc\r\n")
        self.assertTrue(transport.is_open)
        self.assertEqual(transport.read_line(), b"")
        self.assertFalse(transport.is_open)

    def test_buffered_bytes_survive_peer_close(self):
        transport, _ = _attached([b"line1\nrest", b""])
        self.assertEqual(transport.read_line(), b"line1\n")
        self.assertEqual(transport.read_line(), b"rest")
        self.assertFalse(transport.is_open)
        self.assertEqual(transport.in_waiting(), 0)

    def test_in_waiting_does_not_block_when_nothing_ready(self):
        transport, sock = _attached([])
        with mock.patch("fbrest.transport.tls.select.select", return_value=([], [], [])):
            self.assertEqual(transport.in_waiting(), 0)
        sock.recv.assert_not_called()

    def test_timeout_is_treated_as_closed(self):
        transport, _ = _attached([socket.timeout("timed out")])
        self.assertEqual(transport.read_line(), b"")
        self.assertFalse(transport.is_open)

    def test_ssl_error_is_wrapped(self):
        transport, _ = _attached([ssl.SSLError("bad record mac")])
        with self.assertRaises(TlsError):
            transport.read_line()

    def test_write_on_closed_transport_is_dropped(self):
        self.assertEqual(TlsTransport().write(b"GET / HTTP/1.1\r\n\r\n"), 0)

    def test_write_error_is_wrapped(self):
        transport, sock = _attached([])
        sock.sendall.side_effect = ConnectionResetError("reset by peer")
        with self.assertRaises(TransportError):
            transport.write(b"x")

    def test_open_failure_returns_false(self):
        with mock.patch("fbrest.transport.tls.socket.create_connection", side_effect=OSError("unreachable")):
            self.assertFalse(TlsTransport().open("db.example.com", 443))

    def test_open_wraps_socket_with_server_hostname(self):
        raw = mock.MagicMock()
        context = mock.MagicMock()
        with mock.patch("fbrest.transport.tls.socket.create_connection", return_value=raw), \
                mock.patch.object(TlsTransport, "_make_context", return_value=context):
            transport = TlsTransport()
            self.assertTrue(transport.open("db.example.com", 443))
        context.wrap_socket.assert_called_once_with(raw, server_hostname="db.example.com")
        self.assertTrue(transport.is_open)
        transport.close()
        self.assertFalse(transport.is_open)

    def test_insecure_context_skips_verification(self):
        context = TlsTransport(verify=False)._make_context()
        self.assertFalse(context.check_hostname)
        self.assertEqual(context.verify_mode, ssl.CERT_NONE)


if __name__ == "__main__":
    unittest.main()
