import unittest

from fbrest.protocol.response import ReadState, Response, ResponseReader, parse_status_code
from fbrest.transport.memory import MemoryTransport


def _read(raw: bytes, **kwargs) -> Response:
    transport = MemoryTransport(raw, **kwargs)
    transport.open("host", 443)
    transport.write(b"GET / HTTP/1.1\r\n\r\n")
    return ResponseReader().read(transport)


class TestParseStatusCode(unittest.TestCase):
    def test_code_between_first_and_second_space(self):
        self.assertEqual(parse_status_code("HTTP/1.1 404 Not Found"), 404)

    def test_missing_second_space_leaves_zero(self):
        self.assertEqual(parse_status_code("HTTP/1.1 200"), 0)

    def test_non_numeric_code_is_zero(self):
        self.assertEqual(parse_status_code("HTTP/1.1 abc OK"), 0)


class TestStateMachine(unittest.TestCase):
    def test_states_advance_in_order(self):
        reader = ResponseReader()
        self.assertIs(reader.state, ReadState.STATUS_LINE)
        self.assertIs(reader.feed_line(b"HTTP/1.1 200 OK\r\n"), ReadState.HEADERS)
        self.assertIs(reader.feed_line(b"Content-Type: application/json\r\n"), ReadState.HEADERS)
        self.assertFalse(reader.headers_ended)
        self.assertIs(reader.feed_line(b"\r\n"), ReadState.BODY)
        self.assertTrue(reader.headers_ended)
        self.assertEqual(reader.status_code, 200)

    def test_malformed_status_line_keeps_zero(self):
        reader = ResponseReader()
        reader.feed_line("HTTP/1.1 200")
        reader.feed_line("")
        reader.feed_line('"x"')
        self.assertEqual(reader.result(), Response(0, "NULL"))

    def test_empty_line_inside_body_is_kept_as_nothing(self):
        reader = ResponseReader()
        for line in ("HTTP/1.1 200 OK", "", "{", "", "}"):
            reader.feed_line(line)
        self.assertEqual(reader.result().body, "{}")


class TestReadFromTransport(unittest.TestCase):
    def test_success_strips_string_quotes(self):
        response = _read(b'HTTP/1.1 200 OK\r\n\r\n"hello"\r\n')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.body, "hello")
        self.assertTrue(response.ok)

    def test_headers_are_discarded(self):
        raw = (
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Length: 13\r\n"
            b"Access-Control-Allow-Origin: *\r\n"
            b"\r\n"
            b'{"a":1,"b":2}\r\n'
        )
        self.assertEqual(_read(raw).body, '{"a":1,"b":2}')

    def test_non_success_uses_sentinel_body(self):
        response = _read(b'HTTP/1.1 401 Unauthorized\r\n\r\n{"error":"Permission denied"}\r\n')
        self.assertEqual(response, Response(401, "NULL"))
        self.assertFalse(response.ok)

    def test_multi_line_body_is_concatenated_without_separator(self):
        response = _read(b'HTTP/1.1 200 OK\r\n\r\n{"a":\r\n1}\r\n')
        self.assertEqual(response.body, '{"a":1}')

    def test_buffered_bytes_are_drained_after_peer_close(self):
        response = _read(b'HTTP/1.1 200 OK\r\n\r\n"last"', close_on_flush=True)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.body, "last")

    def test_never_opened_connection_reads_nothing(self):
        transport = MemoryTransport(b"HTTP/1.1 200 OK\r\n\r\n1\r\n", fail_opens=None)
        transport.open("host", 443)
        response = ResponseReader().read(transport)
        self.assertEqual(response, Response(0, "NULL"))

    def test_reader_is_reusable(self):
        reader = ResponseReader()
        first = MemoryTransport(b"HTTP/1.1 200 OK\r\n\r\n1\r\n")
        second = MemoryTransport(b"HTTP/1.1 404 Not Found\r\n\r\n")
        for t in (first, second):
            t.open("host", 443)
        self.assertEqual(reader.read(first).status_code, 200)
        self.assertEqual(reader.read(second), Response(404, "NULL"))


if __name__ == "__main__":
    unittest.main()
