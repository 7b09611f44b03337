import logging
import re
from dataclasses import dataclass
from enum import Enum

from fbrest.transport.base import Transport
from fbrest.utils.constants import HTTP_VERSION_TOKEN, STATUS_OK, NO_DATA
from .codec import strip_quotes

_LOGGER = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ReadState(Enum):
    STATUS_LINE = "status_line"
    HEADERS = "headers"
    BODY = "body"


@dataclass
class Response:
    status_code: int = 0
    body: str = NO_DATA

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


def parse_status_code(line: str) -> int:
    """Return the code between the first and second space of a status line, or 0."""
    first = line.find(" ")
    if first <= 0:
        return 0
    second = line.find(" ", first + 1)
    if second <= 0:
        return 0
    m = _LEADING_INT.match(line[first + 1:second])
    return int(m.group(1)) if m else 0


class ResponseReader:
    """
    Line-oriented reader for a streamed HTTP response.

    States advance STATUS_LINE -> HEADERS -> BODY. Header lines other than the
    status line are dropped; body lines are concatenated without separators,
    which is enough for the single-line JSON the store returns.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.state = ReadState.STATUS_LINE
        self.status_code = 0
        self._body_parts = []

    @property
    def headers_ended(self) -> bool:
        return self.state is ReadState.BODY

    def feed_line(self, line) -> ReadState:
        if isinstance(line, (bytes, bytearray)):
            line = bytes(line).decode("utf-8", errors="replace")

        if self.state is ReadState.BODY:
            self._body_parts.append(line.rstrip())
            return self.state

        line = line.rstrip()
        if not line:
            self.state = ReadState.BODY
            return self.state

        if line.startswith(HTTP_VERSION_TOKEN):
            self.status_code = parse_status_code(line)
            if not self.status_code:
                _LOGGER.debug("Unparsable status line: %r", line)
        self.state = ReadState.HEADERS
        return self.state

    def result(self) -> Response:
        if self.status_code == STATUS_OK:
            return Response(self.status_code, strip_quotes("".join(self._body_parts)))
        return Response(self.status_code, NO_DATA)

    def read(self, transport: Transport) -> Response:
        self.reset()
        # A server may close right after flushing; keep draining what is buffered.
        while transport.is_open or transport.in_waiting() > 0:
            line = transport.read_line()
            if not line and not transport.is_open:
                break
            self.feed_line(line)
        response = self.result()
        _LOGGER.debug("Response status %d (%s)", response.status_code, self.state.value)
        return response
