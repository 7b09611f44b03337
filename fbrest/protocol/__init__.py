"""Protocol Layer - raw HTTP/1.1 requests and responses for the store."""

from .request import Method, build_request, build_url
from .response import ReadState, Response, ResponseReader, parse_status_code
from . import codec

__all__ = [
    "Method",
    "build_request",
    "build_url",
    # Response parsing
    "ReadState",
    "Response",
    "ResponseReader",
    "parse_status_code",
    "codec",
]
