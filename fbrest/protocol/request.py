from enum import Enum
from typing import Optional

from fbrest.utils.constants import (
    HTTP_VERSION, CRLF, USER_AGENT, CONTENT_TYPE_JSON,
    PATH_SUFFIX, AUTH_QUERY,
)


class Method(str, Enum):
    PUT = "PUT"
    POST = "POST"
    GET = "GET"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        return self in (Method.PUT, Method.POST)


def build_url(path: str, token: str = "") -> str:
    # path is sent as given; callers own its validity
    url = "/" + path + PATH_SUFFIX
    if token:
        url += AUTH_QUERY + token
    return url


def build_request(method: Method, path: str, host: str,
                  token: str = "", body: Optional[str] = None) -> bytes:
    """
    Build the raw HTTP/1.1 request for one store call.

    Headers go out in a fixed order. Content-Type and Content-Length are only
    emitted for PUT/POST; GET and DELETE never carry a body even if one is
    passed. The body is followed by a CRLF that Content-Length does not count.
    """
    method = Method(method)
    lines = [
        f"{method.value} {build_url(path, token)} {HTTP_VERSION}",
        f"Host: {host}",
        "Connection: close",
        "Accept: */*",
        f"User-Agent: {USER_AGENT}",
    ]

    payload = b""
    if method.has_body:
        payload = (body or "").encode("utf-8")
        lines.append(f"Content-Type: {CONTENT_TYPE_JSON}")
        lines.append(f"Content-Length: {len(payload)}")

    head = CRLF.join(lines) + CRLF + CRLF
    request = head.encode("utf-8")
    if method.has_body:
        request += payload + CRLF.encode("ascii")
    return request
