import logging
from typing import Callable, NamedTuple, Optional, Union

from fbrest.protocol import Method, ResponseReader, build_request, codec
from fbrest.protocol.response import Response
from fbrest.transport import Connector, Transport, create_transport
from fbrest.utils.constants import HTTPS_PORT, URL_SCHEME_PREFIX, STATUS_OK
from fbrest.utils.exceptions import TransportError

_LOGGER = logging.getLogger(__name__)

Value = Union[str, int, float, bool]


class StoreResult(NamedTuple):
    """Status code plus decoded value; unpacks as ``status, value``."""
    status_code: int
    value: Value

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


def normalize_host(reference_url: str) -> str:
    host = reference_url
    if host.startswith(URL_SCHEME_PREFIX):
        host = host[len(URL_SCHEME_PREFIX):]
    if host.endswith("/"):
        host = host[:-1]
    return host


class StoreClient:
    """
    Blocking REST client for a Firebase-style realtime store.

    Every call opens a fresh TLS connection, sends one request and reads the
    response until the server closes. Failures never raise: the returned
    status code (0 when nothing could be read) is the signal to check.
    """

    def __init__(self, reference_url: str, auth_token: str = "", *,
                 transport_factory: Optional[Callable[[], Transport]] = None,
                 connector: Optional[Connector] = None,
                 port: int = HTTPS_PORT):
        self._host = normalize_host(reference_url)
        self._auth_token = auth_token or ""
        self._port = port
        self._transport_factory = transport_factory or create_transport
        self._connector = connector or Connector()

    @property
    def host(self) -> str:
        return self._host

    @property
    def auth_token(self) -> str:
        return self._auth_token

    # ------------------------------------------------------------------
    # set: PUT
    # ------------------------------------------------------------------

    def set_string(self, path: str, data: str) -> int:
        return self._set(path, codec.encode_string(data))

    def set_int(self, path: str, data: int) -> int:
        return self._set(path, codec.encode_int(data))

    def set_float(self, path: str, data: float) -> int:
        return self._set(path, codec.encode_float(data))

    def set_bool(self, path: str, data: bool) -> int:
        return self._set(path, codec.encode_bool(data))

    def set_json(self, path: str, data: str) -> int:
        return self._set(path, codec.encode_json(data))

    # ------------------------------------------------------------------
    # push: POST, the store generates the child key
    # ------------------------------------------------------------------

    def push_string(self, path: str, data: str) -> int:
        return self._push(path, codec.encode_string(data))

    def push_int(self, path: str, data: int) -> int:
        return self._push(path, codec.encode_int(data))

    def push_float(self, path: str, data: float) -> int:
        return self._push(path, codec.encode_float(data))

    def push_bool(self, path: str, data: bool) -> int:
        return self._push(path, codec.encode_bool(data))

    def push_json(self, path: str, data: str) -> int:
        return self._push(path, codec.encode_json(data))

    # ------------------------------------------------------------------
    # get: GET
    # ------------------------------------------------------------------

    def get_string(self, path: str) -> StoreResult:
        return self._get_as(path, codec.decode_string)

    def get_int(self, path: str) -> StoreResult:
        return self._get_as(path, codec.decode_int)

    def get_float(self, path: str) -> StoreResult:
        return self._get_as(path, codec.decode_float)

    def get_bool(self, path: str) -> StoreResult:
        return self._get_as(path, codec.decode_bool)

    def get_json(self, path: str) -> StoreResult:
        return self.get_string(path)

    def remove(self, path: str) -> int:
        return self._request(Method.DELETE, path).status_code

    # ------------------------------------------------------------------
    # Typed dispatch used by the CLI
    # ------------------------------------------------------------------

    def set_value(self, path: str, value: Value, value_type: str = 'string') -> int:
        return self._set(path, codec.ENCODERS[value_type](value))

    def push_value(self, path: str, value: Value, value_type: str = 'string') -> int:
        return self._push(path, codec.ENCODERS[value_type](value))

    def get_value(self, path: str, value_type: str = 'string') -> StoreResult:
        return self._get_as(path, codec.DECODERS[value_type])

    # ------------------------------------------------------------------
    # Internal primitives
    # ------------------------------------------------------------------

    def _set(self, path: str, msg: str) -> int:
        return self._request(Method.PUT, path, msg).status_code

    def _push(self, path: str, msg: str) -> int:
        return self._request(Method.POST, path, msg).status_code

    def _get(self, path: str) -> Response:
        return self._request(Method.GET, path)

    def _get_as(self, path: str, decode) -> StoreResult:
        response = self._get(path)
        return StoreResult(response.status_code, decode(response.status_code, response.body))

    def _request(self, method: Method, path: str, body: Optional[str] = None) -> Response:
        transport = self._transport_factory()
        try:
            self._connector.connect(transport, self._host, self._port)
            request = build_request(method, path, self._host, self._auth_token, body)
            _LOGGER.debug("%s /%s.json (%d bytes)", method.value, path, len(request))
            transport.write(request)
            return ResponseReader().read(transport)
        except TransportError as e:
            _LOGGER.warning("%s %s failed: %s", method.value, path, e)
            return Response()
        finally:
            transport.close()
