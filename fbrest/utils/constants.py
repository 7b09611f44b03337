# Store endpoint
HTTPS_PORT = 443
URL_SCHEME_PREFIX = "https://"
PATH_SUFFIX = ".json"
AUTH_QUERY = "?auth="

# Connector retry budget
CONNECT_MAX_ATTEMPTS = 30
CONNECT_RETRY_DELAY = 0.1  # seconds

# Transport
SOCKET_TIMEOUT = 10.0  # seconds
RECV_CHUNK_SIZE = 512

# HTTP
HTTP_VERSION = "HTTP/1.1"
HTTP_VERSION_TOKEN = "HTTP/"
CRLF = "\r\n"
USER_AGENT = "Mozilla/4.0 (compatible; fbrest; Embedded Device)"
CONTENT_TYPE_JSON = "application/json;charset=utf-8"

STATUS_OK = 200
NO_DATA = "NULL"

# Device registry
MAX_DEVICES = 16
DEFAULT_DEVICE_ICON = "icon1.png"
DEFAULT_SLIDER_VALUE = 100
SLIDER_MIN = 0
SLIDER_MAX = 100
DEFAULT_DEVICE_PATH = "webnest"

# CLI / configuration
CONFIG_FILE_NAME = ".fbrest"
ENV_URL = "FBREST_URL"
ENV_TOKEN = "FBREST_TOKEN"
VALUE_TYPES = ("string", "int", "float", "bool", "json")
