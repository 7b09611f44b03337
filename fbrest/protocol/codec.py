"""Conversions between Python values and the JSON-scalar text the store expects."""
import re

from fbrest.utils.constants import STATUS_OK, NO_DATA

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def strip_quotes(text: str) -> str:
    """Remove a single enclosing pair of double quotes, if present."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def encode_string(value: str) -> str:
    return '"' + value + '"'


def encode_int(value: int) -> str:
    return str(int(value))


def encode_float(value: float) -> str:
    return str(float(value))


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def encode_json(value: str) -> str:
    # A quoted document would otherwise be stored as a string scalar
    return strip_quotes(value)


def decode_string(status: int, text: str) -> str:
    return text if status == STATUS_OK else NO_DATA


decode_json = decode_string


def decode_int(status: int, text: str) -> int:
    """Parse the leading integer of *text*; anything unparsable is 0."""
    if status != STATUS_OK:
        return 0
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


def decode_float(status: int, text: str) -> float:
    if status != STATUS_OK:
        return 0.0
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else 0.0


def decode_bool(status: int, text: str) -> bool:
    return status == STATUS_OK and text == "true"


ENCODERS = {
    'string': encode_string,
    'int': encode_int,
    'float': encode_float,
    'bool': encode_bool,
    'json': encode_json,
}

DECODERS = {
    'string': decode_string,
    'int': decode_int,
    'float': decode_float,
    'bool': decode_bool,
    'json': decode_json,
}
