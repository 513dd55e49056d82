"""
Conversions between unsigned big-endian integers, raw bytes, hex text and
Base64 text.
"""
import base64
import binascii
import re

from rsakeyconv.errors import MalformedBase64, MalformedHex

_WHITESPACE = re.compile(r'\s+')
_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]*')
_BASE64_CHARS = re.compile(r'[A-Za-z0-9+/]*={0,2}')


def strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub('', text)


def bytes_to_hex(data: bytes, upper: bool = False) -> str:
    """
    Hex-encode a byte string with no separators.

    Args:
        data (bytes): The bytes to encode.
        upper (bool): Emit uppercase digits instead of lowercase.
    """
    text = binascii.hexlify(data).decode('ascii')
    return text.upper() if upper else text


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hex text, ignoring all whitespace.

    Raises:
        MalformedHex: If the digits are not an even number of hex characters.
    """
    digits = strip_whitespace(text)
    if len(digits) % 2:
        raise MalformedHex(f"odd number of hex digits ({len(digits)})")
    if not _HEX_DIGITS.fullmatch(digits):
        raise MalformedHex("non-hex characters in hex text")
    return binascii.unhexlify(digits)


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def base64_decode(text: str) -> bytes:
    """
    Decode standard-alphabet Base64. Whitespace is ignored and trailing
    padding may be omitted.

    Raises:
        MalformedBase64: If the text is not valid Base64.
    """
    body = strip_whitespace(text)
    if not _BASE64_CHARS.fullmatch(body):
        raise MalformedBase64("invalid characters in Base64 text")
    body = body.rstrip('=')
    if len(body) % 4 == 1:
        raise MalformedBase64("truncated Base64 text")
    body += '=' * (-len(body) % 4)
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise MalformedBase64(str(e)) from e


def int_to_bytes(value: int) -> bytes:
    """Minimal unsigned big-endian encoding, at least one byte long."""
    if value < 0:
        raise ValueError("cannot encode a negative integer")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), 'big')


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, 'big')
