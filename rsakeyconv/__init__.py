"""Convert RSA keys between PEM, RFC 3110, hex DER and Racoon encodings."""
from rsakeyconv.convert import ConversionResult, convert
from rsakeyconv.dispatch import DetectedFormat, KeyFormat, detect_format, parse_key
from rsakeyconv.errors import (
    DuplicateField,
    InconsistentKey,
    InvalidPem,
    InvalidRfc3110,
    KeyConversionError,
    MalformedBase64,
    MalformedHex,
    MissingField,
    NotPrivateKey,
    UnrecognizedFormat,
    UnsupportedKeyLength
)
from rsakeyconv.key import CanonicalKey

__all__ = ['convert', 'ConversionResult', 'detect_format', 'parse_key',
           'DetectedFormat', 'KeyFormat', 'CanonicalKey',
           'KeyConversionError', 'MalformedHex', 'MalformedBase64', 'InvalidPem',
           'InvalidRfc3110', 'UnsupportedKeyLength', 'MissingField',
           'DuplicateField', 'NotPrivateKey', 'InconsistentKey',
           'UnrecognizedFormat']
