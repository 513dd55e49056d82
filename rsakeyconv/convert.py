"""The one-shot transform from an input buffer to the requested encodings."""
import logging
from collections import namedtuple

from rsakeyconv import encoders
from rsakeyconv.dispatch import KeyFormat, parse_key

logger = logging.getLogger(__name__)

ConversionResult = namedtuple('ConversionResult', ['outputs', 'skipped'])

ENCODERS = {
    KeyFormat.RFC3110: encoders.encode_rfc3110,
    KeyFormat.PEM_PUBLIC: encoders.encode_pem_public,
    KeyFormat.HEX_DER: encoders.encode_hex_der,
    KeyFormat.PEM_PRIVATE: encoders.encode_pem_private,
    KeyFormat.RACOON: encoders.encode_racoon,
}

PRIVATE_FORMATS = frozenset([KeyFormat.PEM_PRIVATE, KeyFormat.RACOON])


def convert(data, formats):
    """
    Parse the key in ``data`` and encode it into each requested format.

    Private formats requested for a public-only key are skipped and
    reported in ``skipped`` instead of failing the whole conversion. Any
    other error propagates before output is returned.

    Args:
        data (str): The whole input buffer.
        formats: Iterable of KeyFormat values to produce.

    Returns:
        ConversionResult: ``outputs`` is a list of ``(KeyFormat, text)`` pairs
        in KeyFormat declaration order; ``skipped`` lists the private formats
        that could not be produced.
    """
    requested = set(formats)
    key = parse_key(data)

    outputs = []
    skipped = []
    for key_format in KeyFormat:
        if key_format not in requested:
            continue
        if key_format in PRIVATE_FORMATS and not key.has_private():
            logger.debug(f"Skipping {key_format.value}: key has no private part")
            skipped.append(key_format)
            continue
        outputs.append((key_format, ENCODERS[key_format](key)))
    return ConversionResult(outputs, skipped)
