"""Exceptions raised while detecting, parsing and encoding RSA keys."""


class KeyConversionError(Exception):
    """
    Base class for every failure of the key conversion pipeline.
    """


class MalformedHex(KeyConversionError):
    """Raised when hex text has odd length or contains non-hex characters."""


class MalformedBase64(KeyConversionError):
    """Raised when Base64 text cannot be decoded."""


class InvalidPem(KeyConversionError):
    """Raised when a PEM block is not a well-formed RSA key."""


class InvalidRfc3110(KeyConversionError):
    """Raised when an RFC 3110 blob is too short for its length fields."""


class UnsupportedKeyLength(KeyConversionError):
    """
    Raised when an RFC 3110 exponent needs the extended (3-byte) length
    form, which is not supported.
    """


class MissingField(KeyConversionError):
    """Raised when a Racoon key block lacks one of its required fields."""

    def __init__(self, name):
        super().__init__(f"missing field '{name}' in RSA key block")
        self.name = name


class DuplicateField(KeyConversionError):
    """Raised when a Racoon key block repeats a field."""

    def __init__(self, name):
        super().__init__(f"field '{name}' appears more than once in RSA key block")
        self.name = name


class NotPrivateKey(KeyConversionError):
    """Raised when a private output format is requested for a public key."""


class InconsistentKey(KeyConversionError):
    """Raised when the crypto backend rejects the key components."""


class UnrecognizedFormat(KeyConversionError):
    """Raised when no known key format matches the input."""
