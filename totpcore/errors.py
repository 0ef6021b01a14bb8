class TOTPError(ValueError):
    """Base class for every error raised by totpcore."""


class InvalidSecret(TOTPError):
    """The shared secret fails a precondition before hashing (e.g. it is empty)."""


class InvalidEncoding(TOTPError):
    """Base32 text rejected by the strict decoding policy."""
