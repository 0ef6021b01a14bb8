import os
from typing import Mapping, Optional

from .constants import DEFAULT_SECRET_LENGTH

_TRUTHY = ("1", "true", "yes", "on")


def _int_setting(environ: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


class Config:
    """
    Defaults used by TOTPAuthenticator, read from TOTPCORE_* environment variables
    """
    def __init__(self, issuer: str = "TOTPcore", valid_window: int = 1,
                 secret_length: int = DEFAULT_SECRET_LENGTH, strict_base32: bool = False):
        self.issuer        = issuer
        self.valid_window  = valid_window
        self.secret_length = secret_length
        self.strict_base32 = strict_base32

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        if environ is None:
            environ = os.environ
        return cls(
            issuer=environ.get("TOTPCORE_ISSUER") or "TOTPcore",
            valid_window=_int_setting(environ, "TOTPCORE_VALID_WINDOW", 1, 0),
            secret_length=_int_setting(environ, "TOTPCORE_SECRET_LENGTH", DEFAULT_SECRET_LENGTH, 1),
            strict_base32=environ.get("TOTPCORE_STRICT_BASE32", "").strip().lower() in _TRUTHY,
        )

    def __repr__(self) -> str:
        return (f"Config(issuer={self.issuer!r}, valid_window={self.valid_window}, "
                f"secret_length={self.secret_length}, strict_base32={self.strict_base32})")


settings = Config.from_env()
