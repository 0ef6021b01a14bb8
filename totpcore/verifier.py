"""
Verification of user supplied TOTP codes against a window of adjacent time steps
"""
import hmac
import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from . import base32
from .constants import DEFAULT_DIGITS, DEFAULT_STEP
from .errors import InvalidSecret
from .hotp import hotp
from .totp import time_counter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matched:
    """
    The code matched `drift` steps away from the verifier's clock (negative means the past)
    """
    drift: int
    matched = True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotMatched:
    matched = False
    drift   = None

    def __bool__(self) -> bool:
        return False


VerificationResult = Union[Matched, NotMatched]


def normalize_code(code, digits: int = DEFAULT_DIGITS) -> str:
    """
    Restore leading zeros a user may have dropped ("42" -> "000042")
    """
    return str(code).strip().zfill(digits)


def verify(encoded_secret: str, code, window_steps: int = 1, for_time: Optional[float] = None,
           step: int = DEFAULT_STEP, digits: int = DEFAULT_DIGITS, strict: bool = False) -> VerificationResult:
    """
    Check `code` against the steps -window_steps..+window_steps around `for_time`.

    Steps are tried in ascending order and the first match wins, so the
    reported drift is the earliest matching step. A miss is not an error.
    """
    if isinstance(window_steps, bool) or not isinstance(window_steps, int) or window_steps < 0:
        raise ValueError("window_steps must be a non-negative integer")
    secret_bytes = base32.decode(encoded_secret, strict=strict)
    candidate    = normalize_code(code, digits).encode("utf-8")
    now          = time.time() if for_time is None else for_time

    if not secret_bytes:
        raise InvalidSecret("secret must not be empty")

    for drift in range(-window_steps, window_steps + 1):
        counter = time_counter(now + drift * step, step)
        # Steps before the epoch have no code
        if counter < 0:
            continue
        expected = hotp(secret_bytes, counter, digits)
        if hmac.compare_digest(expected.encode("ascii"), candidate):
            logger.debug("TOTP code matched with drift %d", drift)
            return Matched(drift)

    logger.debug("TOTP code did not match within %d step(s)", window_steps)
    return NotMatched()
