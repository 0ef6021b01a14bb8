"""
Time-based One-Time Password (RFC 6238)

The counter is the number of whole `step` periods elapsed since the Unix
epoch; everything else is HOTP.
"""
import time
from typing import Optional

from . import base32
from .constants import DEFAULT_DIGITS, DEFAULT_STEP
from .hotp import hotp


def _check_step(step: int) -> None:
    if isinstance(step, bool) or not isinstance(step, int) or step <= 0:
        raise ValueError("step must be a positive number of seconds")


def time_counter(for_time: Optional[float] = None, step: int = DEFAULT_STEP) -> int:
    _check_step(step)
    if for_time is None:
        for_time = time.time()
    # Floor division rounds toward negative infinity for ints and floats alike
    return int(for_time // step)


def remaining_seconds(for_time: Optional[float] = None, step: int = DEFAULT_STEP) -> int:
    """
    Seconds left before the code for `for_time` rolls over (1..step)
    """
    _check_step(step)
    if for_time is None:
        for_time = time.time()
    return step - int(for_time % step)


def generate(encoded_secret: str, for_time: Optional[float] = None, step: int = DEFAULT_STEP,
             digits: int = DEFAULT_DIGITS, strict: bool = False) -> str:
    """
    TOTP code for a Base32 secret at `for_time` (defaults to the wall clock)
    """
    secret_bytes = base32.decode(encoded_secret, strict=strict)
    return hotp(secret_bytes, time_counter(for_time, step), digits)
