import logging
from typing import Optional

from . import base32
from .config import Config, settings
from .constants import DEFAULT_DIGITS, DEFAULT_STEP
from .errors import InvalidEncoding, InvalidSecret, TOTPError
from .hotp import hotp
from .provisioning import generate_secret, provisioning_uri, qr_code
from .totp import generate, remaining_seconds, time_counter
from .verifier import Matched, NotMatched, VerificationResult, verify

logging.getLogger(__name__).addHandler(logging.NullHandler())
logger = logging.getLogger(__name__)

__all__ = [
    "Config", "InvalidEncoding", "InvalidSecret", "Matched", "NotMatched",
    "TOTPAuthenticator", "TOTPError", "VerificationResult", "base32", "settings",
    "generate", "generate_secret", "hotp", "provisioning_uri", "qr_code",
    "remaining_seconds", "time_counter", "verify",
]


class TOTPAuthenticator:
    def __init__(self, secret: str = None, interval: int = DEFAULT_STEP, digits: int = DEFAULT_DIGITS,
                 strict: Optional[bool] = None):
        """
        Initialize authenticator
        If no secret is given a new secret is generated
        """
        self.interval = interval
        self.digits   = digits
        self.strict   = settings.strict_base32 if strict is None else strict
        if secret is None:
            self.secret = self.generate_secret()
        else:
            self.secret = base32.normalize(secret.strip(), strict=self.strict)
        # Fail fast on unusable secrets instead of at the first login
        self.secret_bytes = base32.decode(self.secret, strict=self.strict)
        if not self.secret_bytes:
            raise InvalidSecret("secret decodes to zero bytes")
        logger.debug("TOTP authenticator ready with a %d byte key", len(self.secret_bytes))

    @staticmethod
    def generate_secret(length: int = None) -> str:
        return generate_secret(settings.secret_length if length is None else length)

    def get_time_counter(self, for_time: float = None) -> int:
        return time_counter(for_time, self.interval)

    def hotp(self, counter: int) -> str:
        return hotp(self.secret_bytes, counter, self.digits)

    def at(self, for_time: float) -> str:
        return self.hotp(self.get_time_counter(for_time))

    def now(self) -> str:
        return self.at(None)

    def generate_current_otp(self) -> str:
        return self.now()

    def verify(self, otp, valid_window: int = None, for_time: float = None) -> VerificationResult:
        if valid_window is None:
            valid_window = settings.valid_window
        return verify(self.secret, otp, valid_window, for_time=for_time,
                      step=self.interval, digits=self.digits, strict=self.strict)

    def verify_otp(self, otp, valid_window: int = None, for_time: float = None) -> bool:
        return bool(self.verify(otp, valid_window, for_time))

    def get_secret(self) -> str:
        return self.secret

    def provisioning_uri(self, user: str, issuer: str = None) -> str:
        """
        Generate provisioning URI for authenticator apps
        """
        return provisioning_uri(self.secret, user, issuer or settings.issuer,
                                digits=self.digits, period=self.interval)

    def provisioning_uri_qr_code(self, user: str, issuer: str = None):
        qr = qr_code(self.provisioning_uri(user, issuer))
        return qr.make_image(fill_color="black", back_color="white")
