"""
Enrolment helpers: fresh secrets, otpauth:// URIs and QR codes for authenticator apps
"""
import secrets
import urllib.parse

import qrcode

from . import base32
from .constants import ALGORITHM, DEFAULT_DIGITS, DEFAULT_SECRET_LENGTH, DEFAULT_STEP


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Random shared secret of `length` bytes, Base32 encoded without padding
    """
    if length < 1:
        raise ValueError("secret length must be at least one byte")
    return base32.encode(secrets.token_bytes(length))


def provisioning_uri(secret: str, account: str, issuer: str,
                     digits: int = DEFAULT_DIGITS, period: int = DEFAULT_STEP) -> str:
    """
    Generate provisioning URI for authenticator apps
    """
    if not account or not issuer:
        raise ValueError("issuer and account name must not be empty")
    if ":" in issuer or ":" in account:
        raise ValueError("issuer and account must not contain ':'")
    # URL-encode account and issuer values
    label  = f"{urllib.parse.quote(issuer)}:{urllib.parse.quote(account)}"
    params = {
        "secret": secret,
        "issuer": issuer,
        "algorithm": ALGORITHM,
        "digits": digits,
        "period": period
    }
    query = urllib.parse.urlencode(params, quote_via=urllib.parse.quote)
    return f"otpauth://totp/{label}?{query}"


def qr_code(uri: str) -> qrcode.QRCode:
    """
    QR symbol carrying `uri`; call make_image() or print_ascii() on the result to display it
    """
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_L)
    qr.add_data(uri)
    qr.make(fit=True)
    return qr
