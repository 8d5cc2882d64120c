"""
OTP generation and expiry arithmetic for password reset.
Codes are six decimal digits in [100000, 999999]; the floor is part of the contract.
"""
import secrets
import time

# OTP length and expiry
OTP_LENGTH = 6
OTP_MIN = 100000
OTP_MAX = 999999
OTP_EXPIRY_MINUTES = 5
OTP_TTL_MS = OTP_EXPIRY_MINUTES * 60 * 1000


def generate_otp() -> str:
    """Generate a 6-digit numeric OTP, uniformly from 100000-999999."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def otp_expires_at(issued_ms: int) -> int:
    """Return expiry (epoch ms) for an OTP issued at `issued_ms`."""
    return issued_ms + OTP_TTL_MS
