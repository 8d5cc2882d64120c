"""
Input validators shared by routes and services
"""
import re

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6


def validate_email(email):
    """True when email has a local part, an @ and a dotted domain"""
    return bool(email) and EMAIL_RE.match(email) is not None


def validate_password(password):
    """Return (is_valid, error_message)"""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return False, 'Le mot de passe doit contenir au moins 6 caractères'
    return True, None
