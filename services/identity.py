"""
Identity provider backed by the `accounts` table.
Resolves emails to accounts and rotates passwords; only create_account commits.
"""
from sqlalchemy.exc import IntegrityError

from models.account import Account
from services.errors import AccountNotFound, EmailAlreadyExists, InvalidEmail
from utils.validators import validate_email


def _normalize(email):
    if not isinstance(email, str):
        raise InvalidEmail()
    return email.strip().lower()


class SqlIdentityProvider:
    def __init__(self, db):
        self.db = db

    def get_user_by_email(self, email):
        """Return the enabled Account for `email` (case-insensitive)."""
        normalized = _normalize(email)
        if not validate_email(normalized):
            raise InvalidEmail()
        account = Account.query.filter_by(email=normalized).first()
        if not account or account.disabled:
            raise AccountNotFound()
        return account

    def update_password(self, uid, new_password):
        """Set a new password on the account; the caller commits."""
        account = Account.query.filter_by(uid=uid).first()
        if not account:
            raise AccountNotFound()
        account.set_password(new_password)
        self.db.session.flush()
        return account

    def create_account(self, email, password, display_name=None):
        normalized = _normalize(email)
        if not validate_email(normalized):
            raise InvalidEmail()
        if Account.query.filter_by(email=normalized).first():
            raise EmailAlreadyExists()
        account = Account(email=normalized, display_name=(display_name or '').strip() or None)
        account.set_password(password)
        self.db.session.add(account)
        try:
            self.db.session.commit()
        except IntegrityError:
            self.db.session.rollback()
            raise EmailAlreadyExists()
        return account
