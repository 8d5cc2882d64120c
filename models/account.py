"""
Account model definition (identity provider backing table)
"""
import uuid
from datetime import datetime

from werkzeug.security import generate_password_hash, check_password_hash

from models import db


def _new_uid():
    return uuid.uuid4().hex


class Account(db.Model):
    """End-user account; email is stored lower-cased"""
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    uid = db.Column(db.String(64), unique=True, nullable=False, default=_new_uid)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    display_name = db.Column(db.String(100), nullable=True)
    disabled = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check if password matches"""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<Account {self.email}>'
