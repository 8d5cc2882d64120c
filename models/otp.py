"""
One-time passcode records (the `otps` collection).
Codes are stored in plain text; expiry is epoch milliseconds.
"""
from sqlalchemy import func

from models import db

STATE_ACTIVE = 'active'
STATE_EXPIRED = 'expired'
STATE_CONSUMED = 'consumed'


class OtpRecord(db.Model):
    """
    One issued passcode. Several outstanding records may exist per email;
    `consumed` only ever goes from False to True. Rows are never deleted.
    """
    __tablename__ = 'otps'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, index=True)
    code = db.Column(db.String(6), nullable=False)
    expires_at = db.Column(db.BigInteger, nullable=False)
    consumed = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, server_default=func.now())

    def is_expired(self, now_ms):
        return now_ms > self.expires_at

    def state(self, now_ms):
        """Lifecycle state at `now_ms`; expiry is a predicate, never a stored transition."""
        if self.consumed:
            return STATE_CONSUMED
        if self.is_expired(now_ms):
            return STATE_EXPIRED
        return STATE_ACTIVE

    def __repr__(self):
        return f'<OtpRecord {self.id} {self.email}>'
