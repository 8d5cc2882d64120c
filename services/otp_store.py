"""
OTP record store over the `otps` table.
Nothing here commits; OtpService owns the transaction boundaries.
"""
from sqlalchemy.orm.attributes import set_committed_value

from models.otp import OtpRecord


class OtpStore:
    def __init__(self, db):
        self.db = db

    def add(self, email, code, expires_at):
        record = OtpRecord(email=email, code=code, expires_at=expires_at, consumed=False)
        self.db.session.add(record)
        self.db.session.flush()
        return record

    def find_active(self, email, code):
        """First unconsumed record matching (email, code), newest first. Expiry is not checked here."""
        return (
            OtpRecord.query
            .filter_by(email=email, code=code, consumed=False)
            .order_by(OtpRecord.id.desc())
            .first()
        )

    def claim(self, record):
        """
        Flip `consumed` to True only if it is still False.
        Returns False when a concurrent request consumed the record first.
        """
        updated = (
            OtpRecord.query
            .filter_by(id=record.id, consumed=False)
            .update({OtpRecord.consumed: True}, synchronize_session=False)
        )
        if updated:
            set_committed_value(record, 'consumed', True)
        return updated == 1
