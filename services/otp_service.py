"""
OTP issuance and verification for password reset.

Records are created by issue_otp and consumed by verify_otp_and_reset. A
record is Active while unconsumed and now <= expires_at, Expired once that
predicate fails, and Consumed after a successful verification. Expired and
Consumed records are never touched again.
"""
import logging

from services.errors import CodeExpired, EmailRequired, InvalidOrExpiredCode, MissingFields
from utils.otp_helper import generate_otp, now_ms, otp_expires_at

logger = logging.getLogger(__name__)


class OtpService:
    def __init__(self, identity, store, mail_gateway, session, clock=now_ms):
        self.identity = identity
        self.store = store
        self.mail_gateway = mail_gateway
        self.session = session
        self.clock = clock

    def issue_otp(self, email):
        """
        Mint a code for an existing account, persist it and mail it.

        Returns {"success": True}, plus "dev": True when the mail gateway is
        not configured and the code was only logged. A delivery failure is
        logged and does not undo the stored record.
        """
        if not email:
            raise EmailRequired()

        self.identity.get_user_by_email(email)

        code = generate_otp()
        expires_at = otp_expires_at(self.clock())
        try:
            record = self.store.add(email, code, expires_at)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("OTP stored with id %s for %s", record.id, email)

        try:
            delivered = self.mail_gateway.send_otp_email(email, code)
        except Exception as e:
            logger.error("Failed to send OTP email to %s: %s", email, e, exc_info=True)
            return {"success": True}

        if not delivered:
            return {"success": True, "dev": True}
        return {"success": True}

    def verify_otp_and_reset(self, email, otp, new_password):
        """
        Check (email, otp) against an unconsumed, unexpired record and set
        the account password to `new_password`.

        Consuming the record and rotating the password commit together; the
        consume is conditional so two concurrent calls cannot both succeed.
        """
        if not email or not otp or not new_password:
            raise MissingFields()
        if not all(isinstance(v, str) for v in (email, otp, new_password)):
            raise InvalidOrExpiredCode()

        record = self.store.find_active(email, otp)
        if record is None:
            logger.warning("No valid OTP found for %s", email)
            raise InvalidOrExpiredCode()

        if record.is_expired(self.clock()):
            logger.warning("OTP expired for %s", email)
            raise CodeExpired()

        try:
            account = self.identity.get_user_by_email(email)
            if not self.store.claim(record):
                raise InvalidOrExpiredCode()
            self.identity.update_password(account.uid, new_password)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Password reset successfully for %s", email)
        return {"success": True}
