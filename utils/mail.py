"""
Email utility functions
"""
import logging

from flask_mail import Mail, Message

mail = Mail()

logger = logging.getLogger(__name__)

OTP_SUBJECT = "MyVoice974 - Code de vérification"


class MailGateway:
    """
    Outbound mail for OTP delivery. Credentials are read once from the app
    config at construction; without them the gateway only logs the code.
    """

    def __init__(self, mail_ext, config):
        self.mail = mail_ext
        self.username = config.get('MAIL_USERNAME')
        self.password = config.get('MAIL_PASSWORD')
        self.sender = config.get('MAIL_DEFAULT_SENDER') or self.username

    @property
    def enabled(self) -> bool:
        return bool(self.username and self.password)

    def send_otp_email(self, email: str, otp: str) -> bool:
        """
        Send the OTP to `email`. Returns True if a real email was sent, False
        in dev mode (no credentials). SMTP errors propagate to the caller.
        """
        if not self.enabled:
            logger.warning("[DEV] Email creds not set. OTP: %s for %s", otp, email)
            return False
        msg = Message(
            subject=OTP_SUBJECT,
            sender=self.sender,
            recipients=[email],
            body=f"Votre code est : {otp}. Expire dans 5 minutes.",
            html=_otp_email_html(otp),
        )
        self.mail.send(msg)
        logger.info("OTP sent successfully to %s", email)
        return True


def _otp_email_html(otp: str) -> str:
    """HTML body for the OTP email."""
    return f"""
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"><title>Code de vérification</title></head>
    <body style="font-family: system-ui, sans-serif; max-width: 480px; margin: 0 auto; padding: 24px;">
        <h2 style="color: #1a1a2e;">MyVoice974</h2>
        <p>Votre code est : <strong style="font-size: 24px; letter-spacing: 6px;">{otp}</strong>. Expire dans 5 minutes.</p>
        <hr style="border: none; border-top: 1px solid #eee; margin: 24px 0;">
        <p style="font-size: 12px; color: #999;">Si vous n'avez pas demandé ce code, ignorez cet email.</p>
    </body>
    </html>
    """
