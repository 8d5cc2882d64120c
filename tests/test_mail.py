import logging

import pytest

from utils.mail import OTP_SUBJECT, MailGateway, mail

CONFIGURED = {
    'MAIL_USERNAME': 'myvoice974@gmail.com',
    'MAIL_PASSWORD': 'app-password',
    'MAIL_DEFAULT_SENDER': 'myvoice974@gmail.com',
}


def test_disabled_without_credentials(app):
    gateway = MailGateway(mail, app.config)
    assert gateway.enabled is False


@pytest.mark.parametrize('missing', ['MAIL_USERNAME', 'MAIL_PASSWORD'])
def test_both_credentials_required(missing):
    config = dict(CONFIGURED, **{missing: None})
    assert MailGateway(mail, config).enabled is False


def test_dev_mode_logs_code(app, caplog):
    gateway = MailGateway(mail, app.config)
    with caplog.at_level(logging.WARNING, logger='utils.mail'):
        assert gateway.send_otp_email('a@b.com', '482913') is False
    assert '482913' in caplog.text
    assert 'a@b.com' in caplog.text


def test_sends_french_otp_message(app):
    gateway = MailGateway(mail, CONFIGURED)
    with mail.record_messages() as outbox:
        assert gateway.send_otp_email('a@b.com', '482913') is True

    assert len(outbox) == 1
    msg = outbox[0]
    assert msg.subject == OTP_SUBJECT
    assert msg.recipients == ['a@b.com']
    assert msg.sender == 'myvoice974@gmail.com'
    assert msg.body == 'Votre code est : 482913. Expire dans 5 minutes.'
    assert '<strong' in msg.html and '482913' in msg.html
