from models import db
from models.otp import OtpRecord


def test_find_active_ignores_consumed_and_other_emails(store):
    store.add('a@b.com', '123456', 10)
    store.add('c@d.com', '123456', 10)
    used = store.add('a@b.com', '654321', 10)
    used.consumed = True
    db.session.commit()

    assert store.find_active('a@b.com', '654321') is None
    assert store.find_active('a@b.com', '123456').email == 'a@b.com'


def test_find_active_is_case_sensitive_on_email(store):
    store.add('Mixed@Case.com', '123456', 10)
    db.session.commit()

    assert store.find_active('mixed@case.com', '123456') is None
    assert store.find_active('Mixed@Case.com', '123456') is not None


def test_duplicate_codes_resolve_to_newest(store):
    store.add('a@b.com', '123456', 10)
    newest = store.add('a@b.com', '123456', 20)
    db.session.commit()

    assert store.find_active('a@b.com', '123456').id == newest.id


def test_claim_succeeds_once(store):
    record = store.add('a@b.com', '123456', 10)
    db.session.commit()

    assert store.claim(record) is True
    assert record.consumed is True
    db.session.commit()
    assert store.claim(record) is False
    assert db.session.get(OtpRecord, record.id).consumed is True
