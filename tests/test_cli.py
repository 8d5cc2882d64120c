from models.account import Account


def test_create_account(app):
    result = app.test_cli_runner().invoke(args=['create-account', 'New@User.com', 'secret1', '--name', 'Nouvel'])

    assert result.exit_code == 0, result.output
    account = Account.query.filter_by(email='new@user.com').one()
    assert account.display_name == 'Nouvel'
    assert account.check_password('secret1')


def test_create_account_rejects_short_password(app):
    result = app.test_cli_runner().invoke(args=['create-account', 'new@user.com', '123'])

    assert result.exit_code != 0
    assert 'au moins 6 caractères' in result.output
    assert Account.query.count() == 0


def test_create_account_duplicate(app, account):
    result = app.test_cli_runner().invoke(args=['create-account', 'a@b.com', 'secret1'])

    assert result.exit_code != 0
    assert 'Cet email est déjà utilisé.' in result.output


def test_reset_password(app, account):
    result = app.test_cli_runner().invoke(args=['reset-password', 'a@b.com', 'brandnew'])

    assert result.exit_code == 0, result.output
    assert Account.query.filter_by(email='a@b.com').one().check_password('brandnew')


def test_reset_password_unknown_account(app):
    result = app.test_cli_runner().invoke(args=['reset-password', 'nouser@example.com', 'brandnew'])

    assert result.exit_code != 0
    assert 'Aucun compte trouvé' in result.output
