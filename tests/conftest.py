from types import SimpleNamespace

import pytest

from shop_backend import create_app
from shop_backend.config import TestConfig
from shop_backend.extensions import db
from shop_backend.models import AdminAccount, AdminRole, CustomerAccount

ADMIN_EMAIL = 'owner@example.com'
ADMIN_PASSWORD = 'admin-pass-123'
CUSTOMER_EMAIL = 'jane.doe@example.com'
CUSTOMER_PASSWORD = 'customer-pass-123'
DISABLED_EMAIL = 'gone@example.com'
DISABLED_PASSWORD = 'disabled-pass-123'


@pytest.fixture()
def app():
    # No context is held open here: each client request pushes its own,
    # so Flask-Login's per-request user never carries over.
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return app.extensions['credential_store']


@pytest.fixture()
def verifier(app):
    return app.extensions['password_verifier']


@pytest.fixture()
def issuer(app):
    return app.extensions['token_issuer']


def add_account(app, account):
    """Persist ``account`` and return a plain snapshot of its columns."""
    with app.app_context():
        app.extensions['credential_store'].add(account)
        return SimpleNamespace(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            kind=account.account_kind,
        )


def set_active(app, snapshot, active):
    with app.app_context():
        account = app.extensions['credential_store'].find_by_id(snapshot.kind, snapshot.id)
        account.active = active
        db.session.commit()


@pytest.fixture()
def accounts(app, verifier):
    """One active admin, one active customer and one disabled customer."""
    admin = add_account(app, AdminAccount(
        email=ADMIN_EMAIL,
        username='owner',
        password_hash=verifier.hash(ADMIN_PASSWORD),
        role=AdminRole.SUPER_ADMIN.value,
        active=True,
    ))
    customer = add_account(app, CustomerAccount(
        email=CUSTOMER_EMAIL,
        password_hash=verifier.hash(CUSTOMER_PASSWORD),
        first_name='Jane',
        last_name='Doe',
        phone='555-0100',
        active=True,
    ))
    disabled = add_account(app, CustomerAccount(
        email=DISABLED_EMAIL,
        password_hash=verifier.hash(DISABLED_PASSWORD),
        first_name='Gone',
        last_name='Away',
        phone='555-0199',
        active=False,
    ))
    return {'admin': admin, 'customer': customer, 'disabled': disabled}


def post_login(client, email, password):
    return client.post('/api/auth/login', json={'email': email, 'password': password})


def bearer(token):
    return {'Authorization': f'Bearer {token}'}
