"""
Customer self-registration
"""

from shop_backend.models import AccountKind

from conftest import CUSTOMER_EMAIL, post_login


def register(client, **overrides):
    body = {
        'email': 'New.Person@Example.com',
        'password': 'long-enough-pass',
        'firstName': 'New',
        'lastName': 'Person',
        'phone': '555-0123',
    }
    body.update(overrides)
    return client.post('/api/auth/register', json=body)


def test_register_then_login(app, client, issuer, store):
    r = register(client)
    assert r.status_code == 201

    body = r.get_json()
    assert body['message'] == 'Registration successful'
    customer = body['data']['customer']
    assert customer['email'] == 'new.person@example.com'
    assert issuer.decode(body['data']['token'])['type'] == 'customer'

    with app.app_context():
        stored = store.find_by_email(AccountKind.CUSTOMER, 'new.person@example.com')
        assert stored.active
        assert stored.password_hash != 'long-enough-pass'

    r = post_login(client, 'new.person@example.com', 'long-enough-pass')
    assert r.status_code == 200
    assert r.get_json()['data']['userType'] == 'customer'


def test_duplicate_email(client, accounts):
    r = register(client, email=CUSTOMER_EMAIL.upper())
    assert r.status_code == 400
    assert r.get_json() == {'success': False, 'message': 'Email already registered'}


def test_registration_validation(client):
    r = client.post('/api/auth/register', json={'email': 'nope', 'password': 'short'})
    assert r.status_code == 400
    errors = r.get_json()['errors']
    assert 'Invalid email' in errors
    assert 'Password must be at least 8 characters' in errors
    assert 'First name is required' in errors
    assert 'Last name is required' in errors
    assert 'Phone is required' in errors
