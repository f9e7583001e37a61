from datetime import timedelta

import jwt
import pytest

from shop_backend.services import PasswordVerifier, TokenIssuer


def test_issue_and_decode():
    issuer = TokenIssuer('secret-a')
    token = issuer.issue({'id': 3, 'email': 'a@example.com', 'type': 'customer'}, timedelta(days=30))

    claims = issuer.decode(token)
    assert claims['id'] == 3
    assert claims['type'] == 'customer'
    assert claims['exp'] - claims['iat'] == 30 * 24 * 3600


def test_expired_token_rejected():
    issuer = TokenIssuer('secret-a')
    token = issuer.issue({'id': 1, 'type': 'admin'}, timedelta(seconds=-10))
    with pytest.raises(jwt.ExpiredSignatureError):
        issuer.decode(token)


def test_foreign_signature_rejected():
    token = TokenIssuer('secret-a').issue({'id': 1, 'type': 'admin'}, timedelta(days=7))
    with pytest.raises(jwt.InvalidSignatureError):
        TokenIssuer('secret-b').decode(token)


def test_signing_key_required():
    with pytest.raises(ValueError):
        TokenIssuer('')


def test_password_verifier():
    verifier = PasswordVerifier(method='pbkdf2:sha256:1000')
    hashed = verifier.hash('s3cret')

    assert hashed != 's3cret'
    assert verifier.verify('s3cret', hashed)
    assert not verifier.verify('S3cret', hashed)
    assert not verifier.verify('s3cret', '')
    # bcrypt-style value werkzeug cannot parse
    assert not verifier.verify('s3cret', '$2b$10$abcdefghijklmnopqrstuv')
