"""
Session tokens

Tokens are signed JWTs carrying ``{id, email, type}``. Nothing is stored
server-side: validity is the signature plus the ``exp`` claim.
"""

import logging
from datetime import datetime, timezone

import jwt

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Sign and verify session tokens with a shared secret."""

    def __init__(self, secret_key, algorithm='HS256'):
        if not secret_key:
            raise ValueError('A signing key is required to issue tokens')
        self.secret_key = secret_key
        self.algorithm = algorithm

    def issue(self, claims, expires_in):
        """Return a signed token for ``claims`` that expires after ``expires_in``."""
        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload['iat'] = now
        payload['exp'] = now + expires_in
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token):
        """Return the verified claims.

        Raises ``jwt.ExpiredSignatureError`` or another ``jwt.InvalidTokenError``
        when the token cannot be trusted.
        """
        return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
