"""
Password hashing and verification (werkzeug.security)
"""

import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)


class PasswordVerifier:
    """Salted-hash comparison for stored account passwords."""

    def __init__(self, method='pbkdf2:sha256'):
        self.method = method

    def hash(self, plaintext):
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, plaintext, password_hash):
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, plaintext)
        except ValueError:
            # Unknown hash method in the stored value; treat as a mismatch
            logger.warning('Stored password hash has an unsupported format')
            return False
